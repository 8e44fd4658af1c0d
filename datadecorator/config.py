"""Naming rules shared by the dispatcher and the collection processor."""

from dataclasses import dataclass

DEFAULT_PRESENTER_SUFFIX = "Presenter"
DEFAULT_PRESENTER_MARKER = "present"


@dataclass
class DecoratorConfig:
    """Naming rules for model/presenter templates.

    A method whose name contains ``presenter_marker`` is called on the class
    named ``class_name + presenter_suffix``; any other method is called on an
    instance of the model class itself.
    """

    presenter_suffix: str = DEFAULT_PRESENTER_SUFFIX
    presenter_marker: str = DEFAULT_PRESENTER_MARKER
