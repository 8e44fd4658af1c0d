"""Invocation of parsed templates against the registry."""

import logging
from dataclasses import dataclass
from typing import Any

from .binding import bind_params
from .callchain import reconstruct_call_chain
from .config import DecoratorConfig
from .grammar import PLACEHOLDER, ParsedTemplate, TemplateShape
from .registry import Registry

logger = logging.getLogger(__name__)


@dataclass
class OutputEntry:
    """Key/value pair replacing a template entry in the output."""

    key: Any
    value: Any


class Dispatcher:
    """Resolves a parsed template and performs the call it describes.

    Exceptions raised by the called function, model or presenter propagate
    unchanged.
    """

    def __init__(self, registry: Registry, config: DecoratorConfig | None = None):
        self.registry = registry
        self.config = config or DecoratorConfig()

    def invoke(self, parsed: ParsedTemplate, value: Any) -> OutputEntry:
        """Invoke a parsed template with the current value.

        Raises:
            ResolutionError: If a referenced name cannot be resolved
        """
        match parsed.shape:
            case TemplateShape.FUNCTION:
                result = self._call_function(parsed, value)
            case TemplateShape.STATIC:
                result = self._call_static(parsed, value)
            case TemplateShape.PRESENTER:
                result = self._call_presenter(parsed, value)
        return OutputEntry(key=parsed.outkey, value=result)

    def _call_function(self, parsed: ParsedTemplate, value: Any) -> Any:
        func = self.registry.resolve_function(parsed.method)
        args = bind_params(parsed.params, value)
        logger.debug("Calling %s(%d args) for %r", parsed.method, len(args), parsed.outkey)
        return func(*args)

    def _call_static(self, parsed: ParsedTemplate, value: Any) -> Any:
        cls = self.registry.resolve(parsed.class_name, kind="class")
        method = self.registry.resolve_method(cls, parsed.method)
        args = bind_params(parsed.params, value)
        logger.debug(
            "Calling %s.%s(%d args) for %r",
            parsed.class_name,
            parsed.method,
            len(args),
            parsed.outkey,
        )
        return method(*args)

    def presenter_name(self, parsed: ParsedTemplate) -> str:
        """Name of the class whose instance wraps the model."""
        if self.config.presenter_marker in parsed.method:
            return parsed.class_name + self.config.presenter_suffix
        return parsed.class_name

    def _call_presenter(self, parsed: ParsedTemplate, value: Any) -> Any:
        model_cls = self.registry.resolve_class(parsed.class_name)
        model = model_cls()
        for name, prop_value in parsed.property_pairs():
            # Literal property values are not bound onto the model
            if prop_value == PLACEHOLDER:
                reconstruct_call_chain(model, name, value)

        presenter_name = self.presenter_name(parsed)
        presenter = self.registry.resolve_class(presenter_name)(model)
        method = self.registry.resolve_method(presenter, parsed.method)
        logger.debug(
            "Calling %s(%s).%s() for %r",
            presenter_name,
            parsed.class_name,
            parsed.method,
            parsed.outkey,
        )
        # Template parameters of the presenter method are never passed
        return method()
