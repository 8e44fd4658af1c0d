"""Shared test fixtures for DataDecorator tests."""

from pathlib import Path

import pytest

from datadecorator import Registry


class MyDecorator:
    attr = None

    @staticmethod
    def commaToBar(value):
        return value.replace(",", "|")

    @classmethod
    def join(cls, sep, *values):
        return sep.join(values)


class MyDecoratorPresenter:
    def __init__(self, model):
        self.model = model

    def presentAttr(self):
        return self.model.attr.upper()


class Car:
    """Model that is also its own presenter for non-"present" methods."""

    def __init__(self, model=None):
        self.model = model

    def slug(self):
        return self.model.name.lower().replace(" ", "-")


class CarPresenter:
    def __init__(self, model):
        self.model = model

    def presentUrl(self):
        return f"/cars/{self.model.name}"

    def presentMake(self):
        return f"{self.model.make.company.name} {self.model.name}"

    def presentKind(self):
        return getattr(self.model, "kind", "unknown")


def strtoupper(value):
    return value.upper()


def avatar_path(size, name):
    return f"http://127.0.0.1/img/{size}/{name}.png"


def fail(value):
    raise RuntimeError(f"cannot handle {value}")


@pytest.fixture
def registry() -> Registry:
    """Registry with the test functions, models and presenters."""
    registry = Registry()
    for target in (MyDecorator, MyDecoratorPresenter, Car, CarPresenter, strtoupper, avatar_path, fail):
        registry.register(target.__name__, target)
    return registry


@pytest.fixture
def targets_module(tmp_path: Path) -> Path:
    """Python file registering template targets through a register() hook."""
    path = tmp_path / "targets.py"
    path.write_text(
        "class Avatar:\n"
        "    @staticmethod\n"
        "    def getAvatarPath(name):\n"
        "        return f'http://127.0.0.1/test/img/{name}.png'\n"
        "\n"
        "\n"
        "def register(registry):\n"
        "    registry.register('Avatar', Avatar)\n"
    )
    return path


@pytest.fixture
def collection_file(tmp_path: Path) -> Path:
    """JSON collection of rows with an avatar template column."""
    path = tmp_path / "rows.json"
    path.write_text(
        '[{"name": "Foo", "age": 20, "${Avatar.getAvatarPath(?)}:avatar": "foo"},'
        ' {"name": "Bar", "age": 24, "${Avatar.getAvatarPath(?)}:avatar": "bar"}]'
    )
    return path
