"""Tests for entry and collection processing."""

import pytest

from datadecorator import (
    DataDecorator,
    DecoratorConfig,
    OutputEntry,
    ParseError,
    ResolutionError,
    process,
    process_collection,
    validate_collection,
)
from datadecorator import registry as registry_module


@pytest.fixture
def decorator(registry) -> DataDecorator:
    return DataDecorator(registry)


class TestProcess:
    def test_function_template(self, decorator) -> None:
        assert decorator.process("${strtoupper(?)}:name", "foo") == OutputEntry("name", "FOO")

    def test_static_template(self, decorator) -> None:
        entry = decorator.process("${MyDecorator.commaToBar(?)}:out", "bar1,bar2,bar3")
        assert entry.key == "out"
        assert entry.value == "bar1|bar2|bar3"

    def test_presenter_template(self, decorator) -> None:
        assert decorator.process("${MyDecorator({attr: ?}).presentAttr(?)}:out", "baz").value == "BAZ"

    @pytest.mark.parametrize("key", ["name", "price$", "", 7, None])
    def test_non_template_passes_through(self, decorator, key) -> None:
        value = object()
        entry = decorator.process(key, value)
        assert entry.key == key
        assert entry.value is value

    def test_malformed_template(self, decorator) -> None:
        with pytest.raises(ParseError):
            decorator.process("${not a template pattern", "x")

    def test_static_helpers(self) -> None:
        assert DataDecorator.has_placeholder("${f(?)}:k")
        assert DataDecorator.parse("${f(?)}:k").outkey == "k"

    def test_config_presenter_marker(self, registry) -> None:
        registry.register("CarDisplay", registry.get("CarPresenter"))
        config = DecoratorConfig(presenter_suffix="Display", presenter_marker="Url")
        decorator = DataDecorator(registry, config)
        assert decorator.process("${Car({name: ?}).presentUrl()}:url", "x").value == "/cars/x"


class TestProcessCollection:
    def test_flat_mapping(self, decorator) -> None:
        row = {"id": 1, "${strtoupper(?)}:name": "foo", "age": 20}
        assert decorator.process_collection(row) == {"id": 1, "name": "FOO", "age": 20}

    def test_order_preserved(self, decorator) -> None:
        row = {"a": 1, "${strtoupper(?)}:b": "x", "c": 3}
        assert list(decorator.process_collection(row)) == ["a", "b", "c"]

    def test_list_of_rows(self, decorator) -> None:
        rows = [
            {"name": "Foo", "${avatar_path(small, ?)}:avatar": "foo"},
            {"name": "Bar", "${avatar_path(small, ?)}:avatar": "bar"},
        ]
        assert decorator.process_collection(rows) == [
            {"name": "Foo", "avatar": "http://127.0.0.1/img/small/foo.png"},
            {"name": "Bar", "avatar": "http://127.0.0.1/img/small/bar.png"},
        ]

    def test_nested_shape_preserved(self, decorator) -> None:
        data = {
            "user": {"name": "ann", "${strtoupper(?)}:code": "ab", "tags": ["x", "y"]},
            "count": 2,
        }
        assert decorator.process_collection(data) == {
            "user": {"name": "ann", "code": "AB", "tags": ["x", "y"]},
            "count": 2,
        }

    def test_nested_key_is_not_a_template(self, decorator) -> None:
        # Keys holding collections are kept as-is, even if they look like templates
        data = {"${strtoupper(?)}:x": {"a": 1}}
        assert decorator.process_collection(data) == {"${strtoupper(?)}:x": {"a": 1}}

    def test_last_entry_wins(self, decorator) -> None:
        row = {"name": "first", "${strtoupper(?)}:name": "second"}
        assert decorator.process_collection(row) == {"name": "SECOND"}

    def test_tuple_becomes_list(self, decorator) -> None:
        assert decorator.process_collection(({"${strtoupper(?)}:a": "b"}, 1)) == [{"a": "B"}, 1]

    def test_empty(self, decorator) -> None:
        assert decorator.process_collection({}) == {}
        assert decorator.process_collection([]) == []

    def test_input_not_mutated(self, decorator) -> None:
        row = {"${strtoupper(?)}:name": "foo"}
        decorator.process_collection([row])
        assert row == {"${strtoupper(?)}:name": "foo"}

    def test_failure_aborts_collection(self, decorator) -> None:
        rows = [{"${strtoupper(?)}:a": "x"}, {"${missing(?)}:a": "y"}]
        with pytest.raises(ResolutionError):
            decorator.process_collection(rows)

    def test_parse_error_aborts_collection(self, decorator) -> None:
        with pytest.raises(ParseError):
            decorator.process_collection({"ok": 1, "$broken": 2})


class TestValidateCollection:
    def test_returns_templates(self, decorator) -> None:
        data = [{"name": "a", "${Nope.f(?)}:x": 1}, {"inner": {"${g()}:y": 2}}]
        assert decorator.validate_collection(data) == ["${Nope.f(?)}:x", "${g()}:y"]

    def test_does_not_invoke(self) -> None:
        assert DataDecorator(registry_module.Registry()).validate_collection({"${f(?)}:k": 1}) == ["${f(?)}:k"]

    def test_malformed_property_list(self, decorator) -> None:
        with pytest.raises(ParseError, match="Invalid property entry"):
            decorator.validate_collection({"${Car({name ?}).presentUrl()}:url": 1})

    def test_malformed_template(self, decorator) -> None:
        with pytest.raises(ParseError):
            decorator.validate_collection([{"$nope": 1}])


class TestModuleFunctions:
    def setup_method(self):
        self._backup = dict(registry_module._registry._targets)
        registry_module.register(str.upper, name="strtoupper")

    def teardown_method(self):
        registry_module._registry.clear()
        for name, target in self._backup.items():
            registry_module._registry.register(name, target)

    def test_process(self) -> None:
        assert process("${strtoupper(?)}:name", "foo") == OutputEntry("name", "FOO")

    def test_process_collection(self) -> None:
        assert process_collection([{"${strtoupper(?)}:n": "a"}]) == [{"n": "A"}]

    def test_validate_collection(self) -> None:
        assert validate_collection({"${strtoupper(?)}:n": "a"}) == ["${strtoupper(?)}:n"]
