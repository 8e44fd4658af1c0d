"""Post-processing of collections whose keys may be templates.

Rows fetched from a data source often need derived values: a thumbnail URL
from a stored slug, a display name from a model's presenter. Instead of
walking the rows by hand, the query aliases a column as a template:

    {"name": "Foo", "${Avatar.path(?)}:avatar": "foo"}

and ``process_collection`` turns it into ``{"name": "Foo", "avatar": "/img/foo.png"}``.
"""

import logging
from collections.abc import Mapping
from typing import Any

from .config import DecoratorConfig
from .dispatcher import Dispatcher, OutputEntry
from .grammar import ParsedTemplate, has_placeholder, parse
from .registry import Registry, get_registry

logger = logging.getLogger(__name__)


def is_collection(value: Any) -> bool:
    """Whether a value is a nested collection rather than a scalar."""
    return isinstance(value, (Mapping, list, tuple))


class DataDecorator:
    """Applies templates to key/value entries and whole collections."""

    def __init__(self, registry: Registry | None = None, config: DecoratorConfig | None = None):
        self.registry = registry if registry is not None else get_registry()
        self.config = config or DecoratorConfig()
        self.dispatcher = Dispatcher(self.registry, self.config)

    @staticmethod
    def has_placeholder(template: Any) -> bool:
        return has_placeholder(template)

    @staticmethod
    def parse(template: str) -> ParsedTemplate:
        return parse(template)

    def process(self, template: Any, value: Any) -> OutputEntry:
        """Process a single entry.

        Non-template keys are returned unchanged together with their value.

        Raises:
            ParseError: If the key starts with ``$`` but is not a valid template
            ResolutionError: If a name in the template is not registered
        """
        if not has_placeholder(template):
            return OutputEntry(key=template, value=value)
        return self.dispatcher.invoke(parse(template), value)

    def process_collection(self, collection: Any) -> Any:
        """Process a collection recursively.

        Nested collections keep their key; scalar entries are replaced by
        their processed entry. When two entries resolve to the same output
        key, the one processed last wins.
        """
        if isinstance(collection, Mapping):
            output = {}
            for key, value in collection.items():
                if is_collection(value):
                    output[key] = self.process_collection(value)
                    continue
                entry = self.process(key, value)
                if entry.key in output:
                    logger.debug("Output key %r overwritten by %r", entry.key, key)
                output[entry.key] = entry.value
            return output

        # Sequence elements have no key, so only nested elements change
        return [
            self.process_collection(item) if is_collection(item) else item
            for item in collection
        ]

    def validate_collection(self, collection: Any) -> list[str]:
        """Parse every template key of a collection without invoking anything.

        Returns:
            Template keys found, in traversal order

        Raises:
            ParseError: On the first malformed template
        """
        found = []
        items = collection.items() if isinstance(collection, Mapping) else enumerate(collection)
        for key, value in items:
            if is_collection(value):
                found.extend(self.validate_collection(value))
            elif has_placeholder(key):
                parsed = parse(key)
                parsed.property_pairs()
                found.append(key)
        return found


def process(template: Any, value: Any) -> OutputEntry:
    """Process a single entry against the global registry."""
    return DataDecorator().process(template, value)


def process_collection(collection: Any) -> Any:
    """Process a collection against the global registry."""
    return DataDecorator().process_collection(collection)


def validate_collection(collection: Any) -> list[str]:
    """Validate the template keys of a collection."""
    return DataDecorator().validate_collection(collection)
