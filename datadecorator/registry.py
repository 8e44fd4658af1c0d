"""Name registry for template functions, models and presenters.

Templates never reach into module globals. Every name a template mentions
must be registered by the host application first:

    from datadecorator import register

    @register
    class Avatar:
        @staticmethod
        def path(name):
            return f"/img/{name}.png"

    register(str.upper, name="upper")
"""

import logging
from collections.abc import Callable
from typing import Any

from .errors import ResolutionError

logger = logging.getLogger(__name__)


class Registry:
    """Registry mapping template names to functions and classes."""

    def __init__(self):
        self._targets: dict[str, Any] = {}

    def register(self, name: str, target: Any) -> None:
        """Register a function or class under a name.

        Registering an existing name replaces the previous target.
        """
        if not callable(target):
            raise TypeError(f"Cannot register non-callable {target!r} as {name!r}")
        if name in self._targets:
            logger.debug("Replacing registry entry %r", name)
        self._targets[name] = target

    def register_as(self, name: str | None = None) -> Callable[[Any], Any]:
        """Decorator registering a function or class, by default under its ``__name__``."""

        def decorator(target: Any) -> Any:
            self.register(name or target.__name__, target)
            return target

        return decorator

    def unregister(self, name: str) -> None:
        self._targets.pop(name, None)

    def clear(self) -> None:
        self._targets.clear()

    def get(self, name: str) -> Any | None:
        """Get a registered target by name."""
        return self._targets.get(name)

    def names(self) -> list[str]:
        return list(self._targets)

    def __contains__(self, name: object) -> bool:
        return name in self._targets

    def __len__(self) -> int:
        return len(self._targets)

    def resolve(self, name: str, kind: str = "name") -> Any:
        """Get a registered target, raising if it is missing."""
        target = self._targets.get(name)
        if target is None:
            raise ResolutionError(
                f"Unknown {kind}: {name!r}. Registered: {sorted(self._targets)}",
                name=name,
            )
        return target

    def resolve_function(self, name: str) -> Callable[..., Any]:
        return self.resolve(name, kind="function")

    def resolve_class(self, name: str) -> Callable[..., Any]:
        """Get a model or presenter constructor: a class or any factory callable."""
        return self.resolve(name, kind="class")

    def resolve_method(self, owner: Any, method: str) -> Callable[..., Any]:
        """Look up a callable attribute on a resolved class or instance."""
        func = getattr(owner, method, None)
        if func is None or not callable(func):
            owner_name = owner.__name__ if isinstance(owner, type) else type(owner).__name__
            raise ResolutionError(
                f"{owner_name} has no callable method {method!r}",
                name=f"{owner_name}.{method}",
            )
        return func


# Global registry
_registry = Registry()


def get_registry() -> Registry:
    """Get the global registry."""
    return _registry


def register(target: Any = None, name: str | None = None) -> Any:
    """Register a function or class globally.

    Works as a plain call, ``register(func)``, or as a decorator with or
    without arguments, ``@register`` / ``@register(name="alias")``.
    """
    if target is None:
        return _registry.register_as(name)
    _registry.register(name or target.__name__, target)
    return target
