"""Materialize attribute paths such as ``make->company->name`` into objects."""

import re
from collections.abc import MutableMapping
from types import SimpleNamespace
from typing import Any

# "->" chains, with "." accepted as an alternative
CHAIN_SEPARATOR = re.compile(r"\s*(?:->|\.)\s*")


def split_path(path: str) -> list[str]:
    """Split an attribute path into its segments."""
    parts = CHAIN_SEPARATOR.split(path.strip())
    if not all(parts):
        raise ValueError(f"Invalid attribute path: {path!r}")
    return parts


def _assign(target: Any, name: str, value: Any) -> None:
    if isinstance(target, MutableMapping):
        target[name] = value
    else:
        setattr(target, name, value)


def reconstruct_call_chain(target: Any, path: str, value: Any) -> Any:
    """Build a call chain into ``target`` ending in ``value``.

    Given ``target = SimpleNamespace()`` and path ``make->company->name``,
    afterwards ``target.make.company.name == value``. Intermediate nodes are
    always fresh: a ``dict`` when ``target`` is a mutable mapping, otherwise
    a ``SimpleNamespace``.

    Returns:
        The original ``target``
    """
    head, *rest = split_path(path)

    if not rest:
        _assign(target, head, value)
        return target

    node = {} if isinstance(target, MutableMapping) else SimpleNamespace()
    _assign(target, head, reconstruct_call_chain(node, "->".join(rest), value))
    return target


def build_call_chain(path: str, value: Any) -> SimpleNamespace:
    """Build a standalone object graph for ``path`` ending in ``value``."""
    return reconstruct_call_chain(SimpleNamespace(), path, value)
