"""Positional argument binding for template parameter lists."""

from typing import Any

from .grammar import PLACEHOLDER


def bind_params(params: str | None, value: Any) -> list[Any]:
    """Split a parameter list and bind the placeholder to a value.

    Every ``?`` token is replaced with ``value``; any other token is passed
    through as a literal string. Empty lists bind to no arguments.

    Examples:
        bind_params("short, ?", "a.png") -> ["short", "a.png"]
        bind_params(None, "x") -> []
    """
    if not params or not params.strip():
        return []
    args = []
    for param in params.split(","):
        token = param.strip()
        args.append(value if token == PLACEHOLDER else token)
    return args
