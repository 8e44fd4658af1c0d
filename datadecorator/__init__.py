"""DataDecorator - template-driven post-processing of key/value collections."""

from .binding import bind_params
from .callchain import build_call_chain, reconstruct_call_chain
from .config import DecoratorConfig
from .decorator import (
    DataDecorator,
    process,
    process_collection,
    validate_collection,
)
from .dispatcher import Dispatcher, OutputEntry
from .errors import (
    DecoratorError,
    ExitCode,
    InputError,
    ParseError,
    ResolutionError,
)
from .grammar import ParsedTemplate, TemplateShape, has_placeholder, match, parse
from .registry import Registry, get_registry, register

__version__ = "0.1.0"

__all__ = [
    "DataDecorator",
    "DecoratorConfig",
    "Dispatcher",
    "OutputEntry",
    "ParsedTemplate",
    "TemplateShape",
    "Registry",
    "get_registry",
    "register",
    "process",
    "process_collection",
    "validate_collection",
    "has_placeholder",
    "match",
    "parse",
    "bind_params",
    "reconstruct_call_chain",
    "build_call_chain",
    "DecoratorError",
    "ParseError",
    "ResolutionError",
    "InputError",
    "ExitCode",
]
