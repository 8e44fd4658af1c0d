"""DataDecorator error types and exit codes."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes for the command line interface."""

    SUCCESS = 0
    RUNTIME_ERROR = 1
    PARSE_ERROR = 2
    RESOLUTION_ERROR = 3
    INPUT_ERROR = 4


class DecoratorError(Exception):
    """Base error for all DataDecorator errors."""

    exit_code: ExitCode = ExitCode.RUNTIME_ERROR


class ParseError(DecoratorError):
    """Key starts with the sentinel but is not a valid template."""

    exit_code = ExitCode.PARSE_ERROR

    def __init__(self, message: str, template: str | None = None):
        super().__init__(message)
        self.template = template

    def __str__(self) -> str:
        if self.template is None:
            return self.args[0]
        return f"{self.args[0]}: {self.template!r}"


class ResolutionError(DecoratorError):
    """Function, class or method name is not in the registry."""

    exit_code = ExitCode.RESOLUTION_ERROR

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class InputError(DecoratorError):
    """Error loading a collection file or registry module."""

    exit_code = ExitCode.INPUT_ERROR
