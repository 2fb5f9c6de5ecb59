"""
Error types - every failure raised by the things helpers
"""

from enum import Enum


class ErrorType(str, Enum):
    """Base error type classification"""

    MISSING_VALUE = "missing_value"
    ARGUMENT_NOT_SPECIFIED = "argument_not_specified"
    NO_MATCH_FOUND = "no_match_found"
    CODEC_ERROR = "codec_error"


class ThingsError(Exception):
    """
    Base exception for the things helpers
    """

    def __init__(self, error_type: ErrorType, message: str, context: dict | None = None):
        self.error_type = error_type
        self.message = message
        self.context = context or {}
        super().__init__(f"[{error_type.value}] {message}")


class MissingValueError(ThingsError):
    """
    A candidate value failed the presence check
    (None, False, empty string, empty collection or a failed predicate)
    """

    def __init__(self, message: str = "Value not specified.", context: dict | None = None):
        super().__init__(ErrorType.MISSING_VALUE, message, context)


class ArgumentNotSpecifiedError(ThingsError):
    """
    A required argument (collection, predicate, factory, mapper) was absent
    """

    def __init__(
        self, message: str | None = None, argument: str | None = None, context: dict | None = None
    ):
        ctx = context or {}
        if argument:
            ctx["argument"] = argument
        if message is None:
            message = f"{(argument or 'Argument').capitalize()} not specified."
        super().__init__(ErrorType.ARGUMENT_NOT_SPECIFIED, message, ctx)
        self.argument = argument


class NoMatchFoundError(ThingsError):
    """
    An either-selector ran out of candidates
    """

    def __init__(
        self, message: str = "No match found.", candidates: int = 0, context: dict | None = None
    ):
        ctx = context or {}
        ctx["candidates"] = candidates
        super().__init__(ErrorType.NO_MATCH_FOUND, message, ctx)
        self.candidates = candidates


class CodecError(ThingsError):
    """
    JSON encode/decode failure

    Raised by the strict codec functions only; the convenience wrappers
    convert it into an empty result.
    """

    def __init__(self, message: str, operation: str | None = None, context: dict | None = None):
        ctx = context or {}
        if operation:
            ctx["operation"] = operation
        super().__init__(ErrorType.CODEC_ERROR, message, ctx)
        self.operation = operation
