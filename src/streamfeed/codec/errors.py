"""Errors raised by the activity codec."""


class CodecError(ValueError):
    """Base class for encode and decode failures."""


class StructuralParseError(CodecError):
    """Raised when a document cannot be read as a JSON object at all."""


class ActivityValidationError(CodecError):
    """Raised when an activity field is not allowed onto the wire."""
