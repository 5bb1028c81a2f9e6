"""
Decode error taxonomy.

Every failure inside the decode pipeline is one of these exceptions. Record
builders let them propagate; the public decode functions in
``academics.data.parser`` catch them at their boundary and turn them into a
failed ``DecodeResult``.
"""


class DecodeError(Exception):
    """Base class for all failures raised while decoding a payload."""


class MissingOrInvalidField(DecodeError):
    """A required field is absent, null, or of the wrong JSON type."""

    def __init__(self, field: str, reason: str = "missing"):
        self.field = field
        self.reason = reason
        super().__init__(f"Field '{field}' is {reason}")


class MalformedTimestamp(DecodeError):
    """A date or time field does not match its expected pattern."""

    def __init__(self, field: str, text: str):
        self.field = field
        self.text = text
        super().__init__(f"Field '{field}' has malformed timestamp {text!r}")


class UnrecognizedVariant(DecodeError):
    """
    A course type code outside the known set.

    Not fatal: the course builder skips the element that carries it.
    """

    def __init__(self, code):
        self.code = code
        super().__init__(f"Unrecognized course type code {code!r}")


class StructuralFailure(DecodeError):
    """The document itself is unusable: bad JSON or a missing top-level part."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)
