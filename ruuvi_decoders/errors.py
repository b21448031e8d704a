"""Exception hierarchy for payload decoding failures."""

from __future__ import annotations


class DecodeError(Exception):
    """Base class for every failure the decoders can produce."""

    # Whether the same input might decode once more formats are registered
    transient = False


class InvalidHex(DecodeError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid hex string: {detail}")


class InvalidLength(DecodeError):
    """Byte length does not match a format's fixed payload-with-address length.

    ``expected`` is None when the input was empty.
    """

    def __init__(self, expected: int | None, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        if expected is None:
            detail = "Empty data"
        else:
            detail = f"Expected {expected} bytes, got {actual}"
        super().__init__(f"Invalid data length: {detail}")


class UnsupportedFormat(DecodeError):
    transient = True

    def __init__(self, format_id: int) -> None:
        self.format_id = format_id
        super().__init__(f"Unsupported data format: 0x{format_id:02X}")


class InvalidData(DecodeError):
    def __init__(self, detail: str, field: str | None = None, value: object = None) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid data values: {detail}")

    @classmethod
    def invalid_field(cls, field: str, value: object) -> "InvalidData":
        return cls(f"Invalid {field} value: {value}", field=field, value=value)


class ValidationFailed(DecodeError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Validation failed: {detail}")


class DecryptionFailed(DecodeError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Decryption failed: {detail}")


class MissingField(DecodeError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required field: {field}")
