class NullableError(Exception):
    """Base class for every error raised by the nullable value types."""

    pass


class DecodeError(NullableError, ValueError):
    """
    Raised when a JSON or text payload cannot be decoded into a value.

    Covers malformed JSON, a JSON value of the wrong kind, and payloads that
    carry more than one byte.
    """

    def __init__(self, message: str = "cannot decode value"):
        self.message = message
        super().__init__(self.message)

    def __str__(self):
        return f"{self.message}"


class TypeMismatchError(NullableError, TypeError):
    """Raised when a database driver hands back a value of an unsupported type."""

    def __init__(self, value: object, target: str = "Byte"):
        self.value = value
        self.message = f"cannot scan {type(value).__name__} into {target}"
        super().__init__(self.message)

    def __str__(self):
        return f"{self.message}"

