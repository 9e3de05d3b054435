from nullable.core.exceptions import DecodeError, NullableError, TypeMismatchError
from nullable.types import NULL_BYTES, Byte

__all__ = ["NULL_BYTES", "Byte", "DecodeError", "NullableError", "TypeMismatchError"]
