"""
This module defines `Byte`, a nullable single-byte value that tells apart three
states: never provided (unset), explicitly null, and present with a value.

The three states let API layers express partial updates faithfully:
- Unset: leave the field alone.
- Null: clear the field.
- Present: set the field to the carried byte.

`Byte` knows how to encode and decode itself for JSON payloads, raw text,
database drivers (see `nullable.db.types.ByteType`) and Pydantic models.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from nullable.core.exceptions import DecodeError, TypeMismatchError

NULL_BYTES = b"null"
"""The JSON null literal."""

MAX_BYTE = 0xFF

TEXT_LIKE = (str, bytes, bytearray, memoryview)
"""Driver value types that `Byte.scan` accepts."""


def _check_byte(value: Any) -> int:
    """
    Ensures `value` is an integer that fits in a single unsigned byte.

    Raises:
        TypeError: If `value` is not an integer (booleans are rejected too).
        ValueError: If `value` is outside 0..255.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"byte must be an int, not {type(value).__name__}")
    if not 0 <= value <= MAX_BYTE:
        raise ValueError(f"byte must be in range 0..255, got {value}")
    return value


class Byte:
    """
    A nullable byte that also records whether it was explicitly set.

    Attributes are read-only; state changes go through the constructors,
    `set_valid` and the decode methods, so a valid but unset value can never
    be observed.

    Example:
        ```python
        Byte()                 # unset
        Byte.new(0, False)     # null
        Byte.from_value(0x41)  # present
        ```
    """

    __slots__ = ("_byte", "_valid", "_set")

    def __init__(self, byte: int = 0, valid: bool = False, is_set: bool = False) -> None:
        if valid and not is_set:
            raise ValueError("a valid Byte must also be set")
        self._byte = _check_byte(byte)
        self._valid = bool(valid)
        self._set = bool(is_set)

    # ===============================================
    # Construction

    @classmethod
    def new(cls, byte: int, valid: bool) -> Byte:
        """Creates a set Byte. The byte is stored as given even when `valid` is False."""
        return cls(byte, valid, True)

    @classmethod
    def from_value(cls, byte: int) -> Byte:
        """Creates a Byte that is always valid."""
        return cls.new(byte, True)

    @classmethod
    def from_ptr(cls, byte: int | None) -> Byte:
        """Creates a Byte that is null when `byte` is None."""
        if byte is None:
            return cls.new(0, False)
        return cls.new(byte, True)

    # ===============================================
    # State

    @property
    def byte(self) -> int:
        """The stored byte. Only meaningful when `valid` is True."""
        return self._byte

    @property
    def valid(self) -> bool:
        return self._valid

    @property
    def set(self) -> bool:
        return self._set

    def is_valid(self) -> bool:
        """Returns True if this carries an explicit value and is not null."""
        return self._set and self._valid

    def is_set(self) -> bool:
        """Returns True if this carries an explicit value, null included."""
        return self._set

    def is_zero(self) -> bool:
        """Returns True for unset and null Bytes alike."""
        return not self._valid

    def set_valid(self, byte: int) -> None:
        """Changes the value and marks it as set and non-null."""
        self._byte = _check_byte(byte)
        self._valid = True
        self._set = True

    def ptr(self) -> int | None:
        """Returns a copy of the stored byte, or None if this Byte is null."""
        if not self._valid:
            return None
        return self._byte

    def _assign(self, byte: int, valid: bool, is_set: bool) -> None:
        self._byte, self._valid, self._set = byte, valid, is_set

    # ===============================================
    # JSON

    def unmarshal_json(self, data: bytes | str) -> None:
        """
        Decodes a JSON document into this Byte.

        The Byte is marked as set before the payload is inspected, so a failed
        decode still leaves it set; `valid` and `byte` keep their previous
        values in that case.

        Args:
            data (bytes | str): The raw JSON document. Empty input, `null`
                (surrounding whitespace allowed) and `""` decode to null.
                Whitespace-only input is malformed.

        Raises:
            DecodeError: If `data` is not valid JSON, is not a JSON string, holds
                more than one character, or holds a character above U+00FF.
        """
        self._set = True

        if isinstance(data, str):
            data = data.encode("utf-8")
        data = bytes(data)

        if not data or data.strip() == NULL_BYTES:
            self._valid = False
            self._byte = 0
            return

        try:
            decoded = json.loads(data)
        except (ValueError, RecursionError) as e:
            raise DecodeError(f"json: {e}") from e

        if not isinstance(decoded, str):
            raise DecodeError(f"json: cannot unmarshal {type(decoded).__name__} into Byte")

        self._decode_char(decoded, "json")

    def marshal_json(self) -> bytes:
        """
        Encodes this Byte as a JSON document.

        The byte is written as the one-character string whose code point equals
        the byte, so every value from 0x00 to 0xFF survives a round trip.
        """
        if not self._valid:
            return NULL_BYTES
        return json.dumps(chr(self._byte)).encode("ascii")

    def _decode_char(self, text: str, source: str) -> None:
        if len(text) > 1:
            raise DecodeError(f"{source}: cannot convert to byte, text length exceeds one byte")
        if not text:
            self._valid = False
            self._byte = 0
            return

        code_point = ord(text)
        if code_point > MAX_BYTE:
            raise DecodeError(f"{source}: cannot convert to byte, {text!r} is outside 0x00..0xff")

        self._byte = code_point
        self._valid = True

    # ===============================================
    # Text

    def unmarshal_text(self, text: bytes | bytearray | memoryview | str) -> None:
        """
        Decodes raw text into this Byte. Empty text decodes to null.

        Raises:
            DecodeError: If the text is longer than one byte.
        """
        self._set = True

        if isinstance(text, str):
            text = text.encode("utf-8")
        text = bytes(text)

        if not text:
            self._valid = False
            self._byte = 0
            return

        if len(text) > 1:
            raise DecodeError("text: cannot convert to byte, text length exceeds one byte")

        self._valid = True
        self._byte = text[0]

    def marshal_text(self) -> bytes:
        if not self._valid:
            return b""
        return bytes([self._byte])

    # ===============================================
    # Database driver

    def scan(self, value: Any) -> None:
        """
        Populates this Byte from a value handed back by a database driver.

        A NULL column, or an empty text value, resets the Byte to unset (not
        null). Text-like values contribute their first byte; `str` values are
        UTF-8 encoded first.

        Raises:
            TypeMismatchError: If the driver value is not None or text-like.
        """
        if value is None:
            self._assign(0, False, False)
            return

        if not isinstance(value, TEXT_LIKE):
            raise TypeMismatchError(value)

        raw = value.encode("utf-8") if isinstance(value, str) else bytes(value)
        if not raw:
            self._assign(0, False, False)
            return

        self._assign(raw[0], True, True)

    def value(self) -> bytes | None:
        """Returns the database driver value: a single byte, or None when null."""
        if not self._valid:
            return None
        return bytes([self._byte])

    # ===============================================
    # Pydantic

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(cls._serialize),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler) -> JsonSchemaValue:
        return handler(core_schema.nullable_schema(core_schema.str_schema(max_length=1)))

    @classmethod
    def _validate(cls, value: Any) -> Byte:
        """
        Converts model input into a Byte.

        Accepts a Byte (copied), None (null), a str (same rules as a decoded
        JSON string), a bytes-like value (same rules as text) or an int.
        """
        if isinstance(value, Byte):
            return value.copy()

        b = cls()
        if value is None:
            b._assign(0, False, True)
        elif isinstance(value, str):
            b._set = True
            b._decode_char(value, "json")
        elif isinstance(value, (bytes, bytearray, memoryview)):
            b.unmarshal_text(value)
        elif isinstance(value, int) and not isinstance(value, bool):
            b.set_valid(value)
        else:
            raise ValueError(f"cannot convert {type(value).__name__} to Byte")
        return b

    @staticmethod
    def _serialize(value: Byte) -> str | None:
        if not value.valid:
            return None
        return chr(value.byte)

    # ===============================================
    # Python protocol

    def copy(self) -> Byte:
        return Byte(self._byte, self._valid, self._set)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> Byte:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Byte):
            return NotImplemented
        if self._set != other._set or self._valid != other._valid:
            return False
        return not self._valid or self._byte == other._byte

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        if self._valid:
            return f"Byte({self._byte:02x})"
        return "Byte(invalid)"

    def __repr__(self) -> str:
        if not self._set:
            return "<Byte unset>"
        if not self._valid:
            return "<Byte null>"
        return f"<Byte 0x{self._byte:02x}>"
