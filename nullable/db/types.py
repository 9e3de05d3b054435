"""
This module provides a custom SQLAlchemy `TypeDecorator` for the nullable `Byte`.

It defines `ByteType`, which stores a `Byte` as a one-byte binary column and
reads it back through `Byte.scan`. A NULL column therefore loads as an unset
`Byte`, not a null one.
"""
from typing import Any

from sqlalchemy import Dialect
from sqlalchemy.types import LargeBinary, TypeDecorator

from nullable.core.exceptions import TypeMismatchError
from nullable.core.root_logger import get_logger
from nullable.types import Byte

logger = get_logger("db")


class ByteType(TypeDecorator[Byte]):
    """
    Custom SQLAlchemy type for handling `Byte` values.

    Bound parameters may be a `Byte`, a plain int (treated as a present byte)
    or None. Results are always returned as a new `Byte` instance.

    `Byte` is mutable, but in-place changes (e.g. `set_valid`) are not tracked
    by the ORM; assign a new instance to mark the attribute dirty.
    """

    impl = LargeBinary
    """The underlying SQLAlchemy type used for storage."""

    cache_ok = True
    """Indicates that this TypeDecorator is cacheable."""

    @property
    def python_type(self) -> type[Byte]:
        return Byte

    def process_bind_param(self, value: Any, dialect: Dialect) -> bytes | None:
        """
        Processes the value before binding it to a database parameter.

        Args:
            value (Any): A `Byte`, an int between 0 and 255, or None.
            dialect (Dialect): The SQLAlchemy dialect being used.

        Returns:
            bytes | None: A single byte, or None for null and unset values.

        Raises:
            TypeMismatchError: If the value is of any other type.
        """
        if value is None:
            return None
        if isinstance(value, Byte):
            return value.value()
        if isinstance(value, int) and not isinstance(value, bool):
            return Byte.from_value(value).value()
        raise TypeMismatchError(value, target=self.__class__.__name__)

    def process_result_value(self, value: Any, dialect: Dialect) -> Byte:
        """
        Processes the value retrieved from the database into a `Byte`.

        Args:
            value (Any): The raw driver value.
            dialect (Dialect): The SQLAlchemy dialect being used.

        Returns:
            Byte: The scanned value.
        """
        b = Byte()
        try:
            b.scan(value)
        except TypeMismatchError:
            logger.debug(f"unable to scan {value!r} from {dialect.name}")
            raise
        return b

    def copy_value(self, value: Byte | None) -> Byte | None:
        if value is None:
            return None
        return value.copy()

    def compare_values(self, x: Any, y: Any) -> bool:
        return x == y
