"""
This module defines `NullableModel`, a base Pydantic model for partial-update
payloads built from nullable fields.

Declare nullable fields with `Field(default_factory=Byte)` so that a field the
client leaves out stays unset:

```python
class DevicePatch(NullableModel):
    flags: Byte = Field(default_factory=Byte)
    mode: Byte = Field(default_factory=Byte)
```

`{"flags": null}` then clears `flags` and leaves `mode` untouched when the
payload is applied with `apply_to`.
"""

from __future__ import annotations

from typing import Any, TypeVar

from humps import camelize
from pydantic import BaseModel, ConfigDict

from nullable.core.root_logger import get_logger
from nullable.types import Byte

T = TypeVar("T")

logger = get_logger("schemas")


class NullableModel(BaseModel):
    """
    A base Pydantic model that tracks which fields a client explicitly provided.

    - `model_config`: camelCase aliases for API interaction, population by the
      Python field names, and construction from ORM objects.
    - `explicit_fields`: the fields that were provided, null included.
    - `apply_to`: copies the provided fields onto another object.
    """

    model_config = ConfigDict(
        alias_generator=camelize,
        populate_by_name=True,
        from_attributes=True,
    )

    def explicit_fields(self) -> list[str]:
        """
        Returns the names of the fields the client provided.

        A `Byte` field counts as provided when it is set, whether it holds a
        value or null. Other fields count when Pydantic recorded them as set.
        """
        fields = []
        for field_name in type(self).model_fields:
            value = getattr(self, field_name)
            if isinstance(value, Byte):
                if value.is_set():
                    fields.append(field_name)
            elif field_name in self.model_fields_set:
                fields.append(field_name)
        return fields

    def apply_to(self, target: T, replace_null: bool = True) -> T:
        """
        Applies the provided fields of this model onto `target`.

        Only attributes that already exist on `target` are written. Unset
        fields are skipped.

        Args:
            target (T): The object to update in place, e.g. an ORM instance or
                another model.
            replace_null (bool, optional): If True, null fields clear the
                matching attribute on `target`. If False, null fields are
                skipped. Defaults to True.

        Returns:
            T: The updated `target`.
        """
        applied = []
        for field_name in self.explicit_fields():
            if not hasattr(target, field_name):
                continue

            value: Any = getattr(self, field_name)
            if isinstance(value, Byte):
                if value.is_zero() and not replace_null:
                    continue
                value = value.copy()
            elif value is None and not replace_null:
                continue

            setattr(target, field_name, value)
            applied.append(field_name)

        logger.debug(f"applied {applied} to {type(target).__name__}")
        return target
