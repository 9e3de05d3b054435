from .nullable_model import NullableModel

__all__ = ["NullableModel"]
