from ._nullable import NullableModel

__all__ = ["NullableModel"]
