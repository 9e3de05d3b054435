from .types import ByteType

__all__ = ["ByteType"]
