from .byte import NULL_BYTES, Byte

__all__ = ["NULL_BYTES", "Byte"]
