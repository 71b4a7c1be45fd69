from .zigzag import zigzag_conversion, zigzag_rows

__all__ = [
    "zigzag_conversion",
    "zigzag_rows",
]
