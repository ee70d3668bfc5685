"""Color representation, conversion between color spaces, mixing, scales and parsing."""

__version__ = "0.1.0"

__all__ = [
    "color",
    "conversions",
    "helper",
    "named",
    "parser",
    "scale",
    "spaces",
]