"""Parsers for tag, constraint and I/O signals in problem data."""

from .constraint_parser import extract_constraints, extract_io_structure, io_shapes, scale_of
from .tag_normalizer import normalize_tag, normalize_tags

__all__ = [
    "extract_constraints",
    "extract_io_structure",
    "io_shapes",
    "normalize_tag",
    "normalize_tags",
    "scale_of",
]
