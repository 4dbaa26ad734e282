"""Board document grammar: line classifier, parser, id allocation, serializer."""

from .classifier import ClassifiedLine, LineContext, LineRole, classify
from .ids import IdAllocator, allocate_ids
from .parser import normalize_newlines, parse, read_counter
from .serializer import serialize

__all__ = [
    "ClassifiedLine",
    "IdAllocator",
    "LineContext",
    "LineRole",
    "allocate_ids",
    "classify",
    "normalize_newlines",
    "parse",
    "read_counter",
    "serialize",
]
