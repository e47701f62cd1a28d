"""
Parse and serialise the HTTP Cache-Control header (RFC9111 Section 5.2).
"""

import logging

__version__ = "1.0.0"

from cachecontrolheader.errors import (
    CacheControlError,
    InvalidDirectiveValue,
    UnknownDirective,
)
from cachecontrolheader.header import Header, format_header
from cachecontrolheader.options import LENIENT, ParseOptions
from cachecontrolheader.parser import (
    parse,
    parse_delta_seconds,
    parse_stream,
    parse_strict,
)
from cachecontrolheader.speak import Note, NoteList

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CacheControlError",
    "Header",
    "InvalidDirectiveValue",
    "LENIENT",
    "Note",
    "NoteList",
    "ParseOptions",
    "UnknownDirective",
    "format_header",
    "parse",
    "parse_delta_seconds",
    "parse_stream",
    "parse_strict",
]
