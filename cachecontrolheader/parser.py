"""
Cache-Control header parsing.

parse() is lenient: it never fails, and drops anything it doesn't understand.
parse_strict() raises on the first unknown directive or invalid value, unless
told to ignore them by its ParseOptions.
"""

from datetime import timedelta
from functools import partial
import logging
import re
from typing import Any, List, Optional, Type
import unittest

from cachecontrolheader.errors import InvalidDirectiveValue, UnknownDirective
from cachecontrolheader.header import BOOLEAN_DIRECTIVES, VALUED_DIRECTIVES, Header
from cachecontrolheader.notes import BAD_CC_SYNTAX, CC_DUP, UNKNOWN_CC_DIRECTIVE
from cachecontrolheader.options import LENIENT, ParseOptions
from cachecontrolheader.speak import Note, NoteList
from cachecontrolheader.syntax import rfc5234, rfc9111
from cachecontrolheader.type import AddNoteMethodType, HeaderSource

log = logging.getLogger(__name__)

RE_FLAGS = re.VERBOSE


def parse(header: str, add_note: AddNoteMethodType = None) -> Header:
    """
    Parse a Cache-Control field value, ignoring unknown directives and
    invalid values.
    """
    return _parse(header, LENIENT, add_note)


def parse_strict(
    header: str, options: ParseOptions = None, add_note: AddNoteMethodType = None
) -> Header:
    """
    Strictly parse a Cache-Control field value.

    Raises UnknownDirective or InvalidDirectiveValue on the first problem,
    unless options says to ignore that kind of problem. Ignoring both is the
    same as parse().
    """
    return _parse(header, options or ParseOptions(), add_note)


def parse_stream(
    source: HeaderSource,
    options: ParseOptions = None,
    strict: bool = False,
    add_note: AddNoteMethodType = None,
) -> Header:
    """
    Read all of source and parse it. Errors from reading are not caught.

    options only apply to strict parsing; passing them without strict is a
    TypeError.
    """
    if options is not None and not strict:
        raise TypeError("options can only be used with strict=True")
    field_value = decode_field_value(source.read())
    if strict:
        return parse_strict(field_value, options, add_note)
    return parse(field_value, add_note)


def decode_field_value(value: Any) -> str:
    "Make a field value unicode clean."
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        try:
            return value.decode("ascii", "strict")
        except UnicodeError:
            return value.decode("iso-8859-1", "replace")
    raise TypeError(f"can't parse a Cache-Control header from {type(value).__name__}")


def parse_delta_seconds(value: str) -> timedelta:
    """
    Parse a delta-seconds value into a timedelta. Raises ValueError if it's bad.
    """
    if not re.fullmatch(rfc9111.delta_seconds, value, RE_FLAGS):
        raise ValueError(f'invalid delta-seconds "{value}"')
    try:
        return timedelta(seconds=int(value))
    except OverflowError as why:
        raise ValueError(f'delta-seconds out of range "{value}"') from why


def normalise(header: str) -> str:
    "Lower-case the field value and remove all whitespace from it."
    return re.sub(rfc5234.WSP, "", header, flags=RE_FLAGS).lower()


def _parse(
    header: str, options: ParseOptions, add_note: Optional[AddNoteMethodType]
) -> Header:
    if not isinstance(header, str):
        raise TypeError(
            f"can't parse a Cache-Control header from {type(header).__name__}"
        )
    header = normalise(header)
    result = Header()
    if not header:
        return result

    seen = set()
    for offset, directive in enumerate(
        header.split(rfc9111.directive_delimiter), start=1
    ):
        note = partial(add_note, f"directive-{offset}") if add_note else _no_note
        try:
            name, raw_value = directive.split(rfc9111.value_delimiter, 1)
        except ValueError:
            name, raw_value = directive, None

        if raw_value is None:
            attr = BOOLEAN_DIRECTIVES.get(name)
            if attr is None:
                _unknown_directive(name, options, note)
                continue
            value: Any = True
        else:
            raw_value = raw_value.strip()
            try:
                value = parse_delta_seconds(raw_value)
            except ValueError as why:
                if not options.ignore_invalid_values:
                    raise InvalidDirectiveValue(name, raw_value, why) from why
                log.debug("ignoring invalid Cache-Control value %s=%r", name, raw_value)
                note(BAD_CC_SYNTAX, bad_cc_attr=name, bad_cc_value=raw_value)
                continue
            attr = VALUED_DIRECTIVES.get(name)
            if attr is None:
                _unknown_directive(name, options, note)
                continue

        if name in seen:
            note(CC_DUP, cc=name)
        seen.add(name)
        setattr(result, attr, value)
    return result


def _unknown_directive(
    name: str, options: ParseOptions, note: AddNoteMethodType
) -> None:
    if not options.ignore_unknown_directives:
        raise UnknownDirective(name)
    log.debug("ignoring unknown Cache-Control directive %r", name)
    note(UNKNOWN_CC_DIRECTIVE, directive=name)


def _no_note(note: Type[Note], **kw: Any) -> None:  # pylint: disable=unused-argument
    pass


class DirectiveTest(unittest.TestCase):
    """
    Testing machinery for Cache-Control field values.
    """

    inputs: List[str] = []
    options: ParseOptions = None
    expected_out: Header = None
    expected_err: Type[Exception] = None
    expected_notes: List[Type[Note]] = []

    def test_directives(self) -> Any:
        "Test the field values."
        if not self.inputs:
            return self.skipTest("")
        for inp in self.inputs:
            notes = NoteList()
            if self.expected_err:
                with self.assertRaises(self.expected_err):
                    parse_strict(inp, self.options, notes.add_note)
                continue
            if self.options is None:
                out = parse(inp, notes.add_note)
            else:
                out = parse_strict(inp, self.options, notes.add_note)
            self.assertEqual(self.expected_out, out, f"[{inp!r}]")
            diff = {n.__name__ for n in self.expected_notes}.symmetric_difference(
                set(notes.note_classes)
            )
            for note in notes:  # check formatting
                self.assertTrue(note.show_summary())
                self.assertTrue(note.show_text())
            self.assertEqual(len(diff), 0, f"Mismatched notes: {diff}")
        return None
