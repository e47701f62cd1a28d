#!/usr/bin/env python3

import unittest

from cachecontrolheader import NoteList, parse
from cachecontrolheader.notes import BAD_CC_SYNTAX, CC_DUP, UNKNOWN_CC_DIRECTIVE
from cachecontrolheader.speak import categories, levels


class NoteTesters(unittest.TestCase):
    def test_summary(self) -> None:
        note = UNKNOWN_CC_DIRECTIVE("directive-1", {"directive": "foo"})
        self.assertEqual(
            note.show_summary(),
            "The foo Cache-Control directive isn't recognised, and was ignored.",
        )
        self.assertEqual(note.category, categories.CACHING)
        self.assertEqual(note.level, levels.WARN)

    def test_text_is_html(self) -> None:
        note = BAD_CC_SYNTAX(
            "directive-1", {"bad_cc_attr": "max-age", "bad_cc_value": "10s"}
        )
        text = note.show_text()
        self.assertTrue(text.startswith("<p>"))
        self.assertIn("<code>10s</code>", text)
        self.assertEqual(note.level, levels.BAD)

    def test_text_links_to_rfc(self) -> None:
        note = UNKNOWN_CC_DIRECTIVE("directive-1", {"directive": "foo"})
        self.assertIn(
            'href="https://www.rfc-editor.org/rfc/rfc9111#section-5.2"',
            note.show_text(),
        )

    def test_text_is_escaped(self) -> None:
        note = BAD_CC_SYNTAX(
            "directive-1", {"bad_cc_attr": "max-age", "bad_cc_value": "<b>"}
        )
        self.assertNotIn("<b>", note.show_text())

    def test_equality(self) -> None:
        self.assertEqual(
            CC_DUP("directive-2", {"cc": "public"}),
            CC_DUP("directive-2", {"cc": "public"}),
        )
        self.assertNotEqual(
            CC_DUP("directive-2", {"cc": "public"}),
            CC_DUP("directive-3", {"cc": "public"}),
        )

    def test_note_list(self) -> None:
        notes = NoteList()
        parse("public, public, foo", notes.add_note)
        self.assertEqual(len(notes), 2)
        self.assertEqual(notes.note_classes, ["CC_DUP", "UNKNOWN_CC_DIRECTIVE"])
        self.assertEqual(
            notes.notes[0], CC_DUP("directive-2", {"cc": "public"})
        )


if __name__ == "__main__":
    unittest.main()
