"""
Notes that the parser can emit about directives it skipped.

PLEASE NOTE: the summary field is automatically HTML escaped, so it can contain arbitrary text (as
long as it's unicode).

However, the longer text field IS NOT ESCAPED, and therefore all variables to be interpolated into
it need to be escaped to be safe for use in HTML.
"""

from enum import Enum
from typing import Any, Dict, List, Type

from markdown import markdown
from markupsafe import Markup, escape

from cachecontrolheader.type import NoteVarsType


class categories(Enum):
    "Note classifications."
    GENERAL = "General"
    CACHING = "Caching"


class levels(Enum):
    "Note levels."
    GOOD = "good"
    WARN = "warning"
    BAD = "bad"
    INFO = "info"


class Note:
    """
    A note about a Cache-Control directive.
    """

    category = None  # type: categories
    level = None  # type: levels
    summary = ""
    text = ""

    def __init__(self, subject: str, vrs: Dict[str, NoteVarsType] = None) -> None:
        self.subject = subject
        self.vars = vrs or {}

    def __eq__(self, other: Any) -> bool:
        return bool(
            self.__class__ == other.__class__
            and self.vars == other.vars
            and self.subject == other.subject
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.subject} {self.vars!r}>"

    def show_summary(self) -> Markup:
        """
        Output a textual summary of the message as a Unicode string.

        Note that if it is displayed in an environment that needs
        encoding (e.g., HTML), that is *NOT* done.
        """
        return Markup(self.summary % self.vars)

    def show_text(self) -> Markup:
        """
        Show the HTML text for the message as a Unicode string.

        The resulting string is already HTML-encoded.
        """
        return Markup(
            markdown(
                self.text % {k: escape(str(v)) for k, v in self.vars.items()},
                output_format="html",
            )
        )


class NoteList:
    """
    Collects the notes set while parsing; pass its add_note to a parse function.
    """

    def __init__(self) -> None:
        self.notes = []  # type: List[Note]
        self.note_classes = []  # type: List[str]

    def __len__(self) -> int:
        return len(self.notes)

    def __iter__(self) -> Any:
        return iter(self.notes)

    def add_note(self, subject: str, note: Type[Note], **kw: NoteVarsType) -> None:
        "Record a note and its class."
        self.notes.append(note(subject, kw))
        self.note_classes.append(note.__name__)
