"""
Cache-Control directive Notes.
"""

from cachecontrolheader.speak import Note, categories, levels
from cachecontrolheader.syntax import rfc9111


class UNKNOWN_CC_DIRECTIVE(Note):
    category = categories.CACHING
    level = levels.WARN
    summary = "The %(directive)s Cache-Control directive isn't recognised, and was ignored."
    reference = f"{rfc9111.SPEC_URL}#section-5.2"
    text = f"""\
Only the directives defined in [RFC9111]({reference}) are understood;
`%(directive)s` isn't one of them, so it was dropped from the parsed header.

Boolean directives such as `private` can't carry a value; when they do, they aren't recognised
either."""


class BAD_CC_SYNTAX(Note):
    category = categories.CACHING
    level = levels.BAD
    summary = "The %(bad_cc_attr)s Cache-Control directive's syntax is incorrect."
    text = """\
This value must be an integer number of seconds, without a unit; `%(bad_cc_value)s` isn't, so the
`%(bad_cc_attr)s` directive was ignored."""


class CC_DUP(Note):
    category = categories.CACHING
    level = levels.WARN
    summary = "The %(cc)s Cache-Control directive appears more than once."
    text = """\
The %(cc)s Cache-Control directive is only defined to appear once; it is used more than once here,
so implementations may use different instances (e.g., the first, or the last), making their
behaviour unpredictable.

The last instance is the one used here."""
