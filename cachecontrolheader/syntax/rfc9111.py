"""
Regex for RFC9111

These regex are derived from the collected ABNF in RFC9111 (and the parts of
RFC9110 it relies upon):

  <https://www.rfc-editor.org/rfc/rfc9111#name-collected-abnf>

They should be processed with re.VERBOSE.
"""

from .rfc5234 import DIGIT

SPEC_URL = "https://www.rfc-editor.org/rfc/rfc9111"


# delta-seconds = 1*DIGIT

delta_seconds = rf"{DIGIT}+"

# Cache-Control   = #cache-directive
#
# cache-directive = token [ "=" ( token / quoted-string ) ]

directive_delimiter = ","
value_delimiter = "="
