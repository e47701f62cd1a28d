"""
Regex derived from the ABNF of the RFCs that define Cache-Control.
"""

__all__ = [
    "rfc5234",
    "rfc9111",
]
