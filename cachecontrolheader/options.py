"""
Parsing options.
"""

from configparser import SectionProxy
from typing import Any


class ParseOptions:
    """
    Tolerances for strict parsing.

    By default, strict parsing fails on the first unknown directive or invalid value;
    ignore_unknown_directives and ignore_invalid_values relax each check separately.
    Options are read-only once made.
    """

    __slots__ = ("_ignore_unknown_directives", "_ignore_invalid_values")

    def __init__(
        self, ignore_unknown_directives: bool = False, ignore_invalid_values: bool = False
    ) -> None:
        self._ignore_unknown_directives = bool(ignore_unknown_directives)
        self._ignore_invalid_values = bool(ignore_invalid_values)

    @property
    def ignore_unknown_directives(self) -> bool:
        return self._ignore_unknown_directives

    @property
    def ignore_invalid_values(self) -> bool:
        return self._ignore_invalid_values

    def __hash__(self) -> int:
        return hash((self._ignore_unknown_directives, self._ignore_invalid_values))

    def __eq__(self, other: Any) -> bool:
        return bool(
            self.__class__ == other.__class__
            and self.ignore_unknown_directives == other.ignore_unknown_directives
            and self.ignore_invalid_values == other.ignore_invalid_values
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"ignore_unknown_directives={self.ignore_unknown_directives}, "
            f"ignore_invalid_values={self.ignore_invalid_values})"
        )

    @property
    def lenient(self) -> bool:
        return self.ignore_unknown_directives and self.ignore_invalid_values

    @classmethod
    def from_config(cls, config: SectionProxy) -> "ParseOptions":
        """
        Read options from a configparser section, e.g.:

            [cachecontrolheader]
            ignore_unknown_directives = True
        """
        return cls(
            ignore_unknown_directives=config.getboolean(
                "ignore_unknown_directives", fallback=False
            ),
            ignore_invalid_values=config.getboolean(
                "ignore_invalid_values", fallback=False
            ),
        )


LENIENT = ParseOptions(ignore_unknown_directives=True, ignore_invalid_values=True)
