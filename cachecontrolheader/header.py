"""
The parsed form of a Cache-Control header, and its serialisation.
"""

from datetime import timedelta
from typing import Any, Iterator, List, Optional, Tuple

# directives
MAX_AGE = "max-age"
MAX_STALE = "max-stale"
MIN_FRESH = "min-fresh"
NO_CACHE = "no-cache"
NO_STORE = "no-store"
NO_TRANSFORM = "no-transform"
ONLY_IF_CACHED = "only-if-cached"
MUST_REVALIDATE = "must-revalidate"
MUST_UNDERSTAND = "must-understand"
PRIVATE = "private"
PROXY_REVALIDATE = "proxy-revalidate"
PUBLIC = "public"
S_MAXAGE = "s-maxage"

# directive name -> Header attribute
BOOLEAN_DIRECTIVES = {
    NO_CACHE: "no_cache",
    NO_STORE: "no_store",
    NO_TRANSFORM: "no_transform",
    ONLY_IF_CACHED: "only_if_cached",
    MUST_REVALIDATE: "must_revalidate",
    MUST_UNDERSTAND: "must_understand",
    PRIVATE: "private",
    PROXY_REVALIDATE: "proxy_revalidate",
    PUBLIC: "public",
}
VALUED_DIRECTIVES = {
    MAX_AGE: "max_age",
    MAX_STALE: "max_stale",
    MIN_FRESH: "min_fresh",
    S_MAXAGE: "s_maxage",
}

# serialisation order
CANONICAL_ORDER = [
    MAX_AGE,
    MAX_STALE,
    MIN_FRESH,
    NO_CACHE,
    NO_STORE,
    NO_TRANSFORM,
    ONLY_IF_CACHED,
    MUST_REVALIDATE,
    MUST_UNDERSTAND,
    PRIVATE,
    PROXY_REVALIDATE,
    PUBLIC,
    S_MAXAGE,
]


class Header:
    """
    A Cache-Control header.

    Boolean directives are True when present; delta-seconds directives are a
    timedelta when present and None otherwise (max-age=0 is not the same as no
    max-age).
    """

    no_cache: bool
    no_store: bool
    no_transform: bool
    only_if_cached: bool
    must_revalidate: bool
    must_understand: bool
    private: bool
    proxy_revalidate: bool
    public: bool
    max_age: Optional[timedelta]
    max_stale: Optional[timedelta]
    min_fresh: Optional[timedelta]
    s_maxage: Optional[timedelta]

    def __init__(self, **kw: Any) -> None:
        for attr in BOOLEAN_DIRECTIVES.values():
            setattr(self, attr, bool(kw.pop(attr, False)))
        for attr in VALUED_DIRECTIVES.values():
            value = kw.pop(attr, None)
            if value is not None and not isinstance(value, timedelta):
                raise TypeError(f"{attr} must be a timedelta or None, not {value!r}")
            if value is not None and value < timedelta(0):
                raise ValueError(f"{attr} can't be negative, not {value!r}")
            setattr(self, attr, value)
        if kw:
            raise TypeError(f"unexpected directive attributes: {', '.join(sorted(kw))}")

    def __eq__(self, other: Any) -> bool:
        if self.__class__ != other.__class__:
            return NotImplemented
        return self._values() == other._values()

    def __bool__(self) -> bool:
        return any(True for _ in self.directives())

    def __repr__(self) -> str:
        fields = [
            f"{attr}={getattr(self, attr)!r}"
            for attr in self._attrs()
            if getattr(self, attr) not in (False, None)
        ]
        return f"{self.__class__.__name__}({', '.join(fields)})"

    def __str__(self) -> str:
        return format_header(self)

    def directives(self) -> Iterator[Tuple[str, Optional[int]]]:
        """
        Yield (directive name, value) for each directive that is set, in
        canonical order. Values are None for boolean directives and whole
        seconds otherwise.
        """
        for name in CANONICAL_ORDER:
            if name in BOOLEAN_DIRECTIVES:
                if getattr(self, BOOLEAN_DIRECTIVES[name]):
                    yield name, None
            else:
                value = getattr(self, VALUED_DIRECTIVES[name])
                if value is not None:
                    yield name, int(value.total_seconds())

    @staticmethod
    def _attrs() -> List[str]:
        return [
            BOOLEAN_DIRECTIVES.get(name) or VALUED_DIRECTIVES[name]
            for name in CANONICAL_ORDER
        ]

    def _values(self) -> List[Any]:
        return [getattr(self, attr) for attr in self._attrs()]


def format_header(header: Header) -> str:
    """
    Serialise a Header to a Cache-Control field value.

    The result is canonical (fixed order, lower case, ", " between
    directives), not a copy of whatever was parsed.
    """
    out = []
    for name, value in header.directives():
        if value is None:
            out.append(name)
        else:
            out.append(f"{name}={value}")
    return ", ".join(out)
