"""
Filter specs for selecting tools and context providers.

Grammar (tokens separated by commas and/or spaces):

    ""            include everything
    "*"           include everything
    "-*"          exclude everything (wins over any other token)
    "a,b"         include only a and b
    "* -c"        include everything except c
    "a,b -c"      include a and b, never c

Names are matched case-insensitively.
"""

import logging
import re
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

EXCLUDE_ALL = "-*"
INCLUDE_ALL = "*"

_TOKEN_SEPARATORS = re.compile(r"[,\s]+")


@dataclass(frozen=True)
class ToolFilter:
    """
    Parsed form of a filter spec.

    Attributes:
        exclude_all: True when the spec contains ``-*``
        include_all: True for ``*`` or when no include names were given
        include_set: Lower-cased explicitly included names
        exclude_set: Lower-cased excluded names
    """

    exclude_all: bool = False
    include_all: bool = True
    include_set: frozenset[str] = field(default_factory=frozenset)
    exclude_set: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def parse(cls, raw: str | None) -> "ToolFilter":
        """Parse a raw filter spec. Blank input means include-all."""
        if raw is None or not raw.strip():
            return cls()

        parts = [p.strip() for p in _TOKEN_SEPARATORS.split(raw) if p.strip()]

        if EXCLUDE_ALL in parts:
            return cls(exclude_all=True, include_all=False)

        includes = [p for p in parts if not p.startswith("-")]
        excludes = [p[1:] for p in parts if p.startswith("-")]
        excludes = [p for p in excludes if p and p != INCLUDE_ALL]

        include_all = INCLUDE_ALL in includes or not includes
        include_set = frozenset(p.lower() for p in includes if p != INCLUDE_ALL)
        exclude_set = frozenset(p.lower() for p in excludes)

        logger.debug(
            f"Parsed filter {raw!r}: include_all={include_all}, "
            f"include={sorted(include_set)}, exclude={sorted(exclude_set)}"
        )
        return cls(
            exclude_all=False,
            include_all=include_all,
            include_set=include_set,
            exclude_set=exclude_set,
        )

    def should_include(self, name: str) -> bool:
        """Check whether ``name`` passes the filter."""
        if self.exclude_all:
            return False
        key = (name or "").lower()
        if key in self.exclude_set:
            return False
        if self.include_all:
            return True
        return key in self.include_set

    def canonical(self) -> str:
        """
        Render the one canonical string for this filter.

        - exclude-all                      -> "-*"
        - include-all, no excludes         -> "*"
        - include-all with excludes        -> "* -a -b"
        - explicit includes (+ excludes)   -> "a,b -c -d"
        """
        if self.exclude_all:
            return EXCLUDE_ALL

        excludes = " ".join(f"-{name}" for name in sorted(self.exclude_set))
        includes = ",".join(sorted(self.include_set))

        # An empty include set falls back to include-all
        if self.include_all or not includes:
            return f"{INCLUDE_ALL} {excludes}" if excludes else INCLUDE_ALL

        return f"{includes} {excludes}" if excludes else includes


def normalize_tool_filter(raw: str | None) -> str:
    """
    Canonicalize a filter spec.

    Idempotent: ``normalize_tool_filter(normalize_tool_filter(x))`` equals
    ``normalize_tool_filter(x)``.

    Example:
        normalize_tool_filter("")         # -> "*"
        normalize_tool_filter("b,a")      # -> "a,b"
        normalize_tool_filter("* -B -a")  # -> "* -a -b"
    """
    return ToolFilter.parse(raw).canonical()
