"""Recognition of list, checkbox and blockquote markers at line start."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

# Compound task bullets are tried before the bare "-"/"*" bullet so that
# "- [ ] item" continues as a task rather than as a plain bullet.
LIST_PREFIX_PATTERN = re.compile(
    r"^(?P<indent>\s*)"
    r"(?P<marker>[-*] \[[ x]\]|[-*]|\d+\.|\[ \]|\[x\]|>)"
    r"\s"
)


@dataclass(frozen=True, slots=True)
class ListPrefix:
    """A matched line-leading marker."""

    indent: str
    marker: str
    prefix: str

    def is_bare(self, line: str) -> bool:
        """True when ``line`` holds nothing but this marker."""

        return line.strip() == self.marker

    @property
    def continuation(self) -> str:
        """Prefix for the next item; a checked task bullet continues unchecked."""

        if len(self.marker) > 3 and self.marker.endswith("[x]"):
            return f"{self.indent}{self.marker[:-3]}[ ] "
        return self.prefix


def match_list_prefix(line: str) -> Optional[ListPrefix]:
    match = LIST_PREFIX_PATTERN.match(line)
    if match is None:
        return None
    return ListPrefix(
        indent=match.group("indent"),
        marker=match.group("marker"),
        prefix=match.group(0),
    )


__all__ = ["LIST_PREFIX_PATTERN", "ListPrefix", "match_list_prefix"]
