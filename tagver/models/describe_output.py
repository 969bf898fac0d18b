"""
Parsed ``git describe`` output.

``git describe --tags`` prints either a bare tag (the commit is tagged) or
``<tag>-<distance>-g<hash>``. Tags may themselves contain dashes
(``v1.2.3-beta``), so the distance and hash are taken from the right.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from tagver.constants import TAGGED_RELEASE

_DESCRIBE_RE = re.compile(
    r"^(?P<tag>.+)-(?P<distance>[0-9]+)-g(?P<commit>[0-9a-f]+)$"
)


@dataclass(frozen=True)
class DescribeOutput:
    """One line of ``git describe`` output split into its parts.

    Args:
        tag: Nearest matching tag, e.g. ``v1.2.3``.
        distance: Commits since ``tag``; ``None`` when HEAD is the tag.
        commit: Abbreviated commit hash without the ``g`` marker.
    """

    tag: str
    distance: Optional[int] = None
    commit: Optional[str] = None

    @classmethod
    def parse(cls, output: str) -> Optional["DescribeOutput"]:
        """Parse raw describe output.

        Only the first non-blank line is considered.

        Returns:
            The parsed output, or ``None`` for empty output.
        """
        line = next((ln.strip() for ln in output.splitlines() if ln.strip()), "")
        if not line:
            return None

        match = _DESCRIBE_RE.match(line)
        if match is None:
            return cls(tag=line)

        return cls(
            tag=match.group("tag"),
            distance=int(match.group("distance")),
            commit=match.group("commit"),
        )

    @property
    def is_exact(self) -> bool:
        """Return True if HEAD sits exactly on :attr:`tag`."""
        return self.distance is None

    @property
    def release_number(self) -> str:
        """Commit distance as release number, ``"0"`` on a tagged commit."""
        if self.is_exact:
            return TAGGED_RELEASE
        return str(self.distance)

    def __str__(self) -> str:
        if self.is_exact:
            return self.tag
        return f"{self.tag}-{self.distance}-g{self.commit}"
