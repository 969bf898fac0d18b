"""
Versioning strategies for the ``version`` command.

Each strategy pairs a ``git describe`` query with a pure function turning
its output into a version string:

``tag``
    Most recent tag only: ``v1.2.3-beta`` becomes ``1.2.3~beta``. The tilde
    sorts before the release in Debian/RPM version comparison.
``abbrev``
    Tag plus abbreviated commit. The ``-g`` marker is dropped and the first
    dash becomes a tilde: ``v1.2.3-4-gab12`` becomes ``1.2.3~4ab12``.
``rank``
    Tag plus abbreviated commit, taken verbatim.

``abbrev`` and ``rank`` pick the greatest ``v``-prefixed line by plain
string comparison. Downstream packaging depends on that ordering, so it is
not replaced by a numeric one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from tagver.constants import HEAD_REF, SHORT_ABBREV, TAG_ONLY_ABBREV
from tagver.exceptions import InvalidStrategyError

_PREFIX = "v"


def _strip_prefix(version: str) -> str:
    if version.startswith(_PREFIX):
        return version[len(_PREFIX):]
    return version


def _tagged_lines(output: str) -> List[str]:
    return [line.strip() for line in output.splitlines() if line.startswith(_PREFIX)]


def _greatest(versions: Iterable[str]) -> str:
    ordered = sorted(versions)
    if not ordered:
        return ""
    return _strip_prefix(ordered[-1])


def version_from_tag(output: str) -> str:
    """``tag`` strategy: strip ``v`` and turn the first ``-`` into ``~``."""
    return _strip_prefix(output.strip()).replace("-", "~", 1)


def version_from_abbrev(output: str) -> str:
    """``abbrev`` strategy: lexically greatest rewritten describe line."""
    return _greatest(
        line.replace("-g", "", 1).replace("-", "~", 1)
        for line in _tagged_lines(output)
    )


def version_from_rank(output: str) -> str:
    """``rank`` strategy: lexically greatest raw describe line."""
    return _greatest(_tagged_lines(output))


@dataclass(frozen=True)
class VersionStrategy:
    """A describe query together with its output post-processing.

    Args:
        name: Strategy name accepted by ``--strategy``.
        abbrev: ``--abbrev`` value of the describe query.
        always: Pass ``--always`` (fall back to a bare hash without tags).
        ref: Ref to describe; ``None`` describes the working tree HEAD.
        resolve: Turns raw describe output into a version string.
    """

    name: str
    abbrev: int
    always: bool
    ref: Optional[str]
    resolve: Callable[[str], str]


STRATEGIES: Dict[str, VersionStrategy] = {
    "tag": VersionStrategy("tag", TAG_ONLY_ABBREV, False, HEAD_REF, version_from_tag),
    "abbrev": VersionStrategy("abbrev", SHORT_ABBREV, True, None, version_from_abbrev),
    "rank": VersionStrategy("rank", TAG_ONLY_ABBREV, True, None, version_from_rank),
}


def get_strategy(name: str) -> VersionStrategy:
    """Look up a strategy by name.

    Raises:
        InvalidStrategyError: ``name`` is not a known strategy.
    """
    try:
        return STRATEGIES[name]
    except KeyError:
        raise InvalidStrategyError(name, tuple(STRATEGIES)) from None
