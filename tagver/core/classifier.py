"""
Version string classification.

A version string is tested against the project version rules in
precedence order and belongs to the first rule it matches:

1. release        ``1.2.3``
2. pre-release    ``1.2.3-rc.1``, ``1.2.3~beta_hotfix``
3. post-release   ``1.2.3.post.2``, ``1.2.3.fix``
4. intermediate   ``1.2.3_feature.4``

A leading ``v`` is accepted everywhere. The whole string must match, so a
trailing newline or any surrounding whitespace rejects it.
"""

from __future__ import annotations

import re
from typing import List, Optional, Pattern, Tuple

from tagver.models import VersionType
from tagver.constants import VERSION_RULES
from tagver.utils.logger import get_logger

logger = get_logger("core.classifier")

_RULE_TYPES = {
    "release": VersionType.RELEASE,
    "prerelease": VersionType.PRERELEASE,
    "postrelease": VersionType.POSTRELEASE,
    "intermediate": VersionType.INTERMEDIATE,
}

_COMPILED_RULES: List[Tuple[VersionType, Pattern[str]]] = [
    (_RULE_TYPES[name], re.compile(pattern)) for name, pattern in VERSION_RULES
]


def version_rules() -> List[Tuple[str, str]]:
    """Return ``(rule name, pattern)`` pairs in precedence order."""
    return list(VERSION_RULES)


def classify_version(version: str) -> Optional[VersionType]:
    """Classify ``version`` by the first matching rule.

    Args:
        version: Candidate version string, e.g. ``"v1.2.3-rc.1"``.

    Returns:
        The matching :class:`VersionType`, or ``None`` if no rule matches.

    Examples:
        >>> classify_version("1.2.3")
        <VersionType.RELEASE: 'Release'>
        >>> classify_version("1.2.3.fix.2").build_type
        'Debug'
        >>> classify_version("1.2") is None
        True
    """
    logger.debug("Checking version '%s'", version)
    for version_type, pattern in _COMPILED_RULES:
        if pattern.fullmatch(version):
            logger.debug("Version '%s' is %s", version, version_type.label.lower())
            return version_type

    logger.info("Wrong version '%s'", version)
    return None
