"""
Project and module names from ``git remote -v`` output.

A remote listing holds one ``<name> <url> (fetch|push)`` line per remote
and direction. Only fetch URLs are considered, and the first one that can
be parsed wins. Two URL forms are understood::

    https://github.com/org/repo.git   (scheme://host/path)
    git@github.com:org/repo.git       (user@host:path)

Both yield the project name ``org-repo`` and the module name ``repo``.
"""

from __future__ import annotations

import posixpath
from typing import Callable, Iterator, Optional

from tagver.utils.logger import get_logger

logger = get_logger("core.remote")

_GIT_SUFFIX = ".git"


def _strip_git_suffix(path: str) -> str:
    if path.endswith(_GIT_SUFFIX):
        return path[: -len(_GIT_SUFFIX)]
    return path


def fetch_urls(listing: str) -> Iterator[str]:
    """Yield the URL of every fetch line in a remote listing, in order."""
    for line in listing.splitlines():
        if "fetch" not in line:
            continue
        fields = line.split()
        if len(fields) < 2:
            continue
        yield fields[1]


def project_name_from_url(url: str) -> Optional[str]:
    """Return ``org-repo`` for a remote URL, or ``None`` if unparseable.

    Examples:
        >>> project_name_from_url("https://github.com/org/repo.git")
        'org-repo'
        >>> project_name_from_url("git@github.com:org/repo")
        'org-repo'
    """
    if "://" in url:
        segments = url.rstrip("/").split("/")
        repo_path = "/".join(segments[-2:])
    elif ":" in url:
        repo_path = url.split(":", 1)[1]
    else:
        return None

    name = _strip_git_suffix(repo_path).replace("/", "-")
    return name or None


def module_name_from_url(url: str) -> Optional[str]:
    """Return the repository basename of a remote URL, or ``None``.

    Examples:
        >>> module_name_from_url("git@github.com:org/repo.git")
        'repo'
    """
    if ":" not in url:
        return None

    path = _strip_git_suffix(url.split(":", 1)[1].rstrip("/"))
    return posixpath.basename(path) or None


def _first_name(listing: str, parse: Callable[[str], Optional[str]], kind: str) -> str:
    for url in fetch_urls(listing):
        logger.debug("Processing git remote URL: %s", url)
        name = parse(url)
        if name:
            logger.info("Extracted %s name: %s", kind, name)
            return name
        logger.debug("Cannot extract %s name from %s", kind, url)

    logger.info("Could not extract %s name from git remote", kind)
    return ""


def extract_project_name(listing: str) -> str:
    """Project name from the first parseable fetch remote, ``""`` if none."""
    return _first_name(listing, project_name_from_url, "project")


def extract_module_name(listing: str) -> str:
    """Module name from the first parseable fetch remote, ``""`` if none."""
    return _first_name(listing, module_name_from_url, "module")
