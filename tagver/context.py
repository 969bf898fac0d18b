"""
Shared run context for the tagver CLI tools.

One :class:`TagVerContext` is created per process by :mod:`tagver.cli`,
handed to the click command as ``obj`` and filled in from parsed flags,
configuration and environment. The top-level dispatcher keeps a reference
to it, so error reporting honours the same settings as the command did.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from tagver.constants import DEFAULT_STRATEGY


class TagVerContext:
    """Settings for a single tagver invocation.

    Attributes:
        config_path: Path to the loaded configuration file, if any.
        debug: Emit diagnostic logging on stderr.
        color: Whether colored terminal output is enabled.
        release: Use the commit distance as release number.
        strategy: Versioning strategy name.
        project_name: Override for project and module name.
    """

    __slots__ = (
        "config_path",
        "debug",
        "color",
        "release",
        "strategy",
        "project_name",
    )

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.debug: bool = False
        self.color: bool = True
        self.release: bool = False
        self.strategy: str = DEFAULT_STRATEGY
        self.project_name: Optional[str] = None

    def to_log_dict(self) -> dict:
        return {name: getattr(self, name) for name in self.__slots__}


#: Click decorator for injecting :class:`TagVerContext` into commands.
pass_context = click.make_pass_decorator(TagVerContext, ensure=True)
