"""Describe command implementation for tagver.

Prints one piece of project metadata derived from ``git remote -v`` and
``git describe``:

- ``project``  project name (``org-repo``)
- ``module``   module name (``repo``)
- ``version``  project version according to the versioning strategy
- ``release``  release number (commit distance with ``-r``, else ``1``)
- ``full``     ``<project>-<version>-<release>``

Typical usage::

    $ describe version
    1.2.3~rc1

    $ describe -r -s abbrev full
    org-repo-1.2.3~5ab-5

The ``PROJECT_NAME`` environment variable overrides project and module
name detection.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import click

from tagver.config import load_config
from tagver.__version__ import __version__
from tagver.core import Describer, GitClient
from tagver.exceptions import InvalidCommandError
from tagver.context import TagVerContext, pass_context
from tagver.utils.logger import get_logger, setup_cli_logging
from tagver.constants import (
    CONFIG_PATH_ENV,
    DEFAULT_STRATEGY,
    DESCRIBE_COMMANDS,
    EXIT_SUCCESS,
    PROJECT_NAME_ENV,
    VERSION_STRATEGIES,
)

logger = get_logger("commands.describe")

_USAGE = f"describe {'|'.join(DESCRIBE_COMMANDS)}"


@click.command(
    name="describe",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.argument("command", required=False, metavar="COMMAND")
@click.option("--debug", "-d", is_flag=True, help="Debug output.")
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
)
@click.option(
    "--release",
    "-r",
    is_flag=True,
    help="Use commit number as release number; default is no and release is 1.",
)
@click.option(
    "--strategy",
    "-s",
    metavar="|".join(VERSION_STRATEGIES),
    default=None,
    help=f"Versioning strategy type; default is {DEFAULT_STRATEGY}.",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=CONFIG_PATH_ENV,
    help="Path to configuration file.",
)
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="describe",
    message="%(version)s",
)
@pass_context
def describe(
    ctx: TagVerContext,
    command: Optional[str],
    debug: bool,
    color: bool,
    release: bool,
    strategy: Optional[str],
    config: Optional[Path],
) -> int:
    """Describe project, version and release from git describe.

    \b
    Commands:
      project   print project name
      module    print module name
      version   print project version
      release   print project release
      full      print full project name-version-release
    """
    ctx.debug = debug
    ctx.color = color
    setup_cli_logging(debug=debug, color=color)
    logger.debug("describe v%s, command: %s", __version__, command)

    loaded = load_config(config)
    ctx.config_path = loaded.source_path
    ctx.release = release or loaded.release
    ctx.strategy = strategy if strategy is not None else (loaded.strategy or DEFAULT_STRATEGY)
    ctx.project_name = os.environ.get(PROJECT_NAME_ENV) or None
    logger.debug("Settings: %s", ctx.to_log_dict())

    if command is None:
        raise InvalidCommandError(f"No command provided. Usage: {_USAGE}")

    describer = Describer(
        GitClient(),
        release=ctx.release,
        strategy=ctx.strategy,
        project_name=ctx.project_name,
    )
    click.echo(describer.run(command))

    logger.info("Command execution completed")
    return EXIT_SUCCESS
