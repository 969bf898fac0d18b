"""Version-check command implementation for tagver.

Checks that a version string follows the project version rules. The
result is the exit status: 0 if the string is a release, pre-release,
post-release or intermediate version, 1 otherwise. Nothing is printed on
failure so the tool can be used directly in shell conditions::

    $ version-check v1.2.3 && echo ok
    ok

    $ version-check --type --build-type 1.2.3-rc.1
    Pre release
    Debug
"""

from __future__ import annotations

from typing import Optional

import click

from tagver.__version__ import __version__
from tagver.context import TagVerContext, pass_context
from tagver.core import classify_version, version_rules
from tagver.utils.console import print_table
from tagver.utils.logger import get_logger, setup_cli_logging
from tagver.constants import EXIT_FAILURE, EXIT_SUCCESS

logger = get_logger("commands.version_check")


@click.command(
    name="version-check",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.argument("version_string", metavar="VERSION", required=False)
@click.option(
    "--rules",
    "-r",
    is_flag=True,
    help="Print regexp rules for checking versions and exit.",
)
@click.option("--debug", "-d", is_flag=True, help="Debug output.")
@click.option(
    "--type",
    "-t",
    "show_type",
    is_flag=True,
    help="Output version type: release, prerelease, postrelease, intermediate.",
)
@click.option(
    "--build-type",
    "-b",
    "show_build_type",
    is_flag=True,
    help="Output build type for cmake: Release for release version, Debug for others.",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
)
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="version-check",
    message="%(version)s",
)
@pass_context
def version_check(
    ctx: TagVerContext,
    version_string: Optional[str],
    rules: bool,
    debug: bool,
    show_type: bool,
    show_build_type: bool,
    color: bool,
) -> int:
    """Check that VERSION is set correctly according to project rules."""
    ctx.debug = debug
    ctx.color = color
    setup_cli_logging(debug=debug, color=color)
    logger.debug(
        "Flags - rules: %s, type: %s, buildType: %s, color: %s",
        rules,
        show_type,
        show_build_type,
        color,
    )

    if rules:
        logger.info("Rules flag detected, printing rules")
        print_rules(color=color)
        return EXIT_SUCCESS

    if version_string is None:
        logger.info("No version argument provided")
        return EXIT_FAILURE

    version_type = classify_version(version_string)
    if version_type is None:
        return EXIT_FAILURE

    if show_type:
        click.echo(version_type.label)
    if show_build_type:
        click.echo(version_type.build_type)
    return EXIT_SUCCESS


def print_rules(*, color: bool = True) -> None:
    """Print the version rules table in precedence order."""
    print_table(
        [{"Type": name, "Pattern": pattern} for name, pattern in version_rules()],
        title="Version rules in precedence order",
        column_styles={"Type": {"style": "info", "no_wrap": True}},
        color=color,
    )
