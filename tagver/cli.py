"""
Command-line entry points for tagver.

This module is the single place where outcomes become exit codes. The
click commands return an exit status or raise; :func:`run_command` maps
everything to an integer so nothing below it calls :func:`sys.exit`.
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence

import click

from tagver.exceptions import TagVerError
from tagver.context import TagVerContext
from tagver.utils.logger import get_logger
from tagver.commands.describe import describe
from tagver.commands.version_check import version_check
from tagver.utils.console import print_error, print_warning
from tagver.constants import EXIT_FAILURE, EXIT_INTERRUPTED, EXIT_SUCCESS

logger = get_logger("cli")


def run_command(
    command: click.Command,
    args: Optional[Sequence[str]] = None,
    *,
    prog_name: Optional[str] = None,
) -> int:
    """Run a tagver click command and translate the outcome to an exit code.

    Returns:
        Exit code:
            0   Success, help or version
            1   Invalid input, configuration error or failed check
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    run_ctx = TagVerContext()
    try:
        rv = command.main(
            args=list(args) if args is not None else None,
            prog_name=prog_name or command.name,
            standalone_mode=False,
            obj=run_ctx,
        )
        return EXIT_SUCCESS if rv is None else int(rv)

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except TagVerError as exc:
        print_error(str(exc), color=run_ctx.color)
        logger.debug(
            "TagVerError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        return EXIT_FAILURE

    except (click.Abort, KeyboardInterrupt):
        print_warning("Operation cancelled by user", color=run_ctx.color)
        return EXIT_INTERRUPTED

    except Exception as exc:
        print_error(f"Unexpected error: {exc}", color=run_ctx.color)
        logger.exception("Unhandled exception in %s", command.name)
        return EXIT_FAILURE


def describe_main(args: Optional[Sequence[str]] = None) -> int:
    """Entry point of the ``describe`` console script."""
    return run_command(describe, args, prog_name="describe")


def version_check_main(args: Optional[Sequence[str]] = None) -> int:
    """Entry point of the ``version-check`` console script."""
    return run_command(version_check, args, prog_name="version-check")


if __name__ == "__main__":
    sys.exit(describe_main())
