"""
Executable module for tagver.

Running:
    python -m tagver version

is equivalent to:
    describe version

Use the ``version-check`` script for version string validation.
"""

from __future__ import annotations

import sys


def _print_startup_error(exc: ImportError) -> None:
    """Report a broken installation on stderr."""
    try:
        from tagver.__version__ import __version__
    except ImportError:
        __version__ = "<unknown>"

    sys.stderr.write(f"tagver version: {__version__}\n")
    sys.stderr.write("\n")
    sys.stderr.write(f"ImportError: {exc}\n")


def main() -> int:
    """
    Main entrypoint when executing `python -m tagver`.

    Returns:
        Exit code returned by the describe CLI.
    """
    try:
        # Import lazily so dependencies are only loaded during CLI use
        from tagver.cli import describe_main
    except ImportError as exc:
        _print_startup_error(exc)
        return 1

    return describe_main()


if __name__ == "__main__":
    sys.exit(main())
