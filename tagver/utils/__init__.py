"""
Utility helpers for tagver.

This package provides reusable utilities used across tagver:

- Console output helpers (Rich-based)
- Logging configuration and retrieval

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------

from tagver.utils.logger import (
    disable_logging,
    get_logger,
    setup_cli_logging,
    setup_logging,
)

# ---------------------------------------------------------------------------
# Console utilities
# ---------------------------------------------------------------------------

from tagver.utils.console import (
    make_console,
    print_error,
    print_table,
    print_warning,
)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    # Console
    "make_console",
    "print_error",
    "print_table",
    "print_warning",
    # Logging
    "get_logger",
    "setup_logging",
    "setup_cli_logging",
    "disable_logging",
]
