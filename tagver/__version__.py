"""
tagver version information.

This module provides a single source of truth for the package version.
The package versions itself with the same rules it checks, so
``__version__`` must classify as a release, pre-release, post-release or
intermediate version.

Examples:
    0.4.0
    0.4.0-rc.1
    0.4.0.post.1
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Main version (single source of truth)
# ---------------------------------------------------------------------------

__version__ = "0.4.0"
