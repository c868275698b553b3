"""
Shared utilities for slidev-mcp.

Common functionality used across contexts:
- Logger setup with provenance
- Timestamp formatting
"""

from slidev_mcp.utils.timestamp import format_age, is_older_than

__all__ = ["format_age", "is_older_than"]
