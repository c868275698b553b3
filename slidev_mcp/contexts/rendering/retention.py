"""
Retention for staging directories.

The server never deletes execution directories; this is the out-of-band
policy applied by `slidev-mcp prune`.
"""

import shutil
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List

from slidev_mcp.contexts.rendering.logger import _log_info
from slidev_mcp.utils.timestamp import format_age, is_older_than


@dataclass
class PrunedDirectory:
    path: Path
    age: str
    removed: bool


def prune_execution_dirs(
    work_root: Path, older_than_days: float, dry_run: bool = False
) -> List[PrunedDirectory]:
    """
    Remove execution directories last modified more than `older_than_days` ago.

    Args:
        work_root: Staging root holding one directory per invocation
        older_than_days: Age threshold in days
        dry_run: Report what would be removed without deleting anything

    Returns:
        One entry per expired directory, oldest first
    """
    if not work_root.is_dir():
        return []

    reference = datetime.now()
    expired = [
        path
        for path in work_root.iterdir()
        if path.is_dir() and is_older_than(path.stat().st_mtime, older_than_days, reference)
    ]
    expired.sort(key=lambda p: p.stat().st_mtime)

    pruned = []
    for path in expired:
        age = format_age(path.stat().st_mtime, reference)
        if not dry_run:
            shutil.rmtree(path)
            _log_info(f"Removed {path.name} ({age})")
        pruned.append(PrunedDirectory(path=path, age=age, removed=not dry_run))

    return pruned
