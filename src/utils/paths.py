"""Path utility helpers."""
from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Optional


def find_program_in_path(program: Optional[str]) -> Optional[Path]:
    """Return the absolute location of ``program`` or ``None``.

    Names containing a path separator are checked as given; bare names are
    looked up along ``PATH`` of the current process.
    """

    if not program:
        return None
    if os.sep in program or (os.altsep and os.altsep in program):
        candidate = Path(program)
        if candidate.is_file() and os.access(candidate, os.X_OK):
            return candidate.absolute()
        return None
    found = shutil.which(program)
    return Path(found) if found else None


def is_executable_valid(executable: Optional[str]) -> bool:
    """Return ``True`` if ``executable`` resolves to a runnable file."""

    return find_program_in_path(executable) is not None
