from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional

import anyio


async def is_dir(path: Path) -> bool:
    return await anyio.Path(path).is_dir()


async def first_existing(paths: Iterable[Path]) -> Optional[Path]:
    """Return the first path in ``paths`` that is a regular file, else None."""
    for p in paths:
        if await anyio.Path(p).is_file():
            return p
    return None


async def read_text(path: Path) -> str:
    return await anyio.Path(path).read_text(encoding="utf-8", errors="replace")


def is_within(root: Path, candidate: Path) -> bool:
    """
    Prevent path traversal: candidate must be within root.

    Checked lexically so symlinked clones under root are accepted.
    """
    base = os.path.normpath(os.path.abspath(root))
    target = os.path.normpath(os.path.abspath(candidate))
    return target == base or target.startswith(base + os.sep)
