from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..errors import ScopeNotFound
from .fs import is_dir, is_within
from .search import SearchExecutor, SearchResult

logger = logging.getLogger(__name__)

SOURCE_DIRS = ("src", "lib", "source", ".")


@dataclass(frozen=True)
class Scope:
    directory: Path
    prefix: str = ""


def qualify_lines(text: str, prefix: str) -> str:
    """
    Make tool output paths relative to the repositories root.

    Lines that carry a ``path:line:`` location get ``prefix/`` in front;
    anything else (context, notices) is left alone.
    """
    if not prefix:
        return text
    out = []
    for line in text.split("\n"):
        if ":" in line:
            if line.startswith("./"):
                line = line[2:]
            line = f"{prefix}/{line}"
        out.append(line)
    return "\n".join(out)


def _join_prefix(*parts: str) -> str:
    return "/".join(p for p in parts if p and p != ".")


class ScopeResolver:
    def __init__(self, root: Path, search: SearchExecutor):
        self.root = root
        self.search = search

    async def resolve(self, repository_name: Optional[str] = None) -> Scope:
        if not repository_name:
            return Scope(self.root)
        path = self.root / repository_name
        if not is_within(self.root, path) or not await is_dir(path):
            raise ScopeNotFound(path)
        return Scope(path, repository_name)

    async def search_definitions(self, scope: Scope, pattern: str, file_pattern: str) -> SearchResult:
        """
        Search the conventional source directories of ``scope`` in order and
        stop at the first real hit; scan the whole scope if none has one.
        """
        for sub in SOURCE_DIRS:
            directory = scope.directory / sub
            if not await is_dir(directory):
                continue
            result = await self.search.search(directory, pattern, file_pattern)
            if result.found:
                logger.info("Definition hit in %s", directory)
                return self._qualified(result, _join_prefix(scope.prefix, sub))
            logger.debug("No definition in %s (%s)", directory, result.kind)

        result = await self.search.search(scope.directory, pattern, file_pattern)
        return self._qualified(result, scope.prefix)

    @staticmethod
    def _qualified(result: SearchResult, prefix: str) -> SearchResult:
        if not result.found:
            return result
        return SearchResult(result.kind, qualify_lines(result.text, prefix), result.tool)
