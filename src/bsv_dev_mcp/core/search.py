from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Literal, Optional

from .fs import is_dir
from .proc import Completed, NotInstalled, TimedOut, run_tool

logger = logging.getLogger(__name__)

ResultKind = Literal["matches", "no_matches", "failed"]

_BRACES = re.compile(r"^(.*)\{([^{}]*)\}(.*)$")


@dataclass(frozen=True)
class SearchResult:
    kind: ResultKind
    text: str
    tool: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.kind == "matches"


def expand_braces(glob: str) -> List[str]:
    """
    Expand one level of ``{a,b}`` alternatives: ``*.{ts,js}`` -> ``*.ts``, ``*.js``.
    grep's --include does not understand braces, ripgrep's -g does.
    """
    m = _BRACES.match(glob)
    if not m:
        return [glob]
    head, alts, tail = m.groups()
    out: List[str] = []
    for alt in alts.split(","):
        out.extend(expand_braces(f"{head}{alt}{tail}"))
    return out


class SearchExecutor:
    """
    Line search over a directory tree: ripgrep first, grep when rg is absent.

    Every outcome is a SearchResult; nothing here raises for a failed or
    missing tool.
    """

    def __init__(self, timeout_s: float = 30.0, primary: str = "rg", fallback: str = "grep"):
        self.timeout_s = timeout_s
        self.primary = primary
        self.fallback = fallback

    def primary_args(self, query: str, file_pattern: str) -> List[str]:
        return [
            self.primary, "--color=never", "--line-number", "--max-count=1",
            "-g", file_pattern, "-e", query, ".",
        ]

    def fallback_args(self, query: str, file_pattern: str) -> List[str]:
        args = [self.fallback, "-r", "-n", "-I", "-E", "-m", "1"]
        if file_pattern != "*":
            args.extend(f"--include={g}" for g in expand_braces(file_pattern))
        args.extend(["-e", query, "."])
        return args

    async def search(self, root: Path, query: str, file_pattern: str = "*") -> SearchResult:
        if not await is_dir(root):
            return SearchResult("failed", f"Error: Search directory not found: {root}")

        outcome = await run_tool(self.primary_args(query, file_pattern), root, self.timeout_s)
        tool = self.primary

        if isinstance(outcome, NotInstalled):
            logger.warning(
                "'%s' not found; falling back to '%s'. Install ripgrep for better performance.",
                self.primary, self.fallback,
            )
            outcome = await run_tool(self.fallback_args(query, file_pattern), root, self.timeout_s)
            tool = self.fallback

        if isinstance(outcome, NotInstalled):
            return SearchResult(
                "failed",
                f"Error: Search command '{self.primary}' not found. "
                f"Please install ripgrep (recommended) or ensure {self.fallback} is in PATH.",
            )

        if isinstance(outcome, TimedOut):
            return SearchResult(
                "failed", f'Search timed out after {outcome.timeout_s:g}s for "{query}".', tool
            )

        return self._interpret(outcome, query, tool)

    @staticmethod
    def _interpret(outcome: Completed, query: str, tool: str) -> SearchResult:
        # rg and grep agree: 0 = matches, 1 = none, >1 = error (possibly with partial output)
        out = outcome.stdout.strip()
        if outcome.returncode == 0 and out:
            return SearchResult("matches", out, tool)
        if outcome.returncode > 1:
            if out:
                logger.warning("%s reported errors alongside matches: %s", tool, outcome.stderr.strip())
                return SearchResult("matches", out, tool)
            logger.warning("Search command failed: %s", outcome.stderr.strip())
            reason = outcome.stderr.strip() or f"exit status {outcome.returncode}"
            return SearchResult("failed", f'Search command {tool} failed for "{query}": {reason}', tool)
        return SearchResult("no_matches", f'No matches found for "{query}" using {tool}.', tool)
