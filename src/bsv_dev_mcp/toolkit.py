from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from mcp.types import CallToolResult, TextContent

from .config import Settings
from .core.brc import BrcResolver
from .core.patterns import SOURCE_GLOB, build_definition_pattern
from .core.scope import ScopeResolver
from .core.search import SearchExecutor
from .errors import BsvMcpError, ScopeNotFound

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolOutcome:
    text: str
    is_error: bool = False

    def to_call_result(self) -> CallToolResult:
        return CallToolResult(content=[TextContent(type="text", text=self.text)], isError=self.is_error)


def normalize_file_pattern(file_extension: Optional[str]) -> str:
    """``ts``/``.ts`` become ``*.ts``; anything already a glob passes through."""
    if not file_extension:
        return "*"
    ext = file_extension.strip()
    if any(c in ext for c in "*?["):
        return ext
    return f"*.{ext.lstrip('.')}"


class Toolkit:
    """
    The three repository tools, bound to one Settings value.

    Every method returns a ToolOutcome; errors never propagate to the
    transport.
    """

    def __init__(self, settings: Settings, search: Optional[SearchExecutor] = None):
        self.settings = settings
        self.search = search or SearchExecutor(timeout_s=settings.search_timeout_s)
        self.brcs = BrcResolver(settings.brcs_dir)
        self.scopes = ScopeResolver(settings.repos_dir, self.search)

    async def brc_lookup(self, brc_identifier: str) -> ToolOutcome:
        try:
            return ToolOutcome(await self.brcs.read(brc_identifier))
        except BsvMcpError as e:
            logger.error("Error in brc_lookup: %s", e)
            return ToolOutcome(f"Error fetching BRC {brc_identifier}: {e}", is_error=True)
        except (OSError, RuntimeError) as e:
            # unreadable file or symlink loop
            logger.error("Error reading BRC %s: %s", brc_identifier, e)
            return ToolOutcome(
                f"Error fetching BRC {brc_identifier}: {type(e).__name__}: {e}", is_error=True
            )

    async def code_search(
        self,
        query: str,
        repository_name: Optional[str] = None,
        file_extension: Optional[str] = None,
    ) -> ToolOutcome:
        try:
            scope = await self.scopes.resolve(repository_name)
        except ScopeNotFound as e:
            return ToolOutcome(f"Error: {e}", is_error=True)

        result = await self.search.search(scope.directory, query, normalize_file_pattern(file_extension))
        # a failed search is still reported as text, not as a tool error
        return ToolOutcome(result.text)

    async def find_function_definition(
        self, function_name: str, repository_name: Optional[str] = None
    ) -> ToolOutcome:
        try:
            scope = await self.scopes.resolve(repository_name)
        except ScopeNotFound as e:
            return ToolOutcome(f"Error: {e}", is_error=True)

        pattern = build_definition_pattern(function_name)
        result = await self.scopes.search_definitions(scope, pattern, SOURCE_GLOB)
        return ToolOutcome(result.text)
