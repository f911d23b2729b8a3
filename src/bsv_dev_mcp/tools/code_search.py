from __future__ import annotations

import logging
from typing import Optional

from mcp.types import CallToolResult

from ..server import get_toolkit, mcp

logger = logging.getLogger(__name__)


@mcp.tool()
async def code_search(
    query: str,
    repository_name: Optional[str] = None,
    file_extension: Optional[str] = None,
) -> CallToolResult:
    """
    Search for code snippets across the cloned BSV repositories.

    query: regular expression to search for (ripgrep syntax).
    repository_name: restrict the search to one repository (e.g. 'ts-sdk').
    file_extension: restrict to files like 'ts', '.py' or a glob such as '*.{ts,js}'.
    """
    logger.info(
        "Tool call: code_search query=%r repo=%r ext=%r", query, repository_name, file_extension
    )
    outcome = await get_toolkit().code_search(query, repository_name, file_extension)
    return outcome.to_call_result()
