from __future__ import annotations

import logging
from typing import Optional

from mcp.types import CallToolResult

from ..server import get_toolkit, mcp

logger = logging.getLogger(__name__)


@mcp.tool()
async def find_function_definition(
    function_name: str, repository_name: Optional[str] = None
) -> CallToolResult:
    """
    Locate potential definitions of a function or method.

    Matching is textual and errs on the side of recall, so call sites can
    show up next to the definition. Paths are relative to the repositories root.
    """
    logger.info(
        "Tool call: find_function_definition name=%r repo=%r", function_name, repository_name
    )
    outcome = await get_toolkit().find_function_definition(function_name, repository_name)
    return outcome.to_call_result()
