from __future__ import annotations

import logging

from mcp.types import CallToolResult

from ..server import get_toolkit, mcp

logger = logging.getLogger(__name__)


@mcp.tool()
async def brc_lookup(brc_identifier: str) -> CallToolResult:
    """
    Retrieve the content of a specific BRC (Bitcoin Request for Comment) from
    the local clone of the bitcoin-sv/BRCs repository.

    brc_identifier: the BRC number, with or without leading zeros (e.g. '0001' or '42').
    """
    logger.info("Tool call: brc_lookup identifier=%r", brc_identifier)
    outcome = await get_toolkit().brc_lookup(brc_identifier)
    return outcome.to_call_result()
