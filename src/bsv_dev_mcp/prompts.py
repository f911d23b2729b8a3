from __future__ import annotations

import logging
from typing import Optional

from .server import get_toolkit, mcp

logger = logging.getLogger(__name__)

_SDK_HINTS = {
    "ts-sdk": "You might find relevant code in the 'ts-sdk' repository, possibly in its 'src' or 'examples' directory.",
    "py-sdk": "You might find relevant code in the 'py-sdk' repository, possibly in its main package or 'examples' directory.",
    "wallet-toolbox": "You might find relevant code in the 'wallet-toolbox' or 'wallet-toolbox-examples' repositories.",
}


@mcp.prompt(name="summarize_brc", description="Summarize a specific BRC.")
async def summarize_brc(brc_identifier: str) -> str:
    logger.info("Prompt request: summarize_brc for %s", brc_identifier)
    path = await get_toolkit().brcs.locate(brc_identifier)
    if path is None:
        return (
            f"Please summarize BRC-{brc_identifier}. Fetch its content with the "
            f"'brc_lookup' tool using brc_identifier '{brc_identifier}'."
        )
    return (
        f"Please summarize BRC-{brc_identifier}. The content should be available in the "
        f"attached resource (if possible, use this URI): {path.as_uri()}"
    )


@mcp.prompt(name="explain_code", description="Explain a selected piece of code from a BSV repository.")
def explain_code(code_reference: str) -> str:
    """code_reference: a file URI, optionally with #L10-L20 for a line range."""
    logger.info("Prompt request: explain_code for %s", code_reference)
    return (
        f"Please explain the code identified by the resource URI: {code_reference}. "
        "The client should provide the file content."
    )


@mcp.prompt(
    name="generate_usage_example",
    description=(
        "Generate an example showing how to use a specific function or feature "
        "from one of the SDKs (ts-sdk, py-sdk, wallet-toolbox)."
    ),
)
def generate_usage_example(feature_description: str, sdk_preference: Optional[str] = None) -> str:
    logger.info(
        "Prompt request: generate_usage_example for %r, preference: %s",
        feature_description, sdk_preference or "any",
    )
    parts = [f'Please generate a usage example for the following BSV feature: "{feature_description}".']
    if sdk_preference:
        parts.append(f"Please provide the example for the {sdk_preference}.")
        hint = _SDK_HINTS.get(sdk_preference)
        if hint:
            parts.append(hint)
    else:
        parts.append(
            "You can choose the most relevant SDK (ts-sdk, py-sdk, wallet-toolbox). "
            "Consider checking their respective 'src', 'lib', or 'examples' directories for context."
        )
    parts.append("The client should attach relevant source file context if possible.")
    return " ".join(parts)


@mcp.prompt(name="find_related_code", description="Find code related to a specific concept or feature across the repositories.")
def find_related_code(concept: str) -> str:
    logger.info("Prompt request: find_related_code for %r", concept)
    return (
        f'Please find code snippets related to "{concept}" across the relevant BSV '
        "repositories. Use the 'code_search' tool."
    )
