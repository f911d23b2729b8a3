from __future__ import annotations

import logging
import sys
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .config import load_settings
from .core.log import configure_logging
from .errors import ConfigurationError
from .toolkit import Toolkit

logger = logging.getLogger(__name__)

mcp = FastMCP(
    "bsv-dev",
    instructions=(
        "BSV developer tools over local clones of the BSV repositories: "
        "BRC lookup, code search and function definition search."
    ),
)

_toolkit: Optional[Toolkit] = None


def bind_toolkit(toolkit: Toolkit) -> None:
    global _toolkit
    _toolkit = toolkit


def get_toolkit() -> Toolkit:
    if _toolkit is None:
        raise ConfigurationError("Server used before bind_toolkit(); run it through main().")
    return _toolkit


from .tools import brc_lookup, code_search, env_specs, find_definition  # noqa: F401, E402
from . import prompts  # noqa: F401, E402


def main() -> None:
    configure_logging()
    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error("%s", e)
        sys.exit(1)

    configure_logging(settings.log_level)
    logger.info("Using repository directory: %s", settings.repos_dir)
    bind_toolkit(Toolkit(settings))
    logger.info("BSV developer server running via stdio")
    mcp.run()
