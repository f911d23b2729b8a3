import shutil

import anyio

from .. import __version__
from ..server import get_toolkit, mcp


@mcp.tool()
async def env_specs() -> dict:
    """
    Describe the local repositories and search tooling this server works with.
    """
    toolkit = get_toolkit()
    settings = toolkit.settings
    root = anyio.Path(settings.repos_dir)
    repositories = sorted(
        [p.name async for p in root.iterdir() if not p.name.startswith(".") and await p.is_dir()]
    )
    return {
        "server": "bsv-dev",
        "version": __version__,
        "scope": "local repositories only",
        "repos_dir": str(settings.repos_dir),
        "repositories": repositories,
        "brcs_repo": str(settings.brcs_dir),
        "brcs_repo_present": await anyio.Path(settings.brcs_dir).is_dir(),
        "search_tools": {
            name: shutil.which(name) is not None
            for name in (toolkit.search.primary, toolkit.search.fallback)
        },
        "search_timeout_s": settings.search_timeout_s,
    }
