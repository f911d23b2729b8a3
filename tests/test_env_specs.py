import pytest

from bsv_dev_mcp import __version__
from bsv_dev_mcp.tools.env_specs import env_specs


@pytest.mark.asyncio
async def test_env_specs_schema(bound, repos):
    out = await env_specs()

    assert isinstance(out, dict)
    assert out["server"] == "bsv-dev"
    assert out["version"] == __version__
    assert out["scope"] == "local repositories only"
    assert out["repos_dir"] == str(repos)
    assert out["repositories"] == ["BRCs", "ts-sdk"]
    assert out["brcs_repo_present"] is True
    assert out["search_tools"]["rg-not-installed-here"] is False
    assert set(out["search_tools"]) == {"rg-not-installed-here", "grep"}
