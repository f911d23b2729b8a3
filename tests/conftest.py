import pytest

from bsv_dev_mcp.config import Settings
from bsv_dev_mcp.core.search import SearchExecutor
from bsv_dev_mcp.toolkit import Toolkit

MISSING_TOOL = "rg-not-installed-here"


@pytest.fixture
def repos(tmp_path):
    """A small repositories root: BRCs plus one SDK."""
    brcs = tmp_path / "BRCs"
    (brcs / "apps").mkdir(parents=True)
    (brcs / "wallet").mkdir()
    (brcs / "apps" / "12.md").write_text("# BRC-12\napps doc\n")
    (brcs / "1.md").write_text("# BRC-1\nroot doc\n")
    (brcs / "wallet" / "1.md").write_text("# BRC-1\nwallet doc\n")

    sdk = tmp_path / "ts-sdk" / "src"
    sdk.mkdir(parents=True)
    (sdk / "keys.ts").write_text("export function deriveKey(seed) {\n  return seed\n}\n")
    (sdk / "notes.md").write_text("deriveKey is documented here\n")
    return tmp_path


@pytest.fixture
def grep_toolkit(repos):
    """Toolkit whose primary tool is absent, so every search goes through grep."""
    return Toolkit(Settings(repos_dir=repos), search=SearchExecutor(timeout_s=10, primary=MISSING_TOOL))


@pytest.fixture
def bound(monkeypatch, grep_toolkit):
    monkeypatch.setattr("bsv_dev_mcp.server._toolkit", grep_toolkit)
    return grep_toolkit
