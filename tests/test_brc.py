import pytest

from bsv_dev_mcp.core import brc as brc_mod
from bsv_dev_mcp.core.brc import CATEGORIES, BrcResolver, identifier_variants
from bsv_dev_mcp.errors import MissingRepository, ResourceNotFound


def test_identifier_variants_strip_leading_zeros_first():
    assert identifier_variants("0012") == ["12", "0012"]
    assert identifier_variants("42") == ["42", "42"]


def test_candidates_order_root_first_then_categories(tmp_path):
    base = tmp_path / "BRCs"
    out = list(BrcResolver(base).candidates("01"))

    assert len(out) == len(CATEGORIES) * 2
    assert out[:4] == [
        base / "1.md",
        base / "01.md",
        base / "apps" / "1.md",
        base / "apps" / "01.md",
    ]


def test_candidates_skip_paths_outside_base(tmp_path):
    base = tmp_path / "BRCs"
    assert list(BrcResolver(base).candidates("../../secret")) == []


@pytest.mark.asyncio
async def test_zero_padded_identifier_resolves_in_category(repos):
    text = await BrcResolver(repos / "BRCs").read("0012")
    assert "apps doc" in text


@pytest.mark.asyncio
async def test_root_wins_over_categories(repos):
    text = await BrcResolver(repos / "BRCs").read("1")
    assert "root doc" in text


@pytest.mark.asyncio
async def test_normalized_id_wins_within_directory(repos):
    apps = repos / "BRCs" / "apps"
    (apps / "7.md").write_text("normalized")
    (apps / "007.md").write_text("raw")

    assert await BrcResolver(repos / "BRCs").read("007") == "normalized"


@pytest.mark.asyncio
async def test_missing_repository_fails_before_any_probe(tmp_path, monkeypatch):
    async def boom(paths):
        raise AssertionError("candidate probed")

    monkeypatch.setattr(brc_mod, "first_existing", boom)

    with pytest.raises(MissingRepository) as exc:
        await BrcResolver(tmp_path / "BRCs").read("1")
    assert exc.value.path == tmp_path / "BRCs"


@pytest.mark.asyncio
async def test_not_found_names_original_identifier(repos):
    with pytest.raises(ResourceNotFound) as exc:
        await BrcResolver(repos / "BRCs").read("0099")
    assert exc.value.identifier == "0099"
    assert "0099" in str(exc.value)


@pytest.mark.asyncio
async def test_locate_returns_path_or_none(repos):
    r = BrcResolver(repos / "BRCs")
    assert await r.locate("0012") == repos / "BRCs" / "apps" / "12.md"
    assert await r.locate("999") is None
    assert await BrcResolver(repos / "nope").locate("1") is None


@pytest.mark.asyncio
async def test_symlinked_category_directory_is_searched(repos, tmp_path_factory):
    outside = tmp_path_factory.mktemp("tokens-clone")
    (outside / "30.md").write_text("tokens doc")
    (repos / "BRCs" / "tokens").symlink_to(outside, target_is_directory=True)

    assert await BrcResolver(repos / "BRCs").read("0030") == "tokens doc"
