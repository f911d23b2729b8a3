from __future__ import annotations

import logging
from itertools import product
from pathlib import Path
from typing import Iterator, List, Optional

from ..errors import MissingRepository, ResourceNotFound
from .fs import first_existing, is_dir, is_within, read_text

logger = logging.getLogger(__name__)

# "" is the repository root, which is always tried first.
CATEGORIES = (
    "",
    "apps",
    "key-derivation",
    "opinions",
    "outpoints",
    "overlays",
    "payments",
    "peer-to-peer",
    "transactions",
    "tokens",
    "wallet",
)


def identifier_variants(identifier: str) -> List[str]:
    """Zero-stripped form first, then the identifier as given."""
    return [identifier.lstrip("0"), identifier]


class BrcResolver:
    """Find a BRC markdown file in a local clone of the BRCs repository."""

    def __init__(self, base: Path, categories=CATEGORIES):
        self.base = base
        self.categories = tuple(categories)

    def candidates(self, identifier: str) -> Iterator[Path]:
        for category, ident in product(self.categories, identifier_variants(identifier)):
            path = self.base / category / f"{ident}.md"
            if not is_within(self.base, path):
                continue
            logger.debug("Looking for BRC file at: %s", path)
            yield path

    async def locate(self, identifier: str) -> Optional[Path]:
        if not await is_dir(self.base):
            return None
        return await first_existing(self.candidates(identifier))

    async def read(self, identifier: str) -> str:
        if not await is_dir(self.base):
            raise MissingRepository(self.base)

        path = await first_existing(self.candidates(identifier))
        if path is None:
            raise ResourceNotFound(identifier, self.base)

        logger.info("Found BRC %s at %s", identifier, path)
        return await read_text(path)
