from __future__ import annotations

import re
from typing import List

SOURCE_GLOB = "*.{ts,js,py,go,rs,java}"


def definition_patterns(name: str) -> List[str]:
    """
    Heuristics for where ``name`` is defined, one regex per declaration style.

    These are not parsed: the last one also hits call sites. The syntax is
    kept to what ripgrep, grep -E and Python's re all accept (no \\s inside
    brackets, literal braces escaped).
    """
    n = re.escape(name)
    return [
        rf"function\s+{n}(\s|\()",
        rf"def\s+{n}(\s|\(|:)",
        rf"const\s+{n}\s*=",
        rf"let\s+{n}\s*=",
        rf"var\s+{n}\s*=",
        rf"class\s+\w+\s*\{{[^}}]*{n}\s*\(",
        rf"{n}\s*:\s*function",
        rf"{n}\s*\(",
    ]


def build_definition_pattern(name: str) -> str:
    return "|".join(definition_patterns(name))
