"""Turn free-form recipe instructions into numbered display steps.

The upstream provider returns instructions as loosely formatted HTML or plain
prose. These helpers are a presentation heuristic, not a sentence parser: tags are
dropped and the text is broken wherever a sentence-ending mark is followed by
whitespace and an uppercase letter.
"""

from __future__ import annotations

import re
from typing import List, Optional

_TAG_RE = re.compile(r"<[^>]+>")
_STEP_BOUNDARY_RE = re.compile(r"(?<=[.?!])\s+(?=[A-Z])")


def strip_tags(text: str) -> str:
    """Replace every ``<...>`` tag with a single space."""

    return _TAG_RE.sub(" ", text)


def split_steps(instructions: Optional[str]) -> List[str]:
    """Return the trimmed, non-empty steps found in ``instructions``."""

    if not instructions:
        return []
    fragments = _STEP_BOUNDARY_RE.split(strip_tags(instructions))
    return [fragment.strip() for fragment in fragments if fragment.strip()]


def number_steps(instructions: Optional[str]) -> List[str]:
    """Return steps prefixed with their 1-based position, e.g. ``"1. Boil water."``."""

    return [f"{index}. {step}" for index, step in enumerate(split_steps(instructions), start=1)]


__all__ = ["number_steps", "split_steps", "strip_tags"]
