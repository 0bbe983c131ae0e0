"""Markdown link extraction for "Build your own <challenge>" rows.

The shared solutions index is a flat list of lines such as::

    - [Build your own wc tool](https://github.com/someone/ccwc) - Python

Only links whose anchor text starts with "build your own " followed by the
challenge name are returned. The challenge is matched literally and without
regard to case.
"""

from __future__ import annotations

import logging
import re
from typing import List, Pattern

LOGGER = logging.getLogger(__name__)

ANCHOR_PREFIX = "build your own "

# anchor text, then "(target optional-title)"; "." never crosses a line
_LINK_TAIL = r".*?\]\(\s*([^) \t\r\n]+)\s*(?:[^)]*)\)"


def escape_challenge(challenge: str) -> str:
    """Turn a user supplied challenge name into a literal pattern fragment."""
    return re.escape(challenge)


def build_link_pattern(challenge: str) -> Pattern[str]:
    """Compile the case-insensitive link pattern for ``challenge``."""
    anchor = re.escape(ANCHOR_PREFIX) + escape_challenge(challenge)
    return re.compile(r"\[\s*" + anchor + _LINK_TAIL, re.IGNORECASE)


def extract_links(document: str, challenge: str) -> List[str]:
    """Return link targets for ``challenge`` in the order they appear.

    Repeated links are kept. A document without matching rows yields an
    empty list.
    """
    pattern = build_link_pattern(challenge)

    links: List[str] = []
    for match in pattern.finditer(document):
        target = match.group(1)
        if target is None or not target.strip():
            LOGGER.debug(f"Skipping match without link target at offset {match.start()}")
            continue
        links.append(target.strip())

    LOGGER.debug(f"Extracted {len(links)} link(s) for challenge {challenge!r}")
    return links


__all__ = ["ANCHOR_PREFIX", "escape_challenge", "build_link_pattern", "extract_links"]
