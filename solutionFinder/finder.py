"""Request orchestration: validate, fetch, extract."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from solutionFinder.errors import InvalidInputError
from solutionFinder.extractor import extract_links
from solutionFinder.fetcher import ResourceFetcher
from solutionFinder.schemas import SolutionsResponse

LOGGER = logging.getLogger(__name__)


def validate_challenge(challenge: Any) -> str:
    """Return the trimmed challenge name or raise InvalidInputError."""
    if not isinstance(challenge, str) or not challenge.strip():
        raise InvalidInputError("Coding Challenge name cannot be empty")
    return challenge.strip()


class SolutionFinder:
    """Look up shared solutions for a challenge in the remote index.

    Holds no per-request state; one instance serves concurrent calls.
    """

    def __init__(self, fetcher: ResourceFetcher, source_url: str):
        self.fetcher = fetcher
        self.source_url = source_url

    async def find(
        self,
        challenge: Optional[str],
        cancel_event: Optional[asyncio.Event] = None,
    ) -> SolutionsResponse:
        name = validate_challenge(challenge)

        # fetcher errors keep their kind, nothing is extracted on failure
        document = await self.fetcher.fetch(self.source_url, cancel_event=cancel_event)

        solutions = extract_links(document, name)
        LOGGER.info(f"Found {len(solutions)} solution(s) for {name!r}")
        return SolutionsResponse(solutions=solutions)


__all__ = ["SolutionFinder", "validate_challenge"]
