"""Request/response models for the solution finder tool."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ChallengeRequest(BaseModel):
    """Arguments accepted by the tool."""

    challenge: str = Field(..., description="the name of the Coding Challenge to look for")

    model_config = ConfigDict(extra="ignore")


class SolutionsResponse(BaseModel):
    """Links found for one challenge, in document order."""

    solutions: List[str] = Field(default_factory=list, description="the solutions found")


__all__ = ["ChallengeRequest", "SolutionsResponse"]
