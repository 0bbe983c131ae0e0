"""Coding Challenges solution finder: an MCP tool for shared solution links."""

from .extractor import extract_links
from .fetcher import ResourceFetcher
from .finder import SolutionFinder

__all__ = ["extract_links", "ResourceFetcher", "SolutionFinder"]
