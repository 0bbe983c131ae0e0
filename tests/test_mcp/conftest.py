"""Pytest fixtures for MCP tests."""

from pathlib import Path

import httpx
import pytest


@pytest.fixture
def server_script_path():
    """Path to the stdio server entry script."""
    return Path(__file__).parent.parent.parent / "main.py"


@pytest.fixture
def server_settings():
    from solutionFinder.config.settings import ServerSettings

    return ServerSettings(_env_file=None)


@pytest.fixture
def fetch_log():
    """Requests seen by the fake document host."""
    return []


@pytest.fixture
def mcp_app(fetcher_settings, source_url, sample_readme, server_settings, fetch_log):
    """MCP server wired to a fake document host serving the sample README."""
    from solutionFinder.fetcher import ResourceFetcher
    from solutionFinder.finder import SolutionFinder
    from solutionFinder.server import build_server

    def handler(request):
        fetch_log.append(request)
        return httpx.Response(200, text=sample_readme)

    fetcher = ResourceFetcher(fetcher_settings, transport=httpx.MockTransport(handler))
    finder = SolutionFinder(fetcher, source_url)
    return build_server(finder, server_settings)
