"""Unit tests for the command-line entrypoint helpers."""

import json
from unittest.mock import AsyncMock

import pytest

from solutionFinder.config.settings import FetcherSettings, Settings
from solutionFinder.errors import RemoteFailureError
from solutionFinder.main import build_finder, parse_args, run_once
from solutionFinder.schemas import SolutionsResponse


def test_parse_args_defaults():
    args = parse_args([])
    assert args.log_level is None
    assert args.once is None


def test_parse_args_once():
    args = parse_args(["--once", "wc tool", "--log-level", "DEBUG"])
    assert args.once == "wc tool"
    assert args.log_level == "DEBUG"


def test_build_finder_uses_configured_source():
    fetcher_settings = FetcherSettings(_env_file=None, source_url="https://mirror.test/README.md")
    settings = Settings(_env_file=None, fetcher=fetcher_settings)

    finder = build_finder(settings)

    assert finder.source_url == "https://mirror.test/README.md"
    assert finder.fetcher.settings is fetcher_settings


@pytest.mark.asyncio
async def test_run_once_prints_json(capsys):
    finder = AsyncMock()
    finder.find.return_value = SolutionsResponse(solutions=["https://a.com/x"])

    status = await run_once(finder, "wc tool")

    assert status == 0
    assert json.loads(capsys.readouterr().out) == {"solutions": ["https://a.com/x"]}


@pytest.mark.asyncio
async def test_run_once_reports_error(capsys):
    finder = AsyncMock()
    finder.find.side_effect = RemoteFailureError("https://x.test/README.md", 503, "Service Unavailable")

    status = await run_once(finder, "wc tool")

    captured = capsys.readouterr()
    assert status == 1
    assert captured.out == ""
    assert "remote_failure" in captured.err
