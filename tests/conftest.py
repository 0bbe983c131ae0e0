"""Pytest configuration and fixtures for all tests.

This file is automatically loaded by pytest and ensures proper test environment setup.
"""

import sys
from pathlib import Path

import pytest

# Ensure project root is in PYTHONPATH for imports to work
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


SOURCE_URL = "https://solutions.test/README.md"

SAMPLE_README = """# Coding Challenges Shared Solutions

## Build Your Own wc Tool
- [Build your own wc tool](https://github.com/alice/ccwc) by Alice (Go)
- [Build Your Own wc Tool (Python)](https://github.com/bob/pywc "Bob's version")
- [Build your own wc tool](https://github.com/alice/ccwc)

## Build Your Own JSON Parser
- [Build your own JSON Parser](https://github.com/carol/json-parser) - Rust
- [Build your own grep](https://github.com/dave/grep)
"""


@pytest.fixture
def source_url():
    return SOURCE_URL


@pytest.fixture
def sample_readme():
    return SAMPLE_README


@pytest.fixture
def fetcher_settings(source_url):
    """Fast fetcher settings pointing at a fake host."""
    from solutionFinder.config.settings import FetcherSettings

    return FetcherSettings(source_url=source_url, timeout=2.0)
