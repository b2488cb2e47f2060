"""
Pytest utilities for testing.

This module provides fixture loading and aiohttp mocks shared by the package tests.

Usage:
    from utils.pytest_utils import load_fixture, mock_aiohttp_session

    FIXTURES_DIR = Path(__file__).parent / "fixtures"

    async def test_search(self):
        body = load_fixture(FIXTURES_DIR, "itunes_search.json", raw=True)
        session, response = mock_aiohttp_session(status=200, text=body)
        with patch("aiohttp.ClientSession", return_value=session):
            ...
"""

import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock


def load_fixture(fixtures_dir: Path, filename: str, raw: bool = False) -> Any:
    """Load a fixture file.

    Args:
        fixtures_dir: Directory holding the fixtures
        filename: Name of the fixture file relative to fixtures_dir
        raw: Return the file text instead of parsed JSON

    Returns:
        Parsed JSON data, or the raw text when raw=True (always used for XML)

    Raises:
        FileNotFoundError: If fixture file doesn't exist
    """
    fixture_path = fixtures_dir / filename
    if not fixture_path.exists():
        raise FileNotFoundError(f"Fixture file not found: {fixture_path}")

    with open(fixture_path, encoding="utf-8") as f:
        if raw or fixture_path.suffix != ".json":
            return f.read()
        return json.load(f)


def mock_aiohttp_session(
    status: int = 200,
    reason: str = "OK",
    text: str = "",
    side_effect: BaseException | None = None,
    body: bytes | None = None,
) -> tuple[MagicMock, AsyncMock]:
    """Build a mocked aiohttp.ClientSession whose request() yields one response.

    Args:
        status: Response status code
        reason: Response reason phrase
        text: Response body returned by response.text()
        side_effect: Exception raised when the request is entered instead of a response
        body: Raw body returned by response.read() (default: text encoded as UTF-8)

    Returns:
        (mock_session, mock_response). Assertions on the call go through mock_session.request.
    """
    mock_response = AsyncMock()
    mock_response.status = status
    mock_response.reason = reason
    mock_response.text = AsyncMock(return_value=text)
    mock_response.read = AsyncMock(return_value=text.encode("utf-8") if body is None else body)

    mock_session = MagicMock()
    if side_effect is not None:
        mock_session.request.return_value.__aenter__.side_effect = side_effect
    else:
        mock_session.request.return_value.__aenter__.return_value = mock_response
    mock_session.request.return_value.__aexit__.return_value = None
    mock_session.__aenter__.return_value = mock_session
    mock_session.__aexit__.return_value = None

    return mock_session, mock_response
