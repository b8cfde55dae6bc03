"""Unit test fixtures with mocked dependencies."""

from unittest.mock import AsyncMock, MagicMock

import pytest

TEST_JWT_SECRET = "unit-test-signing-key"


@pytest.fixture
def mock_session():
    """Create mock async session with transaction support.

    ``__aexit__`` returns None so exceptions raised inside
    ``async with session.begin()`` propagate like a real rollback.
    """
    session = AsyncMock()
    mock_transaction = MagicMock()
    mock_transaction.__aenter__ = AsyncMock(return_value=None)
    mock_transaction.__aexit__ = AsyncMock(return_value=None)
    session.begin = MagicMock(return_value=mock_transaction)
    return session


@pytest.fixture
def jwt_secret() -> str:
    """Signing key shared by issuer and validator in unit tests."""
    return TEST_JWT_SECRET
