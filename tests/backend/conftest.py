"""
Backend-specific test fixtures.

These fixtures extend the global fixtures with mocked services for testing
routes in isolation from the database.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def mock_auth_service():
    """
    Create a fully mocked AuthService.

    All methods are AsyncMock, allowing you to configure return values:

        mock_auth_service.login.return_value = UserProfileResponse(...)
    """
    service = MagicMock()
    service.login = AsyncMock()
    service.register = AsyncMock()
    return service


@pytest.fixture
def mock_book_service():
    """Create a fully mocked BookService."""
    service = MagicMock()
    service.find_all = AsyncMock()
    service.get_by_id = AsyncMock()
    service.delete_by_id = AsyncMock()
    service.resolve_books = AsyncMock()
    return service


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_message_response():
    """Helper to assert {message} error response structure."""
    def _assert(response, status_code: int, message: str):
        assert response.status_code == status_code
        assert response.json()["message"] == message
    return _assert
