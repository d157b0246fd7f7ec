"""
Name: Database Pool Tests

Responsibilities:
  - Test pool lifecycle (init, get, close, reset)
  - Test the ping helper used by /healthz
  - Offline unit tests (no real DB)

Notes:
  - Uses mocking for ConnectionPool
"""

from unittest.mock import MagicMock, patch

import pytest

from masterdata.infrastructure.db import (
    PoolAlreadyInitializedError,
    PoolNotInitializedError,
)
from masterdata.infrastructure.db.pool import (
    close_pool,
    get_pool,
    init_pool,
    ping,
    reset_pool,
)

POOL_CLASS = "masterdata.infrastructure.db.pool.ConnectionPool"


@pytest.fixture(autouse=True)
def _clean_pool():
    reset_pool()
    yield
    reset_pool()


@pytest.mark.unit
class TestPoolLifecycle:
    """Test pool initialization and cleanup."""

    def test_init_pool_creates_pool(self):
        with patch(POOL_CLASS) as MockPool:
            mock_pool = MagicMock()
            MockPool.return_value = mock_pool

            result = init_pool("postgresql://test", min_size=2, max_size=10)

            MockPool.assert_called_once()
            assert MockPool.call_args.kwargs["min_size"] == 2
            assert MockPool.call_args.kwargs["max_size"] == 10
            assert result == mock_pool
            assert get_pool() is mock_pool

    def test_init_pool_twice_raises_error(self):
        with patch(POOL_CLASS):
            init_pool("postgresql://test", min_size=2, max_size=10)

            with pytest.raises(PoolAlreadyInitializedError, match="already initialized"):
                init_pool("postgresql://test", min_size=2, max_size=10)

    def test_get_pool_without_init_raises_error(self):
        with pytest.raises(PoolNotInitializedError, match="not initialized"):
            get_pool()

    def test_close_pool_clears_singleton(self):
        with patch(POOL_CLASS) as MockPool:
            mock_pool = MagicMock()
            MockPool.return_value = mock_pool

            init_pool("postgresql://test", min_size=2, max_size=10)
            close_pool()

            mock_pool.close.assert_called_once()
            with pytest.raises(PoolNotInitializedError):
                get_pool()

    def test_close_pool_is_idempotent(self):
        close_pool()
        close_pool()

    def test_reset_pool_allows_reinit(self):
        with patch(POOL_CLASS):
            init_pool("postgresql://test", min_size=2, max_size=10)
            reset_pool()

            # Should not raise
            init_pool("postgresql://test", min_size=2, max_size=10)


@pytest.mark.unit
class TestPing:
    def test_ping_true_when_select_succeeds(self):
        with patch(POOL_CLASS) as MockPool:
            mock_pool = MagicMock()
            MockPool.return_value = mock_pool
            init_pool("postgresql://test", min_size=1, max_size=1)

            assert ping() is True

            conn = mock_pool.connection.return_value.__enter__.return_value
            conn.execute.assert_called_once_with("SELECT 1")

    def test_ping_false_without_pool(self):
        assert ping() is False

    def test_ping_false_on_driver_error(self):
        with patch(POOL_CLASS) as MockPool:
            mock_pool = MagicMock()
            mock_pool.connection.side_effect = OSError("connection refused")
            MockPool.return_value = mock_pool
            init_pool("postgresql://test", min_size=1, max_size=1)

            assert ping() is False
