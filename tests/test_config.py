import pytest

from portfolio_api.core.config import Settings


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("postgres://u:p@host/db", "postgresql+asyncpg://u:p@host/db"),
        ("postgresql://u:p@host/db?sslmode=require", "postgresql+asyncpg://u:p@host/db?ssl=require"),
        ("postgresql+asyncpg://u:p@host/db", "postgresql+asyncpg://u:p@host/db"),
        ("sqlite+aiosqlite:///./portfolio.db", "sqlite+aiosqlite:///./portfolio.db"),
    ],
)
def test_database_url_normalization(raw, expected):
    assert Settings(DATABASE_URL=raw).database_url == expected
