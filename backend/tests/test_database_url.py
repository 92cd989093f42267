import pytest

from backend.app.database import normalize_database_url


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("mysql://u:p@db/hub", "mysql+pymysql://u:p@db/hub"),
        ("postgres://u:p@db/hub", "postgresql+psycopg://u:p@db/hub"),
        ("postgresql://u:p@db/hub", "postgresql+psycopg://u:p@db/hub"),
        ("postgresql+psycopg://u:p@db/hub", "postgresql+psycopg://u:p@db/hub"),
        ("  sqlite:///dev.db  ", "sqlite:///dev.db"),
    ],
)
def test_short_urls_get_driver(raw, expected):
    assert normalize_database_url(raw) == expected
