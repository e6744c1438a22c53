# File: tests/test_database.py

from database import engine_options, normalize_database_url


def test_postgres_scheme_is_rewritten():
    assert normalize_database_url("postgres://u:p@db/app") == "postgresql://u:p@db/app"
    assert normalize_database_url("postgresql://u:p@db/app") == "postgresql://u:p@db/app"
    assert normalize_database_url("sqlite:///./x.db") == "sqlite:///./x.db"


def test_engine_options_per_backend():
    assert engine_options("sqlite:///./x.db") == {"connect_args": {"check_same_thread": False}}
    assert engine_options("postgresql://u:p@db/app") == {"pool_pre_ping": True}
