from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import inspect
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from course_api.core import build_engine, isoformat_utc
from course_api.core.config import _env_bool, _env_int, _split_csv, _unique
from course_api.core.time import as_utc


@pytest.mark.unit
class TestConfigHelpers:
    """Test environment parsing helpers"""

    @pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
    def test_env_bool_truthy(self, monkeypatch, raw):
        monkeypatch.setenv("COURSE_FLAG", raw)
        assert _env_bool("COURSE_FLAG") is True

    def test_env_bool_default(self, monkeypatch):
        monkeypatch.delenv("COURSE_FLAG", raising=False)
        assert _env_bool("COURSE_FLAG", True) is True

    def test_env_int_rejects_garbage(self, monkeypatch):
        monkeypatch.setenv("COURSE_PORT", "eighty")
        with pytest.raises(RuntimeError, match="COURSE_PORT must be an integer"):
            _env_int("COURSE_PORT", 8000)

    def test_csv_origins_are_trimmed_and_unique(self):
        assert _unique(_split_csv(" http://a , http://b,,http://a")) == ["http://a", "http://b"]


@pytest.mark.unit
class TestTimeHelpers:
    """Test UTC normalisation"""

    def test_naive_values_are_treated_as_utc(self):
        assert isoformat_utc(datetime(2024, 5, 1, 8, 30)) == "2024-05-01T08:30:00Z"

    def test_aware_values_are_converted(self):
        plus_two = timezone(timedelta(hours=2))
        assert as_utc(datetime(2024, 5, 1, 10, 0, tzinfo=plus_two)) == datetime(
            2024, 5, 1, 8, 0, tzinfo=timezone.utc
        )

    def test_none_passes_through(self):
        assert isoformat_utc(None) is None


@pytest.mark.integration
class TestBuildEngine:
    """Test engine construction from connection strings"""

    def test_file_database_directory_is_created(self, tmp_path):
        db_file = tmp_path / "nested" / "courses.db"

        engine = build_engine(f"sqlite:///{db_file}")
        SQLModel.metadata.create_all(engine)

        assert db_file.exists()
        assert "courses" in inspect(engine).get_table_names()
        engine.dispose()

    def test_memory_database_uses_single_connection(self):
        engine = build_engine("sqlite://")

        assert isinstance(engine.pool, StaticPool)
        engine.dispose()
