"""Tests for environment-driven settings."""

from xbquery.settings import XbQuerySettings


def test_defaults(monkeypatch):
    for key in ("LOG_LEVEL", "QDRANT_HNSW_EF", "QDRANT_SCORE_THRESHOLD", "QDRANT_WITH_VECTOR", "QDRANT_SEARCH_LIMIT"):
        monkeypatch.delenv(key, raising=False)
    cfg = XbQuerySettings(_env_file=None)
    assert cfg.LOG_LEVEL == "INFO"
    assert cfg.QDRANT_HNSW_EF == 128
    assert cfg.QDRANT_SCORE_THRESHOLD == 0.0
    assert cfg.QDRANT_WITH_VECTOR is False
    assert cfg.QDRANT_SEARCH_LIMIT == 10


def test_env_override(monkeypatch):
    monkeypatch.setenv("QDRANT_HNSW_EF", "256")
    monkeypatch.setenv("QDRANT_WITH_VECTOR", "true")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    cfg = XbQuerySettings(_env_file=None)
    assert cfg.QDRANT_HNSW_EF == 256
    assert cfg.QDRANT_WITH_VECTOR is True
    assert cfg.LOG_LEVEL == "DEBUG"


def test_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("QDRANT_SEARCH_LIMIT=50\nUNRELATED=1\n")
    cfg = XbQuerySettings(_env_file=env_file)
    assert cfg.QDRANT_SEARCH_LIMIT == 50
