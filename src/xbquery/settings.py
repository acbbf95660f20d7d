"""Settings for xbquery."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class XbQuerySettings(BaseSettings):
    """xbquery configuration settings."""

    LOG_LEVEL: str = "INFO"

    # Qdrant document backend defaults
    QDRANT_HNSW_EF: int = 128
    QDRANT_SCORE_THRESHOLD: float = 0.0
    QDRANT_WITH_VECTOR: bool = False  # vectors are not returned unless asked for
    QDRANT_SEARCH_LIMIT: int = 10

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = XbQuerySettings()
