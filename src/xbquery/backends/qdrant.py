"""Qdrant document backend.

Emits the JSON body of a Qdrant search request instead of SQL. The builder's
conditions are not translated yet: the document always carries an empty
query vector, the configured result bound and the HNSW search breadth.

Qdrant tunables:
- hnsw_ef: search breadth (higher is more accurate and slower)
- score_threshold: minimum accepted similarity score
- with_vector: whether stored vectors are returned with hits

Limitations:
- score_threshold and with_vector are accepted but not emitted
- Builder conditions, sorts and bounds are ignored
- The result bound is QDRANT_SEARCH_LIMIT (default 10) rather than a
  hard-coded value, so it can be raised without a code change
"""

import json
from typing import TYPE_CHECKING, Any, Optional

from xbquery.exceptions import InvalidConfigError
from xbquery.logger import Logger
from xbquery.result import DocumentResult
from xbquery.settings import settings as api_settings

from .base import BaseBackend

if TYPE_CHECKING:
    from xbquery.builder import Builder

__all__ = (
    "QdrantBackend",
    "QdrantBuilder",
)

HIGH_PRECISION_EF = 512
BALANCED_EF = 128
HIGH_SPEED_EF = 32


def _check_hnsw_ef(ef: Any) -> int:
    if isinstance(ef, bool) or not isinstance(ef, int) or ef <= 0:
        raise InvalidConfigError("hnsw_ef must be a positive integer", config_key="hnsw_ef", value=ef, expected=">0")
    return ef


def _check_score_threshold(threshold: Any) -> float:
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        raise InvalidConfigError(
            "score_threshold must be a number", config_key="score_threshold", value=threshold, expected="float"
        )
    return float(threshold)


def _check_with_vector(with_vec: Any) -> bool:
    if not isinstance(with_vec, bool):
        raise InvalidConfigError("with_vector must be a bool", config_key="with_vector", value=with_vec, expected="bool")
    return with_vec


class QdrantBackend(BaseBackend):
    """Generate Qdrant search request documents.

    Attributes:
        hnsw_ef: Search breadth written to `params.hnsw_ef`
        score_threshold: Stored only; not part of the emitted document
        with_vector: Stored only; not part of the emitted document
    """

    name = "qdrant"
    OUTPUT_KIND = "json"

    def __init__(
        self,
        hnsw_ef: Optional[int] = None,
        score_threshold: Optional[float] = None,
        with_vector: Optional[bool] = None,
    ) -> None:
        self.hnsw_ef = _check_hnsw_ef(api_settings.QDRANT_HNSW_EF if hnsw_ef is None else hnsw_ef)
        self.score_threshold = _check_score_threshold(
            api_settings.QDRANT_SCORE_THRESHOLD if score_threshold is None else score_threshold
        )
        self.with_vector = _check_with_vector(api_settings.QDRANT_WITH_VECTOR if with_vector is None else with_vector)
        self.logger = Logger(self.__class__.__name__)

    @classmethod
    def high_precision(cls) -> "QdrantBackend":
        return cls(hnsw_ef=HIGH_PRECISION_EF)

    @classmethod
    def balanced(cls) -> "QdrantBackend":
        return cls(hnsw_ef=BALANCED_EF)

    @classmethod
    def high_speed(cls) -> "QdrantBackend":
        return cls(hnsw_ef=HIGH_SPEED_EF)

    def generate(self, builder: "Builder") -> DocumentResult:
        # score_threshold and with_vector are not emitted yet
        body = {
            "vector": [],
            "limit": api_settings.QDRANT_SEARCH_LIMIT,
            "params": {"hnsw_ef": self.hnsw_ef},
        }
        self.logger.debug("Qdrant document collection=%s hnsw_ef=%d", builder.table, self.hnsw_ef)
        return DocumentResult(document=json.dumps(body))


class QdrantBuilder:
    """Fluent configuration for `QdrantBackend`.

    A built backend holds a snapshot of the settings, so one builder can
    produce several backends and a backend can be reused across queries.

    Example:
        backend = QdrantBuilder().hnsw_ef(512).score_threshold(0.85).with_vector(False).build()
    """

    def __init__(self) -> None:
        self._hnsw_ef = api_settings.QDRANT_HNSW_EF
        self._score_threshold = api_settings.QDRANT_SCORE_THRESHOLD
        self._with_vector = api_settings.QDRANT_WITH_VECTOR

    def hnsw_ef(self, ef: int) -> "QdrantBuilder":
        self._hnsw_ef = _check_hnsw_ef(ef)
        return self

    def score_threshold(self, threshold: float) -> "QdrantBuilder":
        self._score_threshold = _check_score_threshold(threshold)
        return self

    def with_vector(self, with_vec: bool) -> "QdrantBuilder":
        self._with_vector = _check_with_vector(with_vec)
        return self

    def build(self) -> QdrantBackend:
        return QdrantBackend(
            hnsw_ef=self._hnsw_ef,
            score_threshold=self._score_threshold,
            with_vector=self._with_vector,
        )
