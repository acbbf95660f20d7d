from typing import Any, Literal

from xbquery.exceptions import InvalidConfigError

from .base import BaseBackend
from .default import DefaultBackend
from .mysql import MySQLBackend, MySQLBuilder
from .qdrant import QdrantBackend, QdrantBuilder

__all__ = (
    "BaseBackend",
    "DefaultBackend",
    "MySQLBackend",
    "MySQLBuilder",
    "QdrantBackend",
    "QdrantBuilder",
    "get_backend",
)

BackendType = Literal["default", "mysql", "qdrant"]

_BACKENDS = {
    "default": DefaultBackend,
    "mysql": MySQLBackend,
    "qdrant": QdrantBackend,
}


def get_backend(name: BackendType, **options: Any) -> BaseBackend:
    """Instantiate a backend by name, passing `options` to its constructor."""
    backend_cls = _BACKENDS.get(name)
    if backend_cls is None:
        raise InvalidConfigError(
            f"Unknown backend. Supported: {', '.join(sorted(_BACKENDS))}", config_key="backend", value=name
        )
    return backend_cls(**options)
