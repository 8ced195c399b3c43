import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from redis import Redis
from redis.exceptions import RedisError

from truthlens.core.config import Config
from truthlens.core.errors import ResultAlreadyStoredError, StoreUnavailableError
from truthlens.core.models import AnalysisResult

logger = logging.getLogger(__name__)


class ResultStore(ABC):
    """
    Write-once-read-many storage for analysis results, keyed by analysis id.
    Results never expire and are never deleted.
    """

    @abstractmethod
    def get(self, analysis_id: str) -> Optional[AnalysisResult]:
        ...

    @abstractmethod
    def put(self, result: AnalysisResult) -> None:
        """Store a result. Raises ResultAlreadyStoredError if the id is taken."""

    @abstractmethod
    def stats(self) -> dict:
        ...

    def seed(self, result: AnalysisResult) -> None:
        """Store a result unless one with the same id is already present."""
        try:
            self.put(result)
            logger.info(f"Seeded result store with: {result.id}")
        except ResultAlreadyStoredError:
            logger.info(f"Result store already holds: {result.id}")

    def __contains__(self, analysis_id: str) -> bool:
        return self.get(analysis_id) is not None


class MemoryResultStore(ResultStore):
    """In-process store; contents live as long as the process."""

    def __init__(self):
        self._results: Dict[str, AnalysisResult] = {}

    def get(self, analysis_id: str) -> Optional[AnalysisResult]:
        return self._results.get(analysis_id)

    def put(self, result: AnalysisResult) -> None:
        if result.id in self._results:
            raise ResultAlreadyStoredError(result.id)
        self._results[result.id] = result

    def stats(self) -> dict:
        return {"backend": "memory", "results": len(self._results)}


class RedisResultStore(ResultStore):
    """Stores each result as a JSON document under ``<prefix><id>`` with no TTL."""

    def __init__(self, client: Redis, key_prefix: str = "truthlens:analysis:"):
        self.client = client
        self.key_prefix = key_prefix

    def _key(self, analysis_id: str) -> str:
        return f"{self.key_prefix}{analysis_id}"

    def get(self, analysis_id: str) -> Optional[AnalysisResult]:
        key = self._key(analysis_id)
        try:
            value = self.client.get(key)
        except RedisError as e:
            logger.error(f"Error retrieving key {key} from Redis: {e}")
            raise StoreUnavailableError(str(e)) from e

        if value is None:
            logger.info(f"Store miss for key: {key}")
            return None
        logger.info(f"Store hit for key: {key}")
        return AnalysisResult.model_validate_json(value)

    def put(self, result: AnalysisResult) -> None:
        key = self._key(result.id)
        try:
            created = self.client.set(name=key, value=result.model_dump_json(by_alias=True), nx=True)
        except RedisError as e:
            logger.error(f"Error setting key {key} in Redis: {e}")
            raise StoreUnavailableError(str(e)) from e

        if not created:
            raise ResultAlreadyStoredError(result.id)
        logger.info(f"Stored result under key: {key}")

    def stats(self) -> dict:
        try:
            info = self.client.info()
        except RedisError as e:
            logger.error(f"Error retrieving Redis stats: {e}")
            raise StoreUnavailableError(str(e)) from e

        return {
            "backend": "redis",
            "used_memory_human": info.get("used_memory_human"),
            "keyspace_hits": info.get("keyspace_hits"),
            "keyspace_misses": info.get("keyspace_misses"),
            "connected_clients": info.get("connected_clients"),
            "uptime_in_seconds": info.get("uptime_in_seconds"),
        }


def build_store(settings: Config) -> ResultStore:
    """Create the result store selected by RESULT_STORE_BACKEND."""
    backend = settings.RESULT_STORE_BACKEND.lower()
    if backend == "memory":
        logger.info("Using in-memory result store.")
        return MemoryResultStore()
    if backend == "redis":
        logger.info(f"Using Redis result store at {settings.REDIS_URL}.")
        return RedisResultStore(Redis.from_url(settings.REDIS_URL), key_prefix=settings.RESULT_KEY_PREFIX)
    raise ValueError(f"Unknown result store backend: {settings.RESULT_STORE_BACKEND}")
