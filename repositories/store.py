"""
Key-value store adapters.

Provides a Redis-backed implementation for production and an in-memory
implementation with the same semantics for tests and local runs.
"""

from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import AsyncIterator, Callable, Dict, List

import redis.asyncio as redis
from redis.exceptions import RedisError

from core.exceptions import StoreError
from core.logger import logger
from repositories.interfaces.store_interface import IKeyValueStore, IStoreBatch


def _store_error(operation: str, error: Exception) -> StoreError:
    logger.error(f"❌ Redis {operation} failed: {error}")
    return StoreError(str(error))


class RedisStoreBatch(IStoreBatch):
    """Queues commands on a MULTI/EXEC pipeline."""

    def __init__(self, pipeline):
        self._pipeline = pipeline

    def set_fields(self, key: str, mapping: Dict[str, str]) -> None:
        self._pipeline.hset(key, mapping=mapping)

    def remove_key(self, key: str) -> None:
        self._pipeline.unlink(key)

    def add_to_ordered_set(self, set_name: str, score: float, member: str) -> None:
        self._pipeline.zadd(set_name, {member: score})

    def remove_from_ordered_set(self, set_name: str, member: str) -> None:
        self._pipeline.zrem(set_name, member)


class RedisKeyValueStore(IKeyValueStore):
    """
    Redis implementation of IKeyValueStore.

    Every RedisError (connection failures included) is re-raised as
    StoreError carrying the client's message. Nothing is retried.
    """

    def __init__(self, client: redis.Redis):
        """
        Args:
            client: Connected redis.asyncio client created with decode_responses=True
        """
        self._client = client

    async def set_fields(self, key: str, mapping: Dict[str, str]) -> None:
        try:
            await self._client.hset(key, mapping=mapping)
            logger.debug(f"HSET {key}: {len(mapping)} fields")
        except RedisError as e:
            raise _store_error("HSET", e) from e

    async def get_all_fields(self, key: str) -> Dict[str, str]:
        try:
            fields = await self._client.hgetall(key)
            logger.debug(f"HGETALL {key}: {len(fields)} fields")
            return fields
        except RedisError as e:
            raise _store_error("HGETALL", e) from e

    async def remove_key(self, key: str) -> None:
        try:
            removed = await self._client.unlink(key)
            logger.debug(f"UNLINK {key}: removed={removed}")
        except RedisError as e:
            raise _store_error("UNLINK", e) from e

    async def add_to_ordered_set(self, set_name: str, score: float, member: str) -> None:
        try:
            await self._client.zadd(set_name, {member: score})
            logger.debug(f"ZADD {set_name} {score} {member}")
        except RedisError as e:
            raise _store_error("ZADD", e) from e

    async def remove_from_ordered_set(self, set_name: str, member: str) -> None:
        try:
            removed = await self._client.zrem(set_name, member)
            logger.debug(f"ZREM {set_name} {member}: removed={removed}")
        except RedisError as e:
            raise _store_error("ZREM", e) from e

    async def range_ordered_set(self, set_name: str, start: int, end: int) -> List[str]:
        try:
            members = await self._client.zrange(set_name, start, end)
            logger.debug(f"ZRANGE {set_name} {start} {end}: {len(members)} members")
            return members
        except RedisError as e:
            raise _store_error("ZRANGE", e) from e

    async def ping(self) -> bool:
        try:
            return bool(await self._client.ping())
        except RedisError as e:
            logger.warning(f"⚠️ Redis ping failed: {e}")
            return False

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[RedisStoreBatch]:
        try:
            async with self._client.pipeline(transaction=True) as pipeline:
                yield RedisStoreBatch(pipeline)
                await pipeline.execute()
                logger.debug("EXEC: transaction committed")
        except RedisError as e:
            raise _store_error("MULTI/EXEC", e) from e


class InMemoryStoreBatch(IStoreBatch):
    """Collects writes and applies them together."""

    def __init__(self, store: "InMemoryKeyValueStore"):
        self._store = store
        self.commands: List[Callable[[], None]] = []

    def set_fields(self, key: str, mapping: Dict[str, str]) -> None:
        self.commands.append(lambda: self._store._hset(key, mapping))

    def remove_key(self, key: str) -> None:
        self.commands.append(lambda: self._store.hashes.pop(key, None))

    def add_to_ordered_set(self, set_name: str, score: float, member: str) -> None:
        self.commands.append(lambda: self._store._zadd(set_name, score, member))

    def remove_from_ordered_set(self, set_name: str, member: str) -> None:
        self.commands.append(lambda: self._store._zrem(set_name, member))


@dataclass
class InMemoryKeyValueStore(IKeyValueStore):
    """
    Process-local store for testing/dev.

    Mirrors Redis semantics: values are stored as strings, sorted sets
    order by (score, member) and ranges use inclusive, negative-aware bounds.
    """

    hashes: Dict[str, Dict[str, str]] = field(default_factory=dict)
    sorted_sets: Dict[str, Dict[str, float]] = field(default_factory=dict)

    def _hset(self, key: str, mapping: Dict[str, str]) -> None:
        self.hashes.setdefault(key, {}).update(
            {name: str(value) for name, value in mapping.items()}
        )

    def _zadd(self, set_name: str, score: float, member: str) -> None:
        self.sorted_sets.setdefault(set_name, {})[member] = float(score)

    def _zrem(self, set_name: str, member: str) -> None:
        members = self.sorted_sets.get(set_name)
        if members is None:
            return
        members.pop(member, None)
        if not members:
            # Redis drops empty keys
            del self.sorted_sets[set_name]

    async def set_fields(self, key: str, mapping: Dict[str, str]) -> None:
        self._hset(key, mapping)

    async def get_all_fields(self, key: str) -> Dict[str, str]:
        return dict(self.hashes.get(key, {}))

    async def remove_key(self, key: str) -> None:
        self.hashes.pop(key, None)

    async def add_to_ordered_set(self, set_name: str, score: float, member: str) -> None:
        self._zadd(set_name, score, member)

    async def remove_from_ordered_set(self, set_name: str, member: str) -> None:
        self._zrem(set_name, member)

    async def range_ordered_set(self, set_name: str, start: int, end: int) -> List[str]:
        members = sorted(
            self.sorted_sets.get(set_name, {}).items(),
            key=lambda item: (item[1], item[0]),
        )
        size = len(members)
        if start < 0:
            start = max(size + start, 0)
        if end < 0:
            end = size + end
        if start >= size or start > end:
            return []
        return [member for member, _ in members[start : end + 1]]

    async def ping(self) -> bool:
        return True

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[InMemoryStoreBatch]:
        batch = InMemoryStoreBatch(self)
        yield batch
        for command in batch.commands:
            command()
