"""Per-identity cooldown between two achievement books."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Hashable, Optional

from loguru import logger

DEFAULT_SHARDS = 16


def _now_ms() -> int:
    return int(time.time() * 1000)


def _nobody(_identity: Hashable) -> bool:
    return False


@dataclass
class _Shard:
    lock: threading.Lock = field(default_factory=threading.Lock)
    grants: dict[Hashable, int] = field(default_factory=dict)


class CooldownGate:
    """
    Decide whether an identity may receive a new book right now.

    Grants are stored per identity in lock-striped shards: calls for the same
    identity always land on the same shard and are serialized, calls for
    unrelated identities rarely contend. Each shard evicts expired grants once
    it grows past its share of ``capacity``.
    """

    def __init__(
        self,
        cooldown_ms: int,
        *,
        has_unrestricted_access: Optional[Callable[[Hashable], bool]] = None,
        retention_ms: Optional[int] = None,
        capacity: int = 4096,
        shards: int = DEFAULT_SHARDS,
    ) -> None:
        if cooldown_ms < 0:
            raise ValueError("cooldown_ms must be zero or positive.")
        if shards < 1:
            raise ValueError("shards must be at least 1.")
        self.cooldown_ms = cooldown_ms
        # Evicting anything younger than the cooldown would change decisions.
        self.retention_ms = max(cooldown_ms, retention_ms or 0)
        self.capacity = max(1, capacity)
        self._has_unrestricted_access = has_unrestricted_access or _nobody
        self._shards = tuple(_Shard() for _ in range(shards))
        self._shard_capacity = max(1, self.capacity // shards)

    def is_authorized(self, identity: Hashable, now: Optional[int] = None) -> bool:
        """Return True and record the grant when ``identity`` is out of cooldown."""
        if self._has_unrestricted_access(identity):
            return True
        if now is None:
            now = _now_ms()

        shard = self._shard_for(identity)
        with shard.lock:
            last = shard.grants.get(identity)
            if last is not None and last > now:
                # The wall clock stepped back; a grant is never kept in the future.
                logger.warning("Clock moved back {} ms for {}", last - now, identity)
                last = shard.grants[identity] = now
            if last is not None and now - last < self.cooldown_ms:
                logger.debug("Book denied for {}: {} ms left", identity, self.cooldown_ms - (now - last))
                return False
            shard.grants[identity] = now
            if len(shard.grants) > self._shard_capacity:
                self._prune_locked(shard, now)
        return True

    def remaining_ms(self, identity: Hashable, now: Optional[int] = None) -> int:
        """Milliseconds until ``identity`` may receive another book (0 when allowed)."""
        if self._has_unrestricted_access(identity):
            return 0
        if now is None:
            now = _now_ms()
        last = self.last_grant(identity)
        if last is None:
            return 0
        elapsed = max(0, now - last)
        return max(0, self.cooldown_ms - elapsed)

    def last_grant(self, identity: Hashable) -> Optional[int]:
        shard = self._shard_for(identity)
        with shard.lock:
            return shard.grants.get(identity)

    def prune(self, now: Optional[int] = None) -> int:
        """Evict grants older than the retention window; return how many were dropped."""
        if now is None:
            now = _now_ms()
        evicted = 0
        for shard in self._shards:
            with shard.lock:
                evicted += self._prune_locked(shard, now)
        return evicted

    def __len__(self) -> int:
        total = 0
        for shard in self._shards:
            with shard.lock:
                total += len(shard.grants)
        return total

    def _shard_for(self, identity: Hashable) -> _Shard:
        return self._shards[hash(identity) % len(self._shards)]

    def _prune_locked(self, shard: _Shard, now: int) -> int:
        expired = [
            identity
            for identity, last in shard.grants.items()
            if now - last >= self.retention_ms
        ]
        for identity in expired:
            del shard.grants[identity]
        if expired:
            logger.debug("Evicted {} expired book cooldowns", len(expired))
        return len(expired)


__all__ = ["CooldownGate"]
