import logging
from contextlib import contextmanager
from functools import lru_cache

import redis

from event_roster.core.config import get_lock_timeouts, get_redis_url
from event_roster.core.exceptions import StorageFailureError

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_redis_client():
    """Get Redis client for locking. One client (and connection pool) per process."""
    return redis.from_url(get_redis_url(), decode_responses=True)


def event_lock_key(event_id: int) -> str:
    return f"event_lock:{event_id}"


@contextmanager
def event_lock(event_id: int):
    """
    Hold the per-event Redis lock for the duration of the block.
    Registrations and deletions of the same event run one at a time;
    different events use different keys and never wait on each other.

    Yields the lock so the block can call ensure_lock_held() right before
    committing: the lock has a TTL (EVENT_LOCK_TIMEOUT) and must not have
    expired when the unit of work becomes final.
    """
    timeout, blocking_timeout = get_lock_timeouts()
    redis_client = get_redis_client()
    lock = redis_client.lock(event_lock_key(event_id), timeout=timeout, blocking_timeout=blocking_timeout)

    try:
        acquired = lock.acquire(blocking=True, blocking_timeout=blocking_timeout)
    except redis.exceptions.RedisError as e:
        logger.exception("Lock server unavailable for event %s", event_id)
        raise StorageFailureError("Lock server unavailable, please try again.") from e

    if not acquired:
        logger.warning("Timed out waiting for lock on event %s", event_id)
        raise StorageFailureError("Could not acquire lock, please try again.")

    try:
        yield lock
    finally:
        try:
            lock.release()
        except redis.exceptions.LockError:
            logger.warning("Lock on event %s expired before release", event_id)
        except redis.exceptions.RedisError:
            # the unit of work is already committed or rolled back
            logger.warning("Could not release lock on event %s", event_id, exc_info=True)


def ensure_lock_held(lock, event_id: int) -> None:
    """Raise StorageFailureError unless this process still owns the event's lock."""
    try:
        owned = lock.owned()
    except redis.exceptions.RedisError as e:
        logger.exception("Lock server unavailable for event %s", event_id)
        raise StorageFailureError("Lock server unavailable, please try again.") from e

    if not owned:
        logger.warning("Lock on event %s expired before commit", event_id)
        raise StorageFailureError("Lock expired before commit, please try again.")
