"""the memo arena of compiled validators.

schemas are frozen value types, so structurally identical schemas share one
validator. sub-validators are built eagerly while their parent compiles.

the arena keeps the ``utils.CACHE_SIZE`` most recently used validators and
evicts the rest, a size of 0 keeps everything. an evicted validator stays
alive as long as a parent validator holds it.
"""
import collections
import functools
import logging
import threading

from . import utils

logger = logging.getLogger(__name__)

__validators__ = collections.OrderedDict()
__lock__ = threading.Lock()


def cache(arena):
    """memoize a classmethod factory in the arena under (cls, *args)

    arguments that can not be hashed skip the arena and build a fresh value."""

    def decorator(factory):
        @functools.wraps(factory)
        def lookup(cls, *args):
            key = (cls,) + args
            try:
                with __lock__:
                    found = arena.get(key)
                    if found is not None:
                        arena.move_to_end(key)
                        return found
            except TypeError:
                return factory(cls, *args)

            logger.debug("arena miss for %s, %d entries", cls.__name__, len(arena))
            # built outside the lock, the factory looks up its sub-validators
            found = factory(cls, *args)
            with __lock__:
                arena[key] = found
                evict(arena, utils.CACHE_SIZE)
            return found

        return lookup

    return decorator


def evict(arena, size):
    """drop the least recently used entries until the arena holds size"""
    while size and len(arena) > size:
        key, _ = arena.popitem(last=False)
        logger.debug("arena evicted %s", key[0].__name__)


validator_cache = cache(__validators__)


def clear():
    """forget every cached validator"""
    with __lock__:
        __validators__.clear()


def size():
    """the number of cached validators"""
    return len(__validators__)
