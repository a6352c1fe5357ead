"""
Cache utilities for the formsite application.
"""

import hashlib
import json

from django.core.cache import caches


def generate_cache_key(prefix, *args, **kwargs):
    """
    Generate a consistent cache key from prefix and arguments.
    """
    key_parts = [str(prefix)]

    if args:
        key_parts.extend([str(arg) for arg in args])

    # Add keyword args, sorted by key
    if kwargs:
        kwargs_str = json.dumps(kwargs, sort_keys=True)
        key_parts.append(kwargs_str)

    # Join and hash to ensure key length constraints
    key = "_".join(key_parts)
    if len(key) > 200:
        key_hash = hashlib.md5(key.encode(), usedforsecurity=False).hexdigest()
        key = f"{prefix}_{key_hash}"

    return key


def get_cache(alias):
    """Return the named cache, resolved lazily so test overrides apply."""
    return caches[alias]
