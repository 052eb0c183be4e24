"""
First-seen-wins registration shared by the catalog builder and the offer deduplicator.
"""

from collections.abc import MutableMapping
from typing import Any, Hashable, MutableSet, Union

Registry = Union[MutableMapping, MutableSet]


def merge_first_wins(registry: Registry, key: Hashable, value: Any = None) -> bool:
    """
    Registers `key` unless it is already present.

    Mappings store `value` under the key; sets just record the key.
    A later registration never overwrites an earlier one.

    Returns:
        True if the key was new and has been registered, False otherwise.
    """
    if key in registry:
        return False

    if isinstance(registry, MutableMapping):
        registry[key] = value
    else:
        registry.add(key)
    return True
