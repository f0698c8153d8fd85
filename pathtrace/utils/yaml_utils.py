"""Utilities for handling YAML parsing quirks."""

from typing import Any, Dict, TypeVar

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Normalize dictionary keys from YAML parsing to strings.

    YAML 1.1 turns keys such as ``yes``/``no``/``on``/``off`` into booleans and
    bare numbers into ints. Node ids and road types are always strings, so
    every key is converted with ``str()``.

    Args:
        data: Dictionary that may contain non-string keys.

    Returns:
        Dictionary with all keys converted to strings.

    Examples:
        >>> normalize_yaml_dict_keys({True: 1.0, 7: 2.0, "Dirt": 2.5})
        {'True': 1.0, '7': 2.0, 'Dirt': 2.5}
    """
    return {str(key): value for key, value in data.items()}
