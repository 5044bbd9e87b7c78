"""
Flattening of nested request bodies into ordered ``(key, value, is_file)`` entries.
"""

from collections.abc import Mapping, Sequence
from typing import Any, NamedTuple

from .uploads import is_file_like


class FlatEntry(NamedTuple):
    key: str
    value: Any
    is_file: bool


def _is_sequence(node: Any) -> bool:
    return isinstance(node, Sequence) and not isinstance(node, (str, bytes, bytearray))


def flatten(node: Any, prefix: str | None = None) -> list[FlatEntry]:
    """
    Walk ``node`` depth-first and return its leaves keyed by bracket paths.

    Without a ``prefix`` the node is the body itself and each of its keys becomes
    a root key. Nested mapping keys are appended as ``[key]``, sequence items as
    ``[]``. Empty mappings and sequences produce no entries.

    Example::

        flatten({"foo": {"bar": ["BAZ", upload]}})
        # [FlatEntry("foo[bar][]", "BAZ", False), FlatEntry("foo[bar][]", upload, True)]
    """
    if prefix is None:
        children = ((str(key), value) for key, value in node.items())
    elif isinstance(node, Mapping):
        children = ((f"{prefix}[{key}]", value) for key, value in node.items())
    elif _is_sequence(node):
        children = ((f"{prefix}[]", value) for value in node)
    else:
        return [FlatEntry(prefix, node, is_file_like(node))]

    entries: list[FlatEntry] = []
    for key, value in children:
        entries.extend(flatten(value, key))
    return entries
