"""
Path-based retrieval from configuration trees.
"""

from collections.abc import Mapping
from typing import Any, Sequence, Union

from microconfig.lazy import LazyValue

DELIMITER = '.'

Path = Union[str, Sequence[str]]


class PathResolver:
    """
    Resolves delimited paths such as ``"database.primary.host"`` through a
    nested mapping.

    A path that runs past a non-mapping value, or names an unknown key, resolves
    to None. A LazyValue found at the end of the path is invoked and its result
    returned.
    """

    def __init__(self, delimiter: str = DELIMITER):
        if not delimiter:
            raise ValueError("Path delimiter must be a non-empty string")
        self.delimiter = delimiter

    def split(self, path: Path) -> list:
        """Split a string path on the delimiter; sequences are copied as is."""
        if isinstance(path, str):
            return path.split(self.delimiter)
        return list(path)

    def get(self, tree: Mapping, path: Path) -> Any:
        segments = self.split(path)
        if not segments or not isinstance(tree, Mapping):
            return None

        value = tree
        for segment in segments:
            if not isinstance(value, Mapping):
                return None
            value = value.get(segment)

        if isinstance(value, LazyValue):
            value = value()

        return value


def get(tree: Mapping, path: Path, delimiter: str = DELIMITER) -> Any:
    """
    Retrieve a value from a configuration tree by key or path.

    Args:
        tree: Configuration tree
        path: Key sequence, or a string delimited by `delimiter`
        delimiter: Separator for string paths; change it when keys contain "."

    Returns:
        The value found, with a terminal LazyValue evaluated, or None
    """
    return PathResolver(delimiter).get(tree, path)
