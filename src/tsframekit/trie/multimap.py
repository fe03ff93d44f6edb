"""Multi-key dictionary backed by a ternary search trie.

Each entry is addressed by a fixed-length tuple of comparable keys. Every
key position owns a ternary search trie whose ``equal`` links lead into the
trie of the next position, so a stored tuple is one path consuming one
node per position.

A ``None`` key in a lookup is a wildcard: it matches every key at that
position.

Usage:
    >>> people = MultiMap(arity=2)
    >>> people.insert(123, ("Bob", "Smith"))
    >>> people.find((None, "Smith"))
    [123]
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from tsframekit.core.errors import EContractViolation

# Marks a node that holds no entry; None is a valid stored value.
_ABSENT: Any = object()


class _Node:
    """Trie node. Children are owned by this node only."""

    __slots__ = ("key", "value", "lesser", "equal", "greater")

    def __init__(self, key: Any) -> None:
        self.key = key
        self.value: Any = _ABSENT
        self.lesser: _Node | None = None
        self.equal: _Node | None = None
        self.greater: _Node | None = None


class MultiMap:
    """Dictionary whose values are indexed by ``arity`` ordered keys.

    Inserting an existing key tuple overwrites its value. Lookups accept
    ``None`` as a wildcard at any position and return matches in
    ascending key order.

    Args:
        arity: Number of keys that identify one entry
    """

    def __init__(self, arity: int) -> None:
        if arity < 1:
            raise EContractViolation(
                f"MultiMap needs at least one key, got {arity}",
                context={"arity": arity},
            )
        self.arity = arity
        self.count = 0
        self._root: _Node | None = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def insert(self, value: Any, keys: Sequence[Any]) -> None:
        """Insert ``value`` under ``keys``, replacing any existing value."""
        keys = self._exact_keys(keys)
        node = self._locate(keys)
        if node is None or node.value is _ABSENT:
            self.count += 1
        self._put(value, keys)

    def find(self, keys: Sequence[Any]) -> list[Any]:
        """Return values matching ``keys``; ``None`` keys are wildcards."""
        return [value for _, value in self.find_items(keys)]

    def find_items(self, keys: Sequence[Any]) -> list[tuple[tuple[Any, ...], Any]]:
        """Return ``(key_tuple, value)`` pairs matching ``keys``."""
        self._check_arity(keys)
        return list(self._walk(tuple(keys)))

    def contains(self, keys: Sequence[Any]) -> bool:
        """Check whether any entry matches ``keys`` (wildcards allowed)."""
        self._check_arity(keys)
        for _ in self._walk(tuple(keys)):
            return True
        return False

    def remove(self, keys: Sequence[Any]) -> None:
        """Remove the entry stored under ``keys``.

        Absent keys are ignored. Nodes left without any entry beneath them
        are unlinked.
        """
        keys = self._exact_keys(keys)
        path = self._path_to(keys)
        if path is None:
            return
        holder, attr = path[-1]
        node = getattr(holder, attr)
        node.value = _ABSENT
        self.count -= 1
        self._prune(path)

    def remove_all(self) -> None:
        """Remove every entry."""
        self.count = 0
        self._root = None

    clear = remove_all

    def get(self, keys: Sequence[Any], default: Any = None) -> Any:
        """Exact lookup returning ``default`` when absent."""
        node = self._locate(self._exact_keys(keys))
        if node is None or node.value is _ABSENT:
            return default
        return node.value

    def items(self) -> list[tuple[tuple[Any, ...], Any]]:
        return list(self._walk((None,) * self.arity))

    def keys(self) -> list[tuple[Any, ...]]:
        return [key for key, _ in self._walk((None,) * self.arity)]

    def values(self) -> list[Any]:
        return [value for _, value in self._walk((None,) * self.arity)]

    def __len__(self) -> int:
        return self.count

    def __contains__(self, keys: object) -> bool:
        if not isinstance(keys, Sequence) or isinstance(keys, str):
            return False
        if len(keys) != self.arity:
            return False
        return self.contains(keys)

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        for key, _ in self._walk((None,) * self.arity):
            yield key

    def __getitem__(self, keys: Sequence[Any]) -> Any:
        node = self._locate(self._exact_keys(keys))
        if node is None or node.value is _ABSENT:
            raise KeyError(tuple(keys))
        return node.value

    def __setitem__(self, keys: Sequence[Any], value: Any) -> None:
        self.insert(value, keys)

    def __repr__(self) -> str:
        return f"MultiMap(arity={self.arity}, count={self.count})"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_arity(self, keys: Sequence[Any]) -> None:
        if len(keys) != self.arity:
            raise EContractViolation(
                f"Expected {self.arity} search keys, got {len(keys)}",
                context={"keys": tuple(keys)},
            )

    def _exact_keys(self, keys: Sequence[Any]) -> tuple[Any, ...]:
        self._check_arity(keys)
        if any(key is None for key in keys):
            raise EContractViolation(
                "Wildcard keys are only allowed in lookups",
                context={"keys": tuple(keys)},
                fix_hint="Pass a concrete key at every position",
            )
        return tuple(keys)

    def _put(self, value: Any, keys: tuple[Any, ...]) -> None:
        if self._root is None:
            self._root = _Node(keys[0])
        node = self._root
        depth = 0
        last = self.arity - 1
        while True:
            key = keys[depth]
            if key < node.key:
                if node.lesser is None:
                    node.lesser = _Node(key)
                node = node.lesser
            elif key > node.key:
                if node.greater is None:
                    node.greater = _Node(key)
                node = node.greater
            elif depth == last:
                node.value = value
                return
            else:
                depth += 1
                if node.equal is None:
                    node.equal = _Node(keys[depth])
                node = node.equal

    def _path_to(self, keys: tuple[Any, ...]) -> list[tuple[Any, str]] | None:
        """Links followed to reach the entry for ``keys``.

        Each element is ``(holder, attribute)`` so the link can be rewired;
        the trie itself holds the root link. Returns None when absent.
        """
        path: list[tuple[Any, str]] = [(self, "_root")]
        node = self._root
        depth = 0
        last = self.arity - 1
        while node is not None:
            key = keys[depth]
            if key < node.key:
                attr = "lesser"
            elif key > node.key:
                attr = "greater"
            elif depth == last:
                return path if node.value is not _ABSENT else None
            else:
                attr = "equal"
                depth += 1
            path.append((node, attr))
            node = getattr(node, attr)
        return None

    def _locate(self, keys: tuple[Any, ...]) -> _Node | None:
        path = self._path_to(keys)
        if path is None:
            return None
        holder, attr = path[-1]
        return getattr(holder, attr)

    @staticmethod
    def _prune(path: list[tuple[Any, str]]) -> None:
        # Walk back towards the root, unlinking nodes that hold nothing.
        for holder, attr in reversed(path):
            node = getattr(holder, attr)
            if node.value is not _ABSENT or node.equal is not None:
                return
            if node.lesser is not None and node.greater is not None:
                return
            replacement = node.lesser if node.lesser is not None else node.greater
            setattr(holder, attr, replacement)
            if replacement is not None:
                return

    def _walk(self, keys: tuple[Any, ...]) -> Iterator[tuple[tuple[Any, ...], Any]]:
        """In-order traversal yielding entries that match ``keys``."""
        last = self.arity - 1
        # Stack items: (node, depth, prefix, emit). emit=True yields the node.
        stack: list[tuple[_Node, int, tuple[Any, ...], bool]] = []
        if self._root is not None:
            stack.append((self._root, 0, (), False))
        while stack:
            node, depth, prefix, emit = stack.pop()
            if emit:
                yield prefix + (node.key,), node.value
                continue
            key = keys[depth]
            wildcard = key is None
            # Push in reverse so lesser is visited first.
            if node.greater is not None and (wildcard or key > node.key):
                stack.append((node.greater, depth, prefix, False))
            if wildcard or key == node.key:
                if depth < last:
                    if node.equal is not None:
                        stack.append((node.equal, depth + 1, prefix + (node.key,), False))
                elif node.value is not _ABSENT:
                    stack.append((node, depth, prefix, True))
            if node.lesser is not None and (wildcard or key < node.key):
                stack.append((node.lesser, depth, prefix, False))


# Name kept for callers that know the structure as a dictionary.
MultikeyDictionary = MultiMap
