"""Step-by-step construction of JSON values with structural checks."""

from __future__ import annotations

from typing import Any

_ROOT = object()


class Builder:
    """Builds a JSON value through chained calls.

    Every misuse, such as a key outside a dictionary or a value in a
    dictionary without a key, raises ``RuntimeError``.
    """

    def __init__(self) -> None:
        self._root: Any = None
        self._stack: list[Any] = [_ROOT]
        self._key: str | None = None

    def _top(self) -> Any:
        if not self._stack:
            raise RuntimeError("The value is already complete")
        top = self._stack[-1]
        return self._root if top is _ROOT else top

    def key(self, key: str) -> Builder:
        """Set the key for the next value of the open dictionary."""
        if not isinstance(self._top(), dict) or self._key is not None:
            raise RuntimeError(f"Wrong map key: {key}")
        self._key = key
        return self

    def _take_key(self, action: str) -> str:
        if self._key is None:
            raise RuntimeError(f"Could not {action} for dict without key")
        key, self._key = self._key, None
        return key

    def value(self, value: Any) -> Builder:
        """Add a complete value to the open container or as the root."""
        top = self._top()
        if isinstance(top, dict):
            top[self._take_key("Value()")] = value
        elif isinstance(top, list):
            top.append(value)
        elif self._root is None:
            self._root = value
        else:
            raise RuntimeError("Value() called in unknow container")
        return self

    def _start(self, container: Any, action: str) -> None:
        top = self._top()
        if isinstance(top, dict):
            self._stack.append(top.setdefault(self._take_key(action), container))
        elif isinstance(top, list):
            top.append(container)
            self._stack.append(container)
        elif top is None:
            self._root = container
        else:
            raise RuntimeError("Wrong prev node")

    def start_dict(self) -> Builder:
        """Open a new dictionary."""
        self._start({}, "StartDict()")
        return self

    def end_dict(self) -> Builder:
        """Close the innermost dictionary."""
        if not isinstance(self._top(), dict):
            raise RuntimeError("Prev node is not a Dict")
        self._stack.pop()
        return self

    def start_array(self) -> Builder:
        """Open a new array."""
        self._start([], "StartArray()")
        return self

    def end_array(self) -> Builder:
        """Close the innermost array."""
        if not isinstance(self._top(), list):
            raise RuntimeError("Prev node is not an Array")
        self._stack.pop()
        return self

    def build(self) -> Any:
        """Return the finished value."""
        if self._root is None or len(self._stack) > 1:
            raise RuntimeError("Wrong Build()")
        return self._root