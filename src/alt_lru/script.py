"""Scripted operation runner

Parses a line-oriented operation script and replays it against a cache.

Script format (one operation per line, ``#`` starts a comment)::

    put <key> <value...>
    get <key>
    peek <key>
    remove <key>
    size
    capacity
    keys
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Iterable, Protocol, runtime_checkable

from alt_lru.exceptions import ScriptError

# command -> argument count; a put value runs to the end of the line
_ARITY: dict[str, int] = {
    "put": 2,
    "get": 1,
    "peek": 1,
    "remove": 1,
    "size": 0,
    "capacity": 0,
    "keys": 0,
}

_MISSING = object()


@runtime_checkable
class CacheLike(Protocol):
    """Operations the runner needs; satisfied by both cache variants."""

    @property
    def capacity(self) -> int: ...

    def size(self) -> int: ...

    def __contains__(self, key: object) -> bool: ...

    def get(self, key: Hashable, default: object = None) -> object: ...

    def peek(self, key: Hashable, default: object = None) -> object: ...

    def put(self, key: Hashable, value: object) -> None: ...

    def remove(self, key: Hashable) -> bool: ...

    def keys(self) -> list: ...


class EvictionRecorder:
    """Eviction hook that keeps the keys a cache dropped, oldest first."""

    def __init__(self) -> None:
        self._keys: list[Hashable] = []

    def __call__(self, key: Hashable, value: object) -> None:
        self._keys.append(key)

    def __len__(self) -> int:
        return len(self._keys)

    def keys_since(self, index: int) -> list[Hashable]:
        return self._keys[index:]


@dataclass(frozen=True)
class Operation:
    line_no: int
    command: str
    key: str | None = None
    value: str | None = None


@dataclass
class OperationResult:
    operation: Operation
    output: str | None = None
    found: bool | None = None
    evicted: str | None = None

    def format(self) -> str:
        op = self.operation
        label = op.command if op.key is None else f"{op.command} {op.key}"
        if op.command == "put":
            suffix = f" (evicted {self.evicted})" if self.evicted is not None else ""
            return f"{label} -> ok{suffix}"
        if op.command in ("get", "peek"):
            return f"{label} -> {self.output if self.found else 'not found'}"
        if op.command == "remove":
            return f"{label} -> {'removed' if self.found else 'not found'}"
        return f"{label} -> {self.output}"


def parse_line(line_no: int, line: str) -> Operation | None:
    """Parse one script line. Returns None for blank and comment lines."""
    stripped = line.split("#", 1)[0].strip()
    if not stripped:
        return None

    command, *rest = stripped.split(None, 1)
    command = command.lower()
    if command not in _ARITY:
        raise ScriptError(line_no, f"unknown command: {command!r}")

    if command == "put":
        parts = rest[0].split(None, 1) if rest else []
        if len(parts) != 2:
            raise ScriptError(line_no, "put requires a key and a value")
        key, value = parts
        return Operation(line_no=line_no, command=command, key=key, value=value.strip())

    args = rest[0].split() if rest else []
    if len(args) != _ARITY[command]:
        raise ScriptError(line_no, f"{command} takes {_ARITY[command]} argument(s), got {len(args)}")
    return Operation(line_no=line_no, command=command, key=args[0] if args else None)


def parse_script(lines: Iterable[str]) -> list[Operation]:
    operations = []
    for line_no, line in enumerate(lines, start=1):
        op = parse_line(line_no, line)
        if op is not None:
            operations.append(op)
    return operations


def execute(cache: CacheLike, op: Operation, evictions: EvictionRecorder) -> OperationResult:
    """Apply a single operation to ``cache``.

    ``evictions`` must be the ``on_evict`` hook of ``cache``; a put reports
    the key the cache actually dropped while storing it.
    """
    if op.command == "put":
        before = len(evictions)
        cache.put(op.key, op.value)
        dropped = evictions.keys_since(before)
        return OperationResult(operation=op, evicted=str(dropped[0]) if dropped else None)

    if op.command in ("get", "peek"):
        lookup = cache.get if op.command == "get" else cache.peek
        value = lookup(op.key, _MISSING)
        if value is _MISSING:
            return OperationResult(operation=op, found=False)
        return OperationResult(operation=op, output=value, found=True)

    if op.command == "remove":
        return OperationResult(operation=op, found=cache.remove(op.key))

    if op.command == "size":
        return OperationResult(operation=op, output=str(cache.size()))

    if op.command == "capacity":
        return OperationResult(operation=op, output=str(cache.capacity))

    if op.command == "keys":
        return OperationResult(operation=op, output=" ".join(str(k) for k in cache.keys()))

    raise ScriptError(op.line_no, f"unknown command: {op.command!r}")


def run_script(
    cache: CacheLike, operations: Iterable[Operation], evictions: EvictionRecorder
) -> list[OperationResult]:
    return [execute(cache, op, evictions) for op in operations]
