"""Assembly – ambient, per-context stack of scope fields.

The stack lives in a :class:`contextvars.ContextVar` holding an immutable
tuple, so each thread and each asyncio task observes its own scopes. A task
created inside a scope starts with a copy of the scopes open at that moment;
scopes it enters afterwards stay invisible to its parent.

Usage::

    stack = ScopeStack()
    with stack.enter({"request_id": "r-1"}):
        with stack.enter(("user", "alice")):
            stack.snapshot()  # outermost first
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from contextvars import ContextVar
from typing import Any

from gelf_logging.assembly.fields import FieldValue, coerce_field_value
from gelf_logging.assembly.template import parse_template


class ScopeEntry(Mapping[str, FieldValue]):
    """Ordered, read-only field set contributed by one scope."""

    __slots__ = ("_fields",)

    def __init__(self, fields: Iterable[tuple[str, Any]] = ()) -> None:
        self._fields: dict[str, FieldValue] = {
            str(name): coerce_field_value(value) for name, value in fields
        }

    @classmethod
    def from_state(cls, state: Any, args: tuple[Any, ...] = ()) -> "ScopeEntry":
        """Build an entry from whatever a caller handed to ``begin_scope``.

        * a mapping contributes all of its items
        * a ``(name, value)`` pair contributes one field
        * a template string binds *args* to its placeholders; without
          *args* it is plain text and contributes no fields
        * an iterable of pairs contributes each pair

        Any other state opens a scope without fields.
        """
        if isinstance(state, Mapping):
            return cls(state.items())
        if isinstance(state, str):
            if not args:
                return cls()
            _, fields = parse_template(state, args)
            return cls(fields.items())
        if isinstance(state, tuple) and len(state) == 2 and isinstance(state[0], str):
            return cls([state])
        if isinstance(state, (list, tuple)) and all(
            isinstance(item, tuple) and len(item) == 2 for item in state
        ):
            return cls(state)
        return cls()

    def __getitem__(self, key: str) -> FieldValue:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"ScopeEntry({self._fields!r})"


class Scope:
    """Handle for one open scope; closing it restores the enclosing stack.

    Works as a sync or async context manager. Closing twice is a no-op.
    """

    __slots__ = ("_stack", "_entry", "_parent", "_closed")

    def __init__(self, stack: ScopeStack, entry: ScopeEntry, parent: tuple[ScopeEntry, ...]) -> None:
        self._stack = stack
        self._entry = entry
        self._parent = parent
        self._closed = False

    @property
    def entry(self) -> ScopeEntry:
        return self._entry

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._stack._restore(self._parent)

    def __enter__(self) -> "Scope":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    async def __aenter__(self) -> "Scope":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()


class ScopeStack:
    """LIFO stack of :class:`ScopeEntry`, isolated per execution context.

    Scopes must be closed in reverse order of entry; closing out of turn
    is not detected and restores the stack as it was when that scope was
    entered.
    """

    def __init__(self, name: str = "gelf_scopes") -> None:
        self._var: ContextVar[tuple[ScopeEntry, ...]] = ContextVar(name, default=())

    def enter(self, state: Any, *args: Any) -> Scope:
        return self.push(ScopeEntry.from_state(state, args))

    def push(self, entry: ScopeEntry) -> Scope:
        parent = self._var.get()
        self._var.set((*parent, entry))
        return Scope(self, entry, parent)

    def exit(self, scope: Scope) -> None:
        scope.close()

    def snapshot(self) -> tuple[ScopeEntry, ...]:
        """Active entries, outermost first."""
        return self._var.get()

    @property
    def depth(self) -> int:
        return len(self._var.get())

    def _restore(self, entries: tuple[ScopeEntry, ...]) -> None:
        self._var.set(entries)


__all__ = ["Scope", "ScopeEntry", "ScopeStack"]
