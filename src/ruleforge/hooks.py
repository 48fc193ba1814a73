"""Event hooks for rule chains, fields and forms.

Hooks are plain callables registered under an event name and run in
registration order. Event names in use:

- Rule chain: ``before.<rule>.run``, ``after.<rule>.run``,
  ``after.<rule>.passes``, ``after.<rule>.fails``
- Field: ``input.updated``, ``input.validated``, ``input.passes``,
  ``input.fails``, ``destroy``
- Form: ``form.validated``, ``form.passes``, ``form.fails``, ``form.destroy``
"""

from collections.abc import Callable
from typing import Any

HookCallback = Callable[..., Any]


class HookSet:
    """Callbacks keyed by event name, owned by one chain, field or form."""

    def __init__(self) -> None:
        self._hooks: dict[str, list[HookCallback]] = {}

    def add(self, event: str, callback: HookCallback) -> None:
        """Register a callback for an event.

        Raises:
            TypeError: If callback is not callable
        """
        if not callable(callback):
            raise TypeError(f"Hook for '{event}' must be callable")
        self._hooks.setdefault(event, []).append(callback)

    def emit(self, event: str, *args: Any) -> None:
        """Run every callback of ``event``; errors propagate."""
        for callback in list(self._hooks.get(event, ())):
            callback(*args)

    def has(self, event: str) -> bool:
        return bool(self._hooks.get(event))

    def events(self) -> list[str]:
        return sorted(event for event, callbacks in self._hooks.items() if callbacks)

    def remove(self, event: str) -> None:
        self._hooks.pop(event, None)

    def clear(self) -> None:
        self._hooks.clear()

    def __len__(self) -> int:
        return sum(len(callbacks) for callbacks in self._hooks.values())
