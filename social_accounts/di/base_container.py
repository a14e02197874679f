# Standard library imports
from typing import Any, Callable, Dict, Hashable


class BaseContainer:
    """
    Minimal dependency container.

    Keys are usually classes (domain interfaces, use cases) or plain strings
    for infrastructure handles such as collections.
    """

    def __init__(self) -> None:
        self._singletons: Dict[Hashable, Any] = {}
        self._factories: Dict[Hashable, Callable[[], Any]] = {}

    def register_singleton(self, key: Hashable, instance: Any) -> None:
        """Register a shared instance returned on every get()"""
        self._singletons[key] = instance

    def register_factory(self, key: Hashable, factory: Callable[[], Any]) -> None:
        """Register a factory called on every get()"""
        self._factories[key] = factory

    def get(self, key: Hashable) -> Any:
        """
        Resolve a registered dependency

        Raises:
            KeyError: If nothing is registered under key
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        raise KeyError(f"No dependency registered for {key!r}")

    def is_registered(self, key: Hashable) -> bool:
        return key in self._singletons or key in self._factories
