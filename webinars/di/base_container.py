"""
Container Core
==============

Keyed registry behind DIContainer. A key is either an interface type
(``WebinarRepository``) or a plain name (``"mongo_client"``).
"""
from typing import Any, Callable, Dict, Type, TypeVar, Union

T = TypeVar("T")
Key = Union[Type[Any], str]


class RegistrationNotFoundError(LookupError):
    """Nothing is registered under the requested key."""

    def __init__(self, key: Key) -> None:
        name = key if isinstance(key, str) else key.__name__
        super().__init__(f"No registration found for {name}")
        self.key = key


class BaseContainer:
    """Registry of shared instances and per-lookup factories."""

    def __init__(self) -> None:
        self._singletons: Dict[Key, Any] = {}
        self._factories: Dict[Key, Callable[[], Any]] = {}

    def __contains__(self, key: Key) -> bool:
        return key in self._singletons or key in self._factories

    def register_singleton(self, key: Key, instance: Any) -> None:
        """Share one instance for every lookup of ``key``; replaces any factory."""
        self._factories.pop(key, None)
        self._singletons[key] = instance

    def register_factory(self, key: Key, factory: Callable[[], Any]) -> None:
        """Build a fresh instance on every lookup of ``key``; replaces any singleton."""
        self._singletons.pop(key, None)
        self._factories[key] = factory

    def get(self, key: Union[Type[T], str]) -> T:
        """
        Resolve a registration.

        Raises:
            RegistrationNotFoundError: If ``key`` was never registered
        """
        if key in self._singletons:
            return self._singletons[key]
        factory = self._factories.get(key)
        if factory is None:
            raise RegistrationNotFoundError(key)
        return factory()
