"""Named resource stores keyed by numeric id."""

from __future__ import annotations

from typing import Any, Dict, Generic, Optional, Type, TypeVar

T = TypeVar("T")

INVALID_RESOURCE_ID = -1


class ResourceManager(Generic[T]):
    """Stores resources under names and ids handed out from 1 upwards."""

    def __init__(self) -> None:
        self._resources: Dict[int, T] = {}
        self._names: Dict[str, int] = {}
        self._last_id = 0

    def add(self, name: str, resource: T) -> int:
        """Store a resource under a name and return its id.

        If the name is already known, its existing id is returned and the
        resource is not stored.
        """
        if name in self._names:
            return self._names[name]
        self._last_id += 1
        self._resources[self._last_id] = resource
        self._names[name] = self._last_id
        return self._last_id

    def remove(self, resource_id: int) -> None:
        """Remove the resource with the given id and its name."""
        for name, stored_id in self._names.items():
            if stored_id == resource_id:
                del self._names[name]
                break
        self._resources.pop(resource_id, None)

    def get(self, resource_id: int) -> Optional[T]:
        """Return the resource with the given id, or None."""
        return self._resources.get(resource_id)

    def get_by_name(self, name: str) -> Optional[T]:
        """Return the resource stored under a name, or None."""
        return self.get(self.resource_id(name))

    def resource_id(self, name: str) -> int:
        """Return the id for a name, or -1 if the name is unknown."""
        return self._names.get(name, INVALID_RESOURCE_ID)

    def flush(self) -> None:
        """Drop all stored resources; names and the id counter are kept."""
        self._resources.clear()

    def __len__(self) -> int:
        return len(self._resources)


_managers: Dict[type, ResourceManager[Any]] = {}


def manager_for(resource_type: Type[T]) -> ResourceManager[T]:
    """Return the shared store for a resource type, creating it on first use."""
    manager = _managers.get(resource_type)
    if manager is None:
        manager = ResourceManager()
        _managers[resource_type] = manager
    return manager