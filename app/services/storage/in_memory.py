"""In-memory entity store."""
import asyncio
import logging
from typing import Callable, Iterable, List, Optional

from app.services.storage.base import EntityStore, EntityT

logger = logging.getLogger(__name__)


class InMemoryStore(EntityStore[EntityT]):
    """Ordered in-memory entity store.

    Writes (append, mutate, remove) are serialized with an asyncio lock so
    only one writer touches the collection at a time.
    """

    def __init__(self, name: str, entities: Optional[Iterable[EntityT]] = None):
        """Initialize with an optional set of preloaded entities."""
        self.name = name
        self._entities: List[EntityT] = list(entities or [])
        self._lock = asyncio.Lock()

    async def list_all(self) -> List[EntityT]:
        """Get every entity, in insertion order."""
        return list(self._entities)

    async def find(self, predicate: Callable[[EntityT], bool]) -> Optional[EntityT]:
        """Get the first entity matching the predicate."""
        for entity in self._entities:
            if predicate(entity):
                return entity
        return None

    async def insert(self, entity: EntityT) -> EntityT:
        """Append an entity to the store."""
        async with self._lock:
            self._entities.append(entity)
        return entity

    async def replace(self, entity: EntityT, **fields) -> EntityT:
        """Overwrite fields of a stored entity in place."""
        async with self._lock:
            for field_name, value in fields.items():
                setattr(entity, field_name, value)
        return entity

    async def remove_where(self, predicate: Callable[[EntityT], bool]) -> Optional[EntityT]:
        """Remove the first entity matching the predicate, if any."""
        async with self._lock:
            index = next(
                (i for i, entity in enumerate(self._entities) if predicate(entity)),
                -1,
            )
            if index == -1:
                logger.warning(f"[STORE] {self.name}: nothing to remove")
                return None
            return self._entities.pop(index)

    async def count(self) -> int:
        """Number of stored entities."""
        return len(self._entities)
