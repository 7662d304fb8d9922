"""Entity store interface."""
from abc import ABC, abstractmethod
from typing import Callable, Generic, List, Optional, TypeVar

from pydantic import BaseModel


EntityT = TypeVar("EntityT", bound=BaseModel)


class EntityStore(ABC, Generic[EntityT]):
    """Abstract base class for entity stores."""

    @abstractmethod
    async def list_all(self) -> List[EntityT]:
        """Get every entity, in insertion order."""
        pass

    @abstractmethod
    async def find(self, predicate: Callable[[EntityT], bool]) -> Optional[EntityT]:
        """Get the first entity matching the predicate."""
        pass

    @abstractmethod
    async def insert(self, entity: EntityT) -> EntityT:
        """Append an entity to the store."""
        pass

    @abstractmethod
    async def replace(self, entity: EntityT, **fields) -> EntityT:
        """Overwrite fields of a stored entity in place."""
        pass

    @abstractmethod
    async def remove_where(self, predicate: Callable[[EntityT], bool]) -> Optional[EntityT]:
        """Remove the first entity matching the predicate, if any."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of stored entities."""
        pass
