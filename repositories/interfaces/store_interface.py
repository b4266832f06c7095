"""
Interface for the key-value store.
Defines the primitives the repositories need from the backend: one field
map (hash) per key, and named ordered sets (sorted sets).
"""

from abc import ABC, abstractmethod
from typing import AsyncContextManager, Dict, List


class IStoreBatch(ABC):
    """Write commands queued inside a transaction; executed together on exit."""

    @abstractmethod
    def set_fields(self, key: str, mapping: Dict[str, str]) -> None:
        pass

    @abstractmethod
    def remove_key(self, key: str) -> None:
        pass

    @abstractmethod
    def add_to_ordered_set(self, set_name: str, score: float, member: str) -> None:
        pass

    @abstractmethod
    def remove_from_ordered_set(self, set_name: str, member: str) -> None:
        pass


class IKeyValueStore(ABC):
    """Interface for key-value store operations."""

    @abstractmethod
    async def set_fields(self, key: str, mapping: Dict[str, str]) -> None:
        """
        Create or merge the field map stored under key.

        Args:
            key: Field map key
            mapping: Field names and their string values

        Raises:
            StoreError: If the backend is unavailable or rejects the command
        """
        pass

    @abstractmethod
    async def get_all_fields(self, key: str) -> Dict[str, str]:
        """
        Get every field of the field map stored under key.

        Args:
            key: Field map key

        Returns:
            Dict[str, str]: All fields; empty if the key does not exist
        """
        pass

    @abstractmethod
    async def remove_key(self, key: str) -> None:
        """
        Delete the field map stored under key. Removing a missing key is not an error.

        Args:
            key: Field map key
        """
        pass

    @abstractmethod
    async def add_to_ordered_set(self, set_name: str, score: float, member: str) -> None:
        """
        Insert member into the ordered set, or update its score if already present.

        Args:
            set_name: Ordered set name
            score: Sort key
            member: Member value
        """
        pass

    @abstractmethod
    async def remove_from_ordered_set(self, set_name: str, member: str) -> None:
        """
        Remove member from the ordered set. Removing a missing member is not an error.

        Args:
            set_name: Ordered set name
            member: Member value
        """
        pass

    @abstractmethod
    async def range_ordered_set(self, set_name: str, start: int, end: int) -> List[str]:
        """
        Get members by rank, ascending by score.

        Args:
            set_name: Ordered set name
            start: First rank, inclusive; negative counts from the end
            end: Last rank, inclusive; negative counts from the end (0, -1 = all)

        Returns:
            List[str]: Members in score order
        """
        pass

    @abstractmethod
    async def ping(self) -> bool:
        """
        Check whether the backend is reachable.

        Returns:
            bool: True if reachable, False otherwise
        """
        pass

    @abstractmethod
    def transaction(self) -> AsyncContextManager[IStoreBatch]:
        """
        Queue write commands and execute them atomically on exit.

        Returns:
            AsyncContextManager[IStoreBatch]: Batch to queue commands on
        """
        pass
