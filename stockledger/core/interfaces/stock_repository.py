"""Abstract interface for stock item storage."""

from abc import ABC, abstractmethod

from stockledger.core.entities.stock import StockItem


class IStockRepository(ABC):
    """Interface for stock item persistence."""

    @abstractmethod
    def add(self, item: StockItem) -> StockItem:
        """Store a new stock item."""
        pass

    @abstractmethod
    def get(self, item_id: str) -> StockItem | None:
        """Get stock item by ID."""
        pass

    @abstractmethod
    def require(self, item_id: str) -> StockItem:
        """Get stock item by ID or raise StockItemNotFoundError."""
        pass

    @abstractmethod
    def update(self, item: StockItem) -> StockItem:
        """
        Replace a stored item.

        The item's version must match the stored version; the returned item
        carries the incremented version.
        """
        pass

    @abstractmethod
    def delete(self, item_id: str) -> None:
        """Remove an item and its history. Raises StockItemNotFoundError."""
        pass

    @abstractmethod
    def list_items(self) -> list[StockItem]:
        """All items in insertion order."""
        pass
