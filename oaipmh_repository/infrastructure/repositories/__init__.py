from .item_repository import CSVItemRepository

__all__ = ["CSVItemRepository"]
