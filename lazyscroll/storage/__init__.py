from lazyscroll.storage.models import Item
from lazyscroll.storage.connection import get_connection, close_connection
from lazyscroll.storage.schema import initialize_database
from lazyscroll.storage.item_store import ItemStore

__all__ = [
    "Item",
    "get_connection",
    "close_connection",
    "initialize_database",
    "ItemStore",
]
