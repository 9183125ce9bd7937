"""Store layer: the JSON document codec and the repository that owns it."""

from gocost.store.codec import load_document, new_document, save_document
from gocost.store.repository import JsonRepository

__all__ = [
    # Codec
    "load_document",
    "new_document",
    "save_document",
    # Repository
    "JsonRepository",
]
