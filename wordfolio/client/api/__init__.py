""" Contains methods for accessing the API """

from .collections import get_collections_hierarchy
from .drafts import create_draft, move_draft_entry
from .entries import create_entry, move_entry

__all__ = (
    "create_draft",
    "create_entry",
    "get_collections_hierarchy",
    "move_draft_entry",
    "move_entry",
)
