from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar, cast

from attrs import define as _attrs_define
from attrs import field as _attrs_field

V = TypeVar("V", bound="VocabularySummary")


@_attrs_define
class VocabularySummary:
    """ Attributes:
            id (int):
            name (str):
            description (None | str):
            created_at (str):
            updated_at (None | str):
            entry_count (int):
     """

    id: int
    name: str
    description: None | str = None
    created_at: str = ""
    updated_at: None | str = None
    entry_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "entryCount": self.entry_count,
        }

    @classmethod
    def from_dict(cls: type[V], src_dict: Mapping[str, Any]) -> V:
        d = dict(src_dict)
        return cls(
            id=d.pop("id"),
            name=d.pop("name"),
            description=cast(None | str, d.pop("description", None)),
            created_at=d.pop("createdAt", ""),
            updated_at=cast(None | str, d.pop("updatedAt", None)),
            entry_count=d.pop("entryCount", 0),
        )


C = TypeVar("C", bound="CollectionSummary")


@_attrs_define
class CollectionSummary:
    """ A collection with its vocabularies, in server order.

        Attributes:
            id (int):
            name (str):
            description (None | str):
            created_at (str):
            updated_at (None | str):
            vocabularies (list[VocabularySummary]):
     """

    id: int
    name: str
    description: None | str = None
    created_at: str = ""
    updated_at: None | str = None
    vocabularies: list[VocabularySummary] = _attrs_field(factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "vocabularies": [vocabulary.to_dict() for vocabulary in self.vocabularies],
        }

    @classmethod
    def from_dict(cls: type[C], src_dict: Mapping[str, Any]) -> C:
        d = dict(src_dict)
        vocabularies = [VocabularySummary.from_dict(item) for item in d.pop("vocabularies", None) or []]

        return cls(
            id=d.pop("id"),
            name=d.pop("name"),
            description=cast(None | str, d.pop("description", None)),
            created_at=d.pop("createdAt", ""),
            updated_at=cast(None | str, d.pop("updatedAt", None)),
            vocabularies=vocabularies,
        )


H = TypeVar("H", bound="CollectionsHierarchy")


@_attrs_define
class CollectionsHierarchy:
    """ Response body for GET /collections-hierarchy.

        Attributes:
            collections (list[CollectionSummary]):
            default_vocabulary (None | VocabularySummary): The drafts vocabulary,
                absent until the user has created one.
     """

    collections: list[CollectionSummary] = _attrs_field(factory=list)
    default_vocabulary: None | VocabularySummary = None

    def to_dict(self) -> dict[str, Any]:
        default_vocabulary: None | dict[str, Any] = None
        if self.default_vocabulary is not None:
            default_vocabulary = self.default_vocabulary.to_dict()

        return {
            "collections": [collection.to_dict() for collection in self.collections],
            "defaultVocabulary": default_vocabulary,
        }

    @classmethod
    def from_dict(cls: type[H], src_dict: Mapping[str, Any]) -> H:
        d = dict(src_dict)
        collections = [CollectionSummary.from_dict(item) for item in d.pop("collections", None) or []]

        def _parse_default_vocabulary(data: object) -> None | VocabularySummary:
            if data is None:
                return data
            return VocabularySummary.from_dict(cast(Mapping[str, Any], data))

        return cls(
            collections=collections,
            default_vocabulary=_parse_default_vocabulary(d.pop("defaultVocabulary", None)),
        )
