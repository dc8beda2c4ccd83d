from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar, cast

from attrs import define as _attrs_define
from attrs import field as _attrs_field


class DefinitionSource(str, Enum):
    API = "Api"
    MANUAL = "Manual"

    def __str__(self) -> str:
        return str(self.value)


TranslationSource = DefinitionSource


class ExampleSource(str, Enum):
    API = "Api"
    CUSTOM = "Custom"

    def __str__(self) -> str:
        return str(self.value)


T = TypeVar("T", bound="Example")


@_attrs_define
class Example:
    """ An example sentence attached to a definition or translation.

        Attributes:
            id (int):
            example_text (str):
            source (ExampleSource):
     """

    id: int
    example_text: str
    source: ExampleSource

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "exampleText": self.example_text,
            "source": self.source.value,
        }

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        return cls(
            id=d.pop("id"),
            example_text=d.pop("exampleText"),
            source=ExampleSource(d.pop("source")),
        )


D = TypeVar("D", bound="Definition")


@_attrs_define
class Definition:
    """ Attributes:
            id (int):
            definition_text (str):
            source (DefinitionSource):
            display_order (int):
            examples (list[Example]):
     """

    id: int
    definition_text: str
    source: DefinitionSource
    display_order: int
    examples: list[Example] = _attrs_field(factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "definitionText": self.definition_text,
            "source": self.source.value,
            "displayOrder": self.display_order,
            "examples": [example.to_dict() for example in self.examples],
        }

    @classmethod
    def from_dict(cls: type[D], src_dict: Mapping[str, Any]) -> D:
        d = dict(src_dict)
        examples = [Example.from_dict(item) for item in d.pop("examples", None) or []]

        return cls(
            id=d.pop("id"),
            definition_text=d.pop("definitionText"),
            source=DefinitionSource(d.pop("source")),
            display_order=d.pop("displayOrder", 0),
            examples=examples,
        )


R = TypeVar("R", bound="Translation")


@_attrs_define
class Translation:
    """ Attributes:
            id (int):
            translation_text (str):
            source (TranslationSource):
            display_order (int):
            examples (list[Example]):
     """

    id: int
    translation_text: str
    source: TranslationSource
    display_order: int
    examples: list[Example] = _attrs_field(factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "translationText": self.translation_text,
            "source": self.source.value,
            "displayOrder": self.display_order,
            "examples": [example.to_dict() for example in self.examples],
        }

    @classmethod
    def from_dict(cls: type[R], src_dict: Mapping[str, Any]) -> R:
        d = dict(src_dict)
        examples = [Example.from_dict(item) for item in d.pop("examples", None) or []]

        return cls(
            id=d.pop("id"),
            translation_text=d.pop("translationText"),
            source=TranslationSource(d.pop("source")),
            display_order=d.pop("displayOrder", 0),
            examples=examples,
        )


E = TypeVar("E", bound="Entry")


@_attrs_define
class Entry:
    """ A vocabulary entry as returned by the entries and drafts endpoints.

        The same shape is embedded in 409 responses so a duplicate prompt can
        render the existing entry without a second fetch.

        Attributes:
            id (int):
            vocabulary_id (int):
            entry_text (str):
            created_at (str):
            updated_at (None | str):
            definitions (list[Definition]):
            translations (list[Translation]):
     """

    id: int
    vocabulary_id: int
    entry_text: str
    created_at: str = ""
    updated_at: None | str = None
    definitions: list[Definition] = _attrs_field(factory=list)
    translations: list[Translation] = _attrs_field(factory=list)
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update({
            "id": self.id,
            "vocabularyId": self.vocabulary_id,
            "entryText": self.entry_text,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "definitions": [definition.to_dict() for definition in self.definitions],
            "translations": [translation.to_dict() for translation in self.translations],
        })

        return field_dict

    @classmethod
    def from_dict(cls: type[E], src_dict: Mapping[str, Any]) -> E:
        d = dict(src_dict)
        definitions = [Definition.from_dict(item) for item in d.pop("definitions", None) or []]
        translations = [Translation.from_dict(item) for item in d.pop("translations", None) or []]

        entry = cls(
            id=d.pop("id"),
            vocabulary_id=d.pop("vocabularyId"),
            entry_text=d.pop("entryText"),
            created_at=d.pop("createdAt", ""),
            updated_at=cast(None | str, d.pop("updatedAt", None)),
            definitions=definitions,
            translations=translations,
        )

        entry.additional_properties = d
        return entry
