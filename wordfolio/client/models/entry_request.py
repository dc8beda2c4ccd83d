from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset
from .entry import DefinitionSource, ExampleSource, TranslationSource


@_attrs_define
class ExampleRequest:
    example_text: str
    source: ExampleSource = ExampleSource.CUSTOM

    def to_dict(self) -> dict[str, Any]:
        return {
            "exampleText": self.example_text,
            "source": self.source.value,
        }


@_attrs_define
class DefinitionRequest:
    definition_text: str
    source: DefinitionSource = DefinitionSource.MANUAL
    examples: list[ExampleRequest] = _attrs_field(factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "definitionText": self.definition_text,
            "source": self.source.value,
            "examples": [example.to_dict() for example in self.examples],
        }


@_attrs_define
class TranslationRequest:
    translation_text: str
    source: TranslationSource = TranslationSource.MANUAL
    examples: list[ExampleRequest] = _attrs_field(factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "translationText": self.translation_text,
            "source": self.source.value,
            "examples": [example.to_dict() for example in self.examples],
        }


T = TypeVar("T", bound="CreateEntryRequest")


@_attrs_define
class CreateEntryRequest:
    """ Request body for creating an entry in a vocabulary or in drafts.

        Attributes:
            entry_text (str): The word or phrase being added.
            definitions (list[DefinitionRequest]):
            translations (list[TranslationRequest]):
            allow_duplicate (bool | Unset): When true the server skips duplicate
                detection for this one request. Omitted from the body when unset.
     """

    entry_text: str
    definitions: list[DefinitionRequest] = _attrs_field(factory=list)
    translations: list[TranslationRequest] = _attrs_field(factory=list)
    allow_duplicate: bool | Unset = UNSET

    def to_dict(self) -> dict[str, Any]:
        field_dict: dict[str, Any] = {
            "entryText": self.entry_text,
            "definitions": [definition.to_dict() for definition in self.definitions],
            "translations": [translation.to_dict() for translation in self.translations],
        }
        if not isinstance(self.allow_duplicate, Unset):
            field_dict["allowDuplicate"] = self.allow_duplicate

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)

        definitions = [
            DefinitionRequest(
                definition_text=item["definitionText"],
                source=DefinitionSource(item.get("source", DefinitionSource.MANUAL)),
                examples=[
                    ExampleRequest(example["exampleText"], ExampleSource(example.get("source", ExampleSource.CUSTOM)))
                    for example in item.get("examples", [])
                ],
            )
            for item in d.pop("definitions", [])
        ]
        translations = [
            TranslationRequest(
                translation_text=item["translationText"],
                source=TranslationSource(item.get("source", TranslationSource.MANUAL)),
                examples=[
                    ExampleRequest(example["exampleText"], ExampleSource(example.get("source", ExampleSource.CUSTOM)))
                    for example in item.get("examples", [])
                ],
            )
            for item in d.pop("translations", [])
        ]

        return cls(
            entry_text=d.pop("entryText"),
            definitions=definitions,
            translations=translations,
            allow_duplicate=d.pop("allowDuplicate", UNSET),
        )
