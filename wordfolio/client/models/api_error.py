from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar, cast

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from .entry import Entry

T = TypeVar("T", bound="ApiError")


@_attrs_define
class ApiError:
    """ Error body returned by the Wordfolio API (RFC 7807 problem details).

        Attributes:
            status (int): HTTP status of the response that carried this body.
            type (None | str):
            title (None | str):
            errors (dict[str, list[str]]): Field-level validation messages.
            error (None | str): Free-form error message.
            existing_entry (None | Entry): Present on 409 duplicate responses.
     """

    status: int
    type: None | str = None
    title: None | str = None
    errors: dict[str, list[str]] = _attrs_field(factory=dict)
    error: None | str = None
    existing_entry: None | Entry = None

    @property
    def is_duplicate_entry(self) -> bool:
        return self.status == 409 and self.existing_entry is not None

    @property
    def message(self) -> str:
        if self.error:
            return self.error
        if self.title:
            return self.title
        return f"Request failed with status {self.status}"

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any], status: int) -> T:
        d = dict(src_dict)

        def _parse_existing_entry(data: object) -> None | Entry:
            if not isinstance(data, Mapping):
                return None
            return Entry.from_dict(cast(Mapping[str, Any], data))

        errors = d.pop("errors", None)

        return cls(
            status=status,
            type=cast(None | str, d.pop("type", None)),
            title=cast(None | str, d.pop("title", None)),
            errors=dict(errors) if isinstance(errors, Mapping) else {},
            error=cast(None | str, d.pop("error", None)),
            existing_entry=_parse_existing_entry(d.pop("existingEntry", None)),
        )
