""" Contains all the data models used in inputs/outputs """

from .api_error import ApiError
from .entry import Definition, DefinitionSource, Entry, Example, ExampleSource, Translation, TranslationSource
from .entry_request import CreateEntryRequest, DefinitionRequest, ExampleRequest, TranslationRequest
from .hierarchy import CollectionsHierarchy, CollectionSummary, VocabularySummary

__all__ = (
    "ApiError",
    "CollectionSummary",
    "CollectionsHierarchy",
    "CreateEntryRequest",
    "Definition",
    "DefinitionRequest",
    "DefinitionSource",
    "Entry",
    "Example",
    "ExampleRequest",
    "ExampleSource",
    "Translation",
    "TranslationRequest",
    "TranslationSource",
    "VocabularySummary",
)
