"""
pyxmltv.translations - Tag and attribute name translation registry

Maps XMLTV tag and attribute names (display-name, pdc-start, ...) to the
canonical field names used by the object model (displayName, pdcStart, ...)
and back. Lookups fall back to the name itself when no translation exists.

A registry is an explicit object handed to both mapping stages. The module
keeps a default instance for callers that don't manage their own, with
convenience functions operating on it.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

from .errors import InvalidSchemaName
from .schema import (
    DEFAULT_ATTRIBUTE_TRANSLATIONS,
    DEFAULT_TAG_TRANSLATIONS,
    XMLTV_ATTRIBUTES,
    XMLTV_TAGS,
)
from .utils import reverse_map


class _TranslationTable:
    """One bidirectional name table restricted to a closed vocabulary"""

    def __init__(self, kind: str, vocabulary: Iterable[str]):
        self.kind = kind
        self.vocabulary = frozenset(vocabulary)
        self.forward: Dict[str, str] = {name: name for name in vocabulary}
        self.reverse: Dict[str, str] = reverse_map(self.forward)

    def register(self, name: str, canonical: str):
        if name not in self.vocabulary:
            raise InvalidSchemaName(name, self.kind)

        previous = self.forward.get(name)
        if previous is not None and self.reverse.get(previous) == name:
            del self.reverse[previous]

        self.forward[name] = canonical
        self.reverse[canonical] = name

    def copy(self) -> "_TranslationTable":
        table = _TranslationTable.__new__(_TranslationTable)
        table.kind = self.kind
        table.vocabulary = self.vocabulary
        table.forward = dict(self.forward)
        table.reverse = dict(self.reverse)
        return table


class TranslationRegistry:
    """Bidirectional XMLTV <-> canonical name tables for tags and attributes"""

    def __init__(
        self,
        tag_translations: Optional[Mapping[str, str]] = None,
        attribute_translations: Optional[Mapping[str, str]] = None,
    ):
        self._tags = _TranslationTable("tag", XMLTV_TAGS)
        self._attributes = _TranslationTable("attribute", XMLTV_ATTRIBUTES)

        if tag_translations is None:
            tag_translations = DEFAULT_TAG_TRANSLATIONS
        if attribute_translations is None:
            attribute_translations = DEFAULT_ATTRIBUTE_TRANSLATIONS

        for name, canonical in tag_translations.items():
            self._tags.register(name, canonical)
        for name, canonical in attribute_translations.items():
            self._attributes.register(name, canonical)

    def add_tag_translation(self, name: str, canonical: str):
        """
        Add or replace the canonical name of an XMLTV tag

        Args:
            name: XMLTV tag name, eg "display-name"
            canonical: Object model field name, eg "displayName"

        Raises:
            InvalidSchemaName: name is not an XMLTV tag (nothing is changed)
        """
        self._tags.register(name, canonical)
        logging.debug("Tag translation registered: %s -> %s", name, canonical)

    def add_attribute_translation(self, name: str, canonical: str):
        """
        Add or replace the canonical name of an XMLTV attribute

        Raises:
            InvalidSchemaName: name is not an XMLTV attribute (nothing is changed)
        """
        self._attributes.register(name, canonical)
        logging.debug("Attribute translation registered: %s -> %s", name, canonical)

    def tag(self, name: str) -> str:
        """XMLTV tag -> canonical field name"""
        return self._tags.forward.get(name, name)

    def attribute(self, name: str) -> str:
        """XMLTV attribute -> canonical field name"""
        return self._attributes.forward.get(name, name)

    def xmltv_tag(self, canonical: str) -> str:
        """Canonical field name -> XMLTV tag"""
        return self._tags.reverse.get(canonical, canonical)

    def xmltv_attribute(self, canonical: str) -> str:
        """Canonical field name -> XMLTV attribute"""
        return self._attributes.reverse.get(canonical, canonical)

    @property
    def tags(self) -> Mapping[str, str]:
        return MappingProxyType(self._tags.forward)

    @property
    def attributes(self) -> Mapping[str, str]:
        return MappingProxyType(self._attributes.forward)

    def copy(self) -> "TranslationRegistry":
        """Independent copy; changes to either side don't affect the other"""
        registry = TranslationRegistry.__new__(TranslationRegistry)
        registry._tags = self._tags.copy()
        registry._attributes = self._attributes.copy()
        return registry


_default_registry = TranslationRegistry()


def get_default_registry() -> TranslationRegistry:
    """Get the process-wide default registry"""
    return _default_registry


def resolve_registry(registry: Optional[TranslationRegistry]) -> TranslationRegistry:
    return registry if registry is not None else _default_registry


def add_tag_translation(name: str, canonical: str):
    """Add or replace a tag translation in the default registry"""
    _default_registry.add_tag_translation(name, canonical)


def add_attribute_translation(name: str, canonical: str):
    """Add or replace an attribute translation in the default registry"""
    _default_registry.add_attribute_translation(name, canonical)
