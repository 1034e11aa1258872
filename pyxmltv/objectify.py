"""
pyxmltv.objectify - Document tree to object model

Folds the scanner's node lists into plain dicts and lists keyed by canonical
field names, applying XMLTV cardinality rules and attribute coercions.
The source tree is never modified.
"""

import logging
from typing import Any, Callable, Dict, Optional

from .dom import XmltvDom, XmltvNode
from .schema import (
    BOOLEAN_LITERALS,
    CREDIT_ROLES,
    SCALAR_ELEMENTS,
    SINGLE_USE_ELEMENTS,
)
from .translations import TranslationRegistry, resolve_registry
from .utils import TimeUtils, to_number


def _coerce_instant(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    try:
        return TimeUtils.xmltv_to_datetime(value)
    except (ValueError, OverflowError):
        logging.debug("Keeping unparseable timestamp as text: %r", value)
        return value


def _coerce_flag(value: Any) -> Any:
    return value == "yes"


# Attribute name -> coercion of its value
ATTRIBUTE_COERCIONS: Dict[str, Callable[[Any], Any]] = {
    "size": to_number,
    "width": to_number,
    "height": to_number,
    "date": _coerce_instant,
    "start": _coerce_instant,
    "stop": _coerce_instant,
    "pdc-start": _coerce_instant,
    "vps-start": _coerce_instant,
    "guest": _coerce_flag,
}

# Attribute name -> coercion of the element's own "_value" when present
VALUE_COERCIONS: Dict[str, Callable[[Any], Any]] = {
    "units": to_number,
}


def _wrap_subtitle_language(value: Any) -> Any:
    if isinstance(value, dict) and isinstance(value.get("language"), str):
        value = dict(value)
        value["language"] = {"_value": value["language"]}
    return value


# Element tag -> post-processing of its mapped value
ELEMENT_RULES: Dict[str, Callable[[Any], Any]] = {
    "subtitles": _wrap_subtitle_language,
    "date": _coerce_instant,
}


class ObjectMapper:
    """Maps document nodes to the object model using one translation registry"""

    def __init__(self, registry: Optional[TranslationRegistry] = None):
        self.registry = resolve_registry(registry)

    def map(self, children, parent: Optional[XmltvNode] = None):
        """
        Fold sibling nodes into a scalar or a record

        Args:
            children: Nodes sharing the same parent
            parent: Their parent element, an empty <tv> by default

        Returns:
            A bool for a lone yes/no text, a str for a lone text, otherwise a
            dict of canonical field names
        """
        if parent is None:
            parent = XmltvNode("tv")

        if isinstance(children, bool):
            return children
        if not children:
            return {}

        if len(children) == 1 and isinstance(children[0], str):
            text = children[0]
            if text in BOOLEAN_LITERALS:
                return BOOLEAN_LITERALS[text]
            if parent.attributes:
                return {"_value": text}
            return text

        out: Dict[str, Any] = {}

        for child in children:
            if isinstance(child, str):
                # mixed content, eg <actor>Name<image>...</image></actor>
                if parent.tag_name in CREDIT_ROLES:
                    out["_value"] = child
                continue

            if child.is_processing_instruction:
                continue

            field = self.registry.tag(child.tag_name)

            if child.tag_name == "new":
                out[field] = True
                continue

            kids = self.map(child.children, child)
            if child.attributes and not isinstance(kids, list):
                kids = self._merge_attributes(kids, child)

            if child.tag_name == "tv":
                # the root element's record becomes the result
                out = kids if isinstance(kids, dict) else {"_value": kids}
                continue

            if field not in out and child.tag_name not in SINGLE_USE_ELEMENTS:
                out[field] = []

            rule = ELEMENT_RULES.get(child.tag_name)
            if rule is not None:
                kids = rule(kids)

            if isinstance(kids, str) and child.tag_name not in SCALAR_ELEMENTS:
                kids = {"_value": kids}

            if isinstance(out.get(field), list):
                out[field].append(kids)
            else:
                out[field] = kids

        return out

    def _merge_attributes(self, kids: Any, node: XmltvNode) -> Dict[str, Any]:
        """Combine an element's mapped content with its coerced, translated attributes"""
        merged = dict(kids) if isinstance(kids, dict) else {"_value": kids}

        for name in node.attributes:
            coerce = VALUE_COERCIONS.get(name)
            if coerce is not None and "_value" in merged:
                merged["_value"] = coerce(merged["_value"])

        for name, value in node.attributes.items():
            coerce = ATTRIBUTE_COERCIONS.get(name)
            if coerce is not None and value is not None:
                value = coerce(value)
            merged[self.registry.attribute(name)] = value

        return merged


def dom_to_object(
    children: XmltvDom,
    parent: Optional[XmltvNode] = None,
    registry: Optional[TranslationRegistry] = None,
):
    """Convert a node list (usually a whole parsed document) to the object model"""
    return ObjectMapper(registry).map(children, parent)
