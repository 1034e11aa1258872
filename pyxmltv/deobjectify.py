"""
pyxmltv.deobjectify - Object model to document tree

The inverse of pyxmltv.objectify: rebuilds XmltvNode elements from the
canonical dicts and lists, deciding for every record key whether it becomes
an attribute or a child element.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from .dom import DomNode, ValueKind, XmltvNode, is_scalar_kind, value_kind
from .schema import XMLTV_ATTRIBUTES
from .translations import TranslationRegistry, resolve_registry
from .utils import TimeUtils, format_number

_ATTRIBUTE_NAMES = frozenset(XMLTV_ATTRIBUTES)


def attribute_text(value: Any) -> str:
    """Render a scalar as an attribute value"""
    kind = value_kind(value)
    if kind is ValueKind.FLAG:
        return "yes" if value else "no"
    if kind is ValueKind.INSTANT:
        return TimeUtils.datetime_to_xmltv(value)
    if isinstance(value, (int, float)):
        return format_number(value)
    return value


def _skip(node: XmltvNode, name: str, value: Any):
    pass


def _verbatim_attribute(node: XmltvNode, name: str, value: Any):
    node.attributes[name] = value


def _timestamp_attribute(node: XmltvNode, name: str, value: Any):
    node.attributes[name] = attribute_text(value)


def _timestamp_child(node: XmltvNode, name: str, value: Any):
    node.children.append(XmltvNode(name, {}, [attribute_text(value)]))


# (XMLTV parent tag, XMLTV attribute name) -> placement of a scalar value
PLACEMENT_RULES: Dict[Tuple[str, str], Callable[[XmltvNode, str, Any], None]] = {
    ("credits", "guest"): _skip,
    ("programme", "channel"): _verbatim_attribute,
    ("tv", "date"): _timestamp_attribute,
    ("programme", "date"): _timestamp_child,
}


class DomBuilder:
    """Builds document nodes from object model values using one translation registry"""

    def __init__(self, registry: Optional[TranslationRegistry] = None):
        self.registry = resolve_registry(registry)

    def build(
        self, obj: Any, key: str = "tv", is_array_child: bool = False
    ) -> Union[DomNode, List[DomNode]]:
        """
        Convert an object model value to nodes

        Args:
            obj: A record, list or scalar of the object model
            key: The canonical field name the value is stored under
            is_array_child: The value is a list item; return the node itself
                instead of a one-element list

        Returns:
            A text string for scalars, otherwise an XmltvNode or a list of them
        """
        kind = value_kind(obj)

        if kind is ValueKind.SEQUENCE:
            nodes: List[DomNode] = []
            for item in obj:
                built = self.build(item, key, True)
                if isinstance(built, list):
                    nodes.extend(built)
                elif isinstance(built, str):
                    # scalar list items still need their own element
                    nodes.append(XmltvNode(self.registry.xmltv_tag(key), {}, [built]))
                else:
                    nodes.append(built)
            return nodes

        if kind is ValueKind.EMPTY:
            return []

        if kind is ValueKind.SCALAR:
            return obj if isinstance(obj, str) else format_number(obj)

        if kind is ValueKind.INSTANT and key != "date":
            return TimeUtils.datetime_to_xmltv(obj)

        if kind is ValueKind.FLAG and key != "new":
            return "yes" if obj else "no"

        tag_name = self.registry.xmltv_tag(key)

        if kind is ValueKind.FLAG:
            # <new/> is a presence marker
            if not obj:
                return []
            node = XmltvNode(tag_name)
        elif kind is ValueKind.INSTANT:
            node = XmltvNode(tag_name, {}, [TimeUtils.datetime_to_xmltv(obj)])
        elif kind is ValueKind.NODE:
            node = obj
        else:
            node = self._build_record(obj, tag_name)

        return node if is_array_child else [node]

    def _build_record(self, record: Dict[str, Any], tag_name: str) -> XmltvNode:
        node = XmltvNode(tag_name)

        for child_key, value in record.items():
            kind = value_kind(value)

            attribute_name = self.registry.xmltv_attribute(child_key)

            if kind is ValueKind.EMPTY:
                # valueless attributes render as a bare name
                if value is None and attribute_name in _ATTRIBUTE_NAMES:
                    node.attributes[attribute_name] = None
                continue

            if kind is ValueKind.NODE:
                if value.tag_name == "new":
                    node.children.append(XmltvNode("new", dict(value.attributes), []))
                else:
                    node.children.append(value)
                continue

            element_name = self.registry.xmltv_tag(child_key)
            if (tag_name, element_name) in PLACEMENT_RULES:
                # a renamed element such as <date> keeps its placement
                attribute_name = element_name

            if kind is ValueKind.INSTANT or (
                is_scalar_kind(kind) and attribute_name in _ATTRIBUTE_NAMES
            ):
                place = PLACEMENT_RULES.get((tag_name, attribute_name))
                if place is not None:
                    place(node, attribute_name, value)
                else:
                    node.attributes[attribute_name] = attribute_text(value)
                continue

            child = self.build(value, child_key)
            if isinstance(child, list):
                node.children.extend(child)
            elif child_key == "_value":
                node.children.append(child)
            else:
                node.children.append(XmltvNode(self.registry.xmltv_tag(child_key), {}, [child]))

        return node


def object_to_dom(
    obj: Any,
    key: str = "tv",
    is_array_child: bool = False,
    registry: Optional[TranslationRegistry] = None,
):
    """Convert an object model value (usually a whole Xmltv record) to document nodes"""
    return DomBuilder(registry).build(obj, key, is_array_child)
