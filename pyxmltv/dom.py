"""
pyxmltv.dom - Document tree and object model value types

A parsed document is a list of nodes. A node is either a plain string (text
or a doctype literal) or an XmltvNode element.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .schema import is_processing_instruction


@dataclass
class XmltvNode:
    """An element of the document tree"""

    tag_name: str
    attributes: Dict[str, Optional[str]] = field(default_factory=dict)
    # A bool renders as the yes/no literal
    children: Union[List["DomNode"], bool] = field(default_factory=list)

    @property
    def is_processing_instruction(self) -> bool:
        return is_processing_instruction(self.tag_name)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict form, eg for JSON output"""
        children = self.children
        if not isinstance(children, bool):
            children = [
                child.to_dict() if isinstance(child, XmltvNode) else child for child in children
            ]
        return {
            "tagName": self.tag_name,
            "attributes": dict(self.attributes),
            "children": children,
        }


DomNode = Union[XmltvNode, str]
XmltvDom = List[DomNode]


class ValueKind(Enum):
    """Shape of an object model value"""

    EMPTY = "empty"
    SCALAR = "scalar"
    FLAG = "flag"
    INSTANT = "instant"
    ATTRIBUTED = "attributed"
    RECORD = "record"
    SEQUENCE = "sequence"
    NODE = "node"


def value_kind(value: Any) -> ValueKind:
    """Classify an object model value"""
    if value is None:
        return ValueKind.EMPTY
    if isinstance(value, bool):
        return ValueKind.FLAG
    if isinstance(value, datetime):
        return ValueKind.INSTANT
    if isinstance(value, (str, int, float)):
        return ValueKind.SCALAR
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, XmltvNode):
        return ValueKind.NODE
    if isinstance(value, dict):
        return ValueKind.ATTRIBUTED if "_value" in value else ValueKind.RECORD
    raise TypeError(f"Unsupported XMLTV value: {type(value).__name__}")


def is_scalar_kind(kind: ValueKind) -> bool:
    return kind in (ValueKind.SCALAR, ValueKind.FLAG, ValueKind.INSTANT)
