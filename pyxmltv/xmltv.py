"""
pyxmltv.xmltv - Top-level conversion entry points

parse_xmltv: XMLTV text -> object model (or document tree)
write_xmltv: object model (or document tree) -> XMLTV text
"""

import logging
from typing import Any, Dict, Optional, Union

from .deobjectify import object_to_dom
from .dom import XmltvDom
from .errors import XmltvUsageError
from .objectify import dom_to_object
from .parser import parse
from .translations import TranslationRegistry
from .writer import write


def parse_xmltv(
    xmltv_string: str,
    as_dom: bool = False,
    registry: Optional[TranslationRegistry] = None,
) -> Union[Dict[str, Any], XmltvDom]:
    """
    Parse an XMLTV document

    Args:
        xmltv_string: The complete document
        as_dom: Return the document tree instead of the object model
        registry: Name translations, the default registry if omitted

    Raises:
        UnexpectedCloseTag: the document is malformed
    """
    dom = parse(xmltv_string)
    if as_dom:
        return dom

    xmltv = dom_to_object(dom, registry=registry)
    if isinstance(xmltv, dict):
        logging.debug(
            "Parsed %d channels and %d programmes",
            len(xmltv.get("channels", []) or []),
            len(xmltv.get("programmes", []) or []),
        )
    return xmltv


def write_xmltv(
    xmltv: Union[Dict[str, Any], XmltvDom],
    from_dom: bool = False,
    registry: Optional[TranslationRegistry] = None,
) -> str:
    """
    Write an object model or a document tree as XMLTV text

    Args:
        xmltv: An Xmltv record, or a node list when from_dom is set
        from_dom: xmltv is a document tree
        registry: Name translations, the default registry if omitted

    Raises:
        XmltvUsageError: xmltv doesn't match the from_dom mode
    """
    if from_dom:
        if not isinstance(xmltv, list):
            raise XmltvUsageError(
                "Cannot write XMLTV from a DOM object that has been converted to an object"
            )
        return write(xmltv)

    if not isinstance(xmltv, dict):
        raise XmltvUsageError(
            "Cannot write XMLTV from a DOM tree without from_dom=True; expected an Xmltv object"
        )
    return write(object_to_dom(xmltv, registry=registry))
