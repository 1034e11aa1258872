"""
pyxmltv - XMLTV parser and writer

Converts XMLTV electronic programme guide documents into plain Python
objects (channels, programmes, credits, ratings, ...) and back, with a
configurable tag/attribute name translation registry.
"""

__version__ = "1.0.0"
__author__ = "pyxmltv contributors"
__license__ = "MIT"

from .config import ConfigManager
from .deobjectify import object_to_dom
from .dom import XmltvNode
from .errors import InvalidSchemaName, UnexpectedCloseTag, XmltvError, XmltvUsageError
from .objectify import dom_to_object
from .parser import parse
from .sources import SourceLoader
from .translations import (
    TranslationRegistry,
    add_attribute_translation,
    add_tag_translation,
    get_default_registry,
)
from .utils import TimeUtils
from .writer import write
from .xmltv import parse_xmltv, write_xmltv

__all__ = [
    "parse_xmltv",
    "write_xmltv",
    "parse",
    "write",
    "dom_to_object",
    "object_to_dom",
    "XmltvNode",
    "TranslationRegistry",
    "add_tag_translation",
    "add_attribute_translation",
    "get_default_registry",
    "TimeUtils",
    "ConfigManager",
    "SourceLoader",
    "XmltvError",
    "UnexpectedCloseTag",
    "InvalidSchemaName",
    "XmltvUsageError",
]
