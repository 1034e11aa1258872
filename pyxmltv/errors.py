"""
pyxmltv.errors - Exception hierarchy

Structural parse failures, registry misuse and entry point misuse.
Mapping-stage coercions never raise; they keep the raw value instead.
"""

from typing import Optional


class XmltvError(Exception):
    """Base class for all pyxmltv errors"""


class UnexpectedCloseTag(XmltvError):
    """A closing tag does not match the element currently open"""

    def __init__(self, line: int, column: int, char: Optional[str]):
        self.line = line
        self.column = column
        self.char = char
        super().__init__(
            "Unexpected close tag\nLine: %d\nColumn: %d\nChar: %s" % (line, column, char or "")
        )


class InvalidSchemaName(XmltvError, ValueError):
    """A translation was registered for a name outside the XMLTV vocabulary"""

    def __init__(self, name: str, kind: str = "tag"):
        self.name = name
        self.kind = kind
        super().__init__(f"Invalid {kind}: {name}")


class XmltvUsageError(XmltvError, TypeError):
    """An entry point received the wrong representation (tree vs. object)"""
