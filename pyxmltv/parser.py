"""
pyxmltv.parser - XMLTV scanner

Turns a complete XMLTV document into an ordered list of nodes with a single
forward cursor. Only the subset of XML used by XMLTV is understood: elements,
quoted attributes, text, comments, doctype declarations and processing
instructions. No entity expansion, namespaces or validation.

Based on the approach of txml (Tobias Nickel, MIT licensed).
"""

import logging

from .dom import XmltvDom, XmltvNode
from .errors import UnexpectedCloseTag
from .schema import CHILDLESS_ELEMENTS


class XmltvParser:
    """Single pass scanner over an in-memory XMLTV string"""

    NAME_TERMINATORS = "\r\n\t>/= "
    QUOTES = ("'", '"')

    def __init__(self, text: str):
        self.text = text
        self.length = len(text)
        self.pos = 0

    def parse(self) -> XmltvDom:
        self.pos = 0
        nodes = self._parse_children("")
        logging.debug("Scanned %d top-level nodes from %d characters", len(nodes), self.length)
        return nodes

    def _char(self, offset: int = 0) -> str:
        index = self.pos + offset
        if 0 <= index < self.length:
            return self.text[index]
        return ""

    def _parse_children(self, tag_name: str) -> XmltvDom:
        children: XmltvDom = []

        while self.pos < self.length:
            if self._char() != "<":
                text = self._parse_text().strip()
                if text:
                    children.append(text)
                self.pos += 1
                continue

            following = self._char(1)

            if following == "/":
                self._parse_close_tag(tag_name)
                return children

            if following == "!":
                if self._char(2) == "-":
                    self._skip_comment()
                else:
                    children.append(self._parse_declaration())
                self.pos += 1
                continue

            node = self._parse_node()
            children.append(node)
            if node.is_processing_instruction:
                # <?xml ...?> swallows the rest of the document; hoist it back out
                children.extend(node.children)
                node.children = []

        return children

    def _parse_close_tag(self, tag_name: str):
        close_start = self.pos + 2
        close_end = self.text.find(">", self.pos)
        if close_end == -1:
            close_end = self.length

        close_tag = self.text[close_start:close_end]
        if tag_name not in close_tag:
            consumed = self.text[:close_end].split("\n")
            raise UnexpectedCloseTag(
                line=len(consumed) - 1,
                column=len(consumed[-1]) + 1,
                char=self.text[close_end] if close_end < self.length else "",
            )

        self.pos = close_end + 1

    def _skip_comment(self):
        """Skip past "-->"; an unterminated comment runs to the end of input"""
        pos = self.pos
        while not (
            self.text[pos] == ">" and self.text[pos - 1] == "-" and self.text[pos - 2] == "-"
        ):
            pos = self.text.find(">", pos + 1)
            if pos == -1:
                pos = self.length
                break
        self.pos = pos

    def _parse_declaration(self) -> str:
        """Capture <!DOCTYPE ...> as text, allowing one level of [...]"""
        start = self.pos + 1
        self.pos += 2
        encapsulated = False

        while self.pos < self.length:
            char = self.text[self.pos]
            if char == ">" and not encapsulated:
                break
            if char == "[":
                encapsulated = True
            elif encapsulated and char == "]":
                encapsulated = False
            self.pos += 1

        return self.text[start : self.pos]

    def _parse_text(self) -> str:
        """Text up to (not including) the next "<"; leaves the cursor on its last character"""
        start = self.pos
        next_tag = self.text.find("<", self.pos)
        if next_tag == -1:
            self.pos = self.length
            return self.text[start:]

        self.pos = next_tag - 1
        return self.text[start:next_tag]

    def _parse_name(self) -> str:
        start = self.pos
        while self.pos < self.length and self.text[self.pos] not in self.NAME_TERMINATORS:
            self.pos += 1
        return self.text[start : self.pos]

    def _parse_node(self) -> XmltvNode:
        self.pos += 1
        node = XmltvNode(tag_name=self._parse_name())

        while self.pos < self.length and self.text[self.pos] != ">":
            if self._char().isascii() and self._char().isalpha():
                name = self._parse_name()

                # search the beginning of the value
                char = self._char()
                while (
                    char
                    and char not in self.QUOTES
                    and not (char.isascii() and char.isalpha())
                    and char != ">"
                ):
                    self.pos += 1
                    char = self._char()

                if char in self.QUOTES:
                    value = self._parse_string()
                    if value is None:
                        # unterminated value, give up on this element
                        self.pos = self.length
                        return node
                else:
                    value = None
                    self.pos -= 1

                node.attributes[name] = value
            self.pos += 1

        if self._char(-1) != "/" and node.tag_name not in CHILDLESS_ELEMENTS:
            self.pos += 1
            node.children = self._parse_children(node.tag_name)
        else:
            self.pos += 1

        return node

    def _parse_string(self):
        quote = self.text[self.pos]
        start = self.pos + 1
        end = self.text.find(quote, start)
        if end == -1:
            return None
        self.pos = end
        return self.text[start:end]


def parse(text: str) -> XmltvDom:
    """
    Scan an XMLTV document into a list of nodes

    Args:
        text: The complete document

    Returns:
        Top-level nodes: processing instructions, doctype text and the root
        element. Empty input gives an empty list.

    Raises:
        UnexpectedCloseTag: a closing tag doesn't match the open element
    """
    return XmltvParser(text).parse()
