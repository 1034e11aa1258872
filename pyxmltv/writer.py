"""
pyxmltv.writer - Document tree to XMLTV text

Renders node lists depth-first without added whitespace. A default XML
declaration and DOCTYPE are prepended unless the nodes already carry them.
"""

import logging
from typing import List

from .dom import XmltvDom, XmltvNode
from .schema import (
    CHILDLESS_ELEMENTS,
    DEFAULT_DOCTYPE,
    DEFAULT_XML_DECLARATION,
    DOCTYPE_MARKER,
)


class XmltvWriter:
    """Serializes XmltvNode trees"""

    def __init__(self):
        self.parts: List[str] = []

    def write(self, nodes: XmltvDom) -> str:
        # the doctype goes after any leading <?xml ...?>
        lead = 0
        while (
            lead < len(nodes)
            and isinstance(nodes[lead], XmltvNode)
            and nodes[lead].is_processing_instruction
        ):
            lead += 1

        self.parts = []
        if not self._has_declaration(nodes):
            self.parts.append(DEFAULT_XML_DECLARATION)
        self._write_children(nodes[:lead])
        if not self._has_doctype(nodes):
            self.parts.append(DEFAULT_DOCTYPE)
        self._write_children(nodes[lead:])

        output = "".join(self.parts)
        logging.debug("Serialized %d top-level nodes to %d characters", len(nodes), len(output))
        return output

    @staticmethod
    def _has_declaration(nodes: XmltvDom) -> bool:
        return any(isinstance(node, XmltvNode) and node.tag_name == "?xml" for node in nodes)

    @staticmethod
    def _has_doctype(nodes: XmltvDom) -> bool:
        return any(isinstance(node, str) and DOCTYPE_MARKER in node for node in nodes)

    def _write_children(self, nodes: XmltvDom):
        for node in nodes:
            if isinstance(node, XmltvNode):
                self._write_node(node)
            elif DOCTYPE_MARKER in node:
                self.parts.append("<" + node.strip() + ">")
            else:
                self.parts.append(node.strip())

    def _write_node(self, node: XmltvNode):
        self.parts.append("<" + node.tag_name)

        for name, value in node.attributes.items():
            self.parts.append(self._attribute(name, value))

        if node.tag_name in CHILDLESS_ELEMENTS:
            self.parts.append("/>")
            return

        if node.is_processing_instruction:
            self.parts.append("?>")
            return

        self.parts.append(">")
        if isinstance(node.children, bool):
            self.parts.append("yes" if node.children else "no")
        else:
            self._write_children(node.children)
        self.parts.append("</" + node.tag_name + ">")

    @staticmethod
    def _attribute(name: str, value) -> str:
        if value is None:
            return " " + name
        if isinstance(value, bool):
            return ' %s="%s"' % (name, "yes" if value else "no")
        value = str(value)
        if '"' not in value:
            return ' %s="%s"' % (name, value.strip())
        return " %s='%s'" % (name, value)


def write(nodes: XmltvDom) -> str:
    """Render a node list as XMLTV text"""
    return XmltvWriter().write(nodes)
