"""Tests for the XMLTV serializer."""

import pytest

from pyxmltv.dom import XmltvNode
from pyxmltv.parser import parse
from pyxmltv.writer import write

HEADER = '<?xml version="1.0" encoding="UTF-8"?><!DOCTYPE tv SYSTEM "xmltv.dtd">'


class TestHeader:
    """Tests for the default declaration and doctype."""

    def test_empty_document(self):
        """Should emit only the default header."""
        assert write([]) == HEADER

    def test_header_added(self):
        """Should prepend the declaration and doctype."""
        assert write([XmltvNode("tv")]) == HEADER + "<tv></tv>"

    def test_existing_declaration_kept(self):
        """Should keep a given declaration and add the doctype after it."""
        nodes = [XmltvNode("?xml", {"version": "1.0"}), XmltvNode("tv")]

        assert write(nodes) == '<?xml version="1.0"?><!DOCTYPE tv SYSTEM "xmltv.dtd"><tv></tv>'

    def test_existing_doctype_kept(self):
        """Should not add a second doctype."""
        nodes = ['!DOCTYPE tv SYSTEM "custom.dtd"', XmltvNode("tv")]

        assert write(nodes) == (
            '<?xml version="1.0" encoding="UTF-8"?><!DOCTYPE tv SYSTEM "custom.dtd"><tv></tv>'
        )

    def test_header_detection_ignores_text(self):
        """Should not mistake text mentioning <?xml for a declaration."""
        nodes = [XmltvNode("tv", {}, [XmltvNode("desc", {}, ["about <?xml"])])]

        assert write(nodes).startswith(HEADER)


class TestElements:
    """Tests for element and attribute rendering."""

    def test_nested_elements(self):
        """Should render nested elements without added whitespace."""
        nodes = [
            XmltvNode(
                "tv",
                {},
                [XmltvNode("channel", {"id": "1"}, [XmltvNode("display-name", {}, ["Channel 1"])])],
            )
        ]

        assert write(nodes) == (
            HEADER + '<tv><channel id="1"><display-name>Channel 1</display-name></channel></tv>'
        )

    def test_text_trimmed(self):
        """Should trim text nodes."""
        assert write([XmltvNode("title", {}, ["  News \n"])]) == HEADER + "<title>News</title>"

    @pytest.mark.parametrize("tag", ["new", "icon", "previously-shown"])
    def test_childless_elements(self, tag):
        """Should self-close elements that never have children."""
        assert write([XmltvNode(tag, {"src": "a"})]) == HEADER + f'<{tag} src="a"/>'

    def test_bool_children(self):
        """Should render bool children as yes/no."""
        nodes = [XmltvNode("present", {}, True), XmltvNode("colour", {}, False)]

        assert write(nodes) == HEADER + "<present>yes</present><colour>no</colour>"

    @pytest.mark.parametrize(
        "attributes,rendered",
        [
            ({"lang": "en"}, ' lang="en"'),
            ({"lang": " en "}, ' lang="en"'),
            ({"title": 'say "hi"'}, " title='say \"hi\"'"),
            ({"flag": None}, " flag"),
            ({"guest": True}, ' guest="yes"'),
            ({"guest": False}, ' guest="no"'),
        ],
    )
    def test_attribute_quoting(self, attributes, rendered):
        """Should quote, trim and render attribute values."""
        assert write([XmltvNode("title", attributes)]) == HEADER + f"<title{rendered}></title>"

    def test_processing_instruction(self):
        """Should close processing instructions with ?>."""
        output = write([XmltvNode("?xml", {"version": "1.0", "encoding": "UTF-8"})])

        assert output.startswith('<?xml version="1.0" encoding="UTF-8"?>')


class TestTreeRoundTrip:
    """Tests for parse then write."""

    def test_parsed_tree_fixed_point(self, example_xml):
        """Should produce the same text when writing a re-parsed document."""
        first = write(parse(example_xml))

        assert write(parse(first)) == first

    def test_parsed_tree_keeps_header(self, example_xml):
        """Should reuse the document's own declaration and doctype."""
        output = write(parse(example_xml))

        assert output.startswith(HEADER + "<tv ")
        assert output.count("<!DOCTYPE") == 1
        assert output.count("<?xml") == 1
