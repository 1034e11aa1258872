"""Tests for the object to tree mapping."""

import copy
from datetime import datetime, timezone

import pytest

from pyxmltv.deobjectify import attribute_text, object_to_dom
from pyxmltv.dom import ValueKind, XmltvNode, value_kind
from pyxmltv.objectify import dom_to_object
from pyxmltv.parser import parse

UTC = timezone.utc


class TestValueKind:
    """Tests for object model value classification."""

    @pytest.mark.parametrize(
        "value,kind",
        [
            (None, ValueKind.EMPTY),
            ("text", ValueKind.SCALAR),
            (60, ValueKind.SCALAR),
            (1.5, ValueKind.SCALAR),
            (True, ValueKind.FLAG),
            (datetime(2022, 1, 1, tzinfo=UTC), ValueKind.INSTANT),
            ({"_value": "x", "lang": "en"}, ValueKind.ATTRIBUTED),
            ({"id": "1"}, ValueKind.RECORD),
            ([1, 2], ValueKind.SEQUENCE),
            (XmltvNode("new"), ValueKind.NODE),
        ],
    )
    def test_classification(self, value, kind):
        """Should classify each value shape."""
        assert value_kind(value) is kind

    def test_unsupported_value(self):
        """Should reject values outside the object model."""
        with pytest.raises(TypeError):
            value_kind({1, 2})

    @pytest.mark.parametrize(
        "value,text",
        [
            (True, "yes"),
            (False, "no"),
            (100, "100"),
            (100.0, "100"),
            ("plain", "plain"),
            (datetime(2022, 3, 31, 18, tzinfo=UTC), "20220331180000 +0000"),
        ],
    )
    def test_attribute_text(self, value, text):
        """Should render scalars as attribute values."""
        assert attribute_text(value) == text


class TestRecords:
    """Tests for records and their attribute/child split."""

    def test_channel_only(self):
        """Should rebuild the channel document."""
        dom = object_to_dom({"channels": [{"id": "1", "displayName": [{"_value": "Channel 1"}]}]})

        assert dom == [
            XmltvNode(
                "tv",
                {},
                [XmltvNode("channel", {"id": "1"}, [XmltvNode("display-name", {}, ["Channel 1"])])],
            )
        ]

    def test_array_child_returns_node(self):
        """Should return the node itself for list items."""
        node = object_to_dom({"id": "1"}, "channels", True)

        assert node == XmltvNode("channel", {"id": "1"}, [])

    def test_scalar_values(self):
        """Should return text for scalars."""
        assert object_to_dom("News", "title") == "News"
        assert object_to_dom(60, "length") == "60"
        assert object_to_dom(None, "title") == []

    def test_attributed_value(self):
        """Should put _value in the text and the rest in attributes."""
        node = object_to_dom({"_value": 60, "units": "minutes"}, "length", True)

        assert node == XmltvNode("length", {"units": "minutes"}, ["60"])

    def test_none_values_omitted(self):
        """Should skip keys whose value is None."""
        dom = object_to_dom({"channels": [{"id": "1", "url": None}]})

        assert dom[0].children == [XmltvNode("channel", {"id": "1"}, [])]

    def test_scalar_list_items_wrapped(self):
        """Should give each scalar list item its own element."""
        programme = object_to_dom({"keyword": ["a", "b"]}, "programmes", True)

        assert programme.children == [
            XmltvNode("keyword", {}, ["a"]),
            XmltvNode("keyword", {}, ["b"]),
        ]

    def test_nested_scalar_children(self):
        """Should wrap non-attribute scalars in child elements."""
        video = object_to_dom({"present": True, "aspect": "16:9"}, "video", True)

        assert video == XmltvNode(
            "video",
            {},
            [XmltvNode("present", {}, ["yes"]), XmltvNode("aspect", {}, ["16:9"])],
        )

    def test_boolean_attribute(self):
        """Should render bool attributes as yes/no."""
        actor = object_to_dom({"_value": "John", "role": "Host", "guest": True}, "actor", True)

        assert actor == XmltvNode("actor", {"role": "Host", "guest": "yes"}, ["John"])

    def test_input_not_modified(self):
        """Should leave the object model untouched."""
        xmltv = {
            "programmes": [
                {
                    "start": datetime(2022, 3, 31, 18, tzinfo=UTC),
                    "channel": "1",
                    "title": [{"_value": "News"}],
                    "new": True,
                }
            ]
        }
        snapshot = copy.deepcopy(xmltv)

        object_to_dom(xmltv)

        assert xmltv == snapshot


class TestPlacementRules:
    """Tests for keys with fixed placement."""

    def test_programme_times_and_channel(self):
        """Should write start/stop as timestamps and channel verbatim."""
        programme = object_to_dom(
            {
                "start": datetime(2022, 3, 31, 18, tzinfo=UTC),
                "stop": datetime(2022, 3, 31, 19, tzinfo=UTC),
                "channel": "channel-1",
            },
            "programmes",
            True,
        )

        assert programme == XmltvNode(
            "programme",
            {
                "start": "20220331180000 +0000",
                "stop": "20220331190000 +0000",
                "channel": "channel-1",
            },
            [],
        )

    def test_programme_date_is_child(self):
        """Should write a programme date as a <date> element."""
        programme = object_to_dom(
            {"date": datetime(2022, 3, 31, tzinfo=UTC)}, "programmes", True
        )

        assert programme.attributes == {}
        assert programme.children == [XmltvNode("date", {}, ["20220331000000 +0000"])]

    def test_tv_date_is_attribute(self):
        """Should write the document date as an attribute."""
        dom = object_to_dom({"date": datetime(2022, 4, 1, tzinfo=UTC)})

        assert dom == [XmltvNode("tv", {"date": "20220401000000 +0000"}, [])]

    def test_instant_under_date_key(self):
        """Should build a <date> element for a bare instant stored under date."""
        node = object_to_dom(datetime(2022, 4, 1, tzinfo=UTC), "date", True)

        assert node == XmltvNode("date", {}, ["20220401000000 +0000"])

    def test_instant_elsewhere_is_text(self):
        """Should render other bare instants as timestamp text."""
        assert object_to_dom(datetime(2022, 4, 1, tzinfo=UTC), "start") == "20220401000000 +0000"


class TestNewFlag:
    """Tests for the <new> presence marker."""

    def test_new_true(self):
        """Should emit an empty <new> element."""
        programme = object_to_dom({"new": True}, "programmes", True)

        assert programme.children == [XmltvNode("new", {}, [])]

    def test_new_false(self):
        """Should emit nothing for new=False."""
        programme = object_to_dom({"new": False}, "programmes", True)

        assert programme.children == []

    def test_new_node_is_emitted_empty(self):
        """Should drop the children of a <new> node stored in a record."""
        programme = object_to_dom(
            {"new": XmltvNode("new", {}, ["stray"])}, "programmes", True
        )

        assert programme.children == [XmltvNode("new", {}, [])]

    def test_other_nodes_kept(self):
        """Should insert other nodes as they are."""
        extra = XmltvNode("premiere", {"lang": "en"}, ["First showing"])
        programme = object_to_dom({"premiere": extra}, "programmes", True)

        assert programme.children == [extra]


class TestRegistry:
    """Tests for custom canonical names."""

    def test_custom_names_written_back(self, registry):
        """Should map custom canonical names back to XMLTV names."""
        registry.add_tag_translation("programme", "shows")
        registry.add_attribute_translation("start", "begins")

        dom = object_to_dom(
            {"shows": [{"begins": datetime(2022, 3, 31, 18, tzinfo=UTC)}]}, registry=registry
        )

        assert dom == [
            XmltvNode("tv", {}, [XmltvNode("programme", {"start": "20220331180000 +0000"}, [])])
        ]

    def test_objectify_round_trip(self, example_xml):
        """Should rebuild a tree that maps back to the same object."""
        xmltv = dom_to_object(parse(example_xml))

        assert dom_to_object(object_to_dom(xmltv)) == xmltv

    def test_renamed_date_element_round_trip(self, registry, example_xml):
        """Should keep a renamed <date> as a child element of the programme."""
        registry.add_tag_translation("date", "airDate")
        xmltv = dom_to_object(parse(example_xml), registry=registry)

        dom = object_to_dom(xmltv, registry=registry)
        programme = next(node for node in dom[0].children if node.tag_name == "programme")

        assert xmltv["programmes"][0]["airDate"] == datetime(2022, 3, 31, tzinfo=UTC)
        assert "airDate" not in programme.attributes
        assert XmltvNode("date", {}, ["20220331000000 +0000"]) in programme.children
        assert dom[0].attributes["date"] == "20220401000000 +0000"
        assert dom_to_object(dom, registry=registry) == xmltv

    def test_bare_attribute_kept(self):
        """Should write a None attribute from the XMLTV vocabulary as a bare name."""
        node = object_to_dom({"channel": "1", "clumpidx": None, "url": None}, "programmes", True)

        assert node == XmltvNode("programme", {"channel": "1", "clumpidx": None}, [])
