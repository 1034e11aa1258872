"""
pyxmltv.schema - XMLTV vocabulary and structural rule lists

The closed sets of tag and attribute names understood by pyxmltv, and the
fixed lists that drive the scanner, the mappers and the writer.

See http://wiki.xmltv.org/index.php/XmltvFormat
"""

XMLTV_TAGS = (
    "tv",
    "channel",
    "display-name",
    "programme",
    "title",
    "sub-title",
    "desc",
    "credits",
    "director",
    "actor",
    "writer",
    "adapter",
    "producer",
    "composer",
    "editor",
    "presenter",
    "commentator",
    "guest",
    "date",
    "category",
    "keyword",
    "language",
    "orig-language",
    "length",
    "icon",
    "image",
    "url",
    "country",
    "episode-num",
    "video",
    "present",
    "colour",
    "aspect",
    "quality",
    "audio",
    "stereo",
    "previously-shown",
    "premiere",
    "last-chance",
    "new",
    "subtitles",
    "rating",
    "value",
    "star-rating",
    "review",
)

XMLTV_ATTRIBUTES = (
    "channel",
    "clumpidx",
    "date",
    "generator-info-name",
    "generator-info-url",
    "guest",
    "height",
    "id",
    "lang",
    "orient",
    "pdc-start",
    "reviewer",
    "role",
    "showview",
    "size",
    "source",
    "src",
    "start",
    "stop",
    "source-data-url",
    "source-info-name",
    "source-info-url",
    "system",
    "type",
    "units",
    "videoplus",
    "vps-start",
    "width",
)

# Built-in canonical names applied on top of the identity tables
DEFAULT_TAG_TRANSLATIONS = {
    "display-name": "displayName",
    "episode-num": "episodeNum",
    "last-chance": "lastChance",
    "orig-language": "origLanguage",
    "previously-shown": "previouslyShown",
    "star-rating": "starRating",
    "sub-title": "subTitle",
    "channel": "channels",
    "programme": "programmes",
}

DEFAULT_ATTRIBUTE_TRANSLATIONS = {
    "generator-info-name": "generatorInfoName",
    "generator-info-url": "generatorInfoUrl",
    "pdc-start": "pdcStart",
    "vps-start": "vpsStart",
    "source-data-url": "sourceDataUrl",
    "source-info-name": "sourceInfoName",
    "source-info-url": "sourceInfoUrl",
}

# Elements that may appear at most once in their parent.
# <credits> is used once per <programme>, <actor> many times per <credits>.
SINGLE_USE_ELEMENTS = frozenset(
    {
        "credits",
        "date",
        "language",
        "orig-language",
        "length",
        "country",
        "previously-shown",
        "premiere",
        "last-chance",
        "new",
        "video",
        "audio",
        # <video> children
        "present",
        "colour",
        "aspect",
        "quality",
        # <audio> children
        "stereo",
        # <rating> and <star-rating> children
        "value",
    }
)

# Elements kept as bare scalars instead of {"_value": ...}
SCALAR_ELEMENTS = frozenset({"date", "value", "aspect", "present", "colour", "quality", "stereo"})

# Elements that never carry children, with or without an explicit "/>"
CHILDLESS_ELEMENTS = frozenset({"new", "icon", "previously-shown"})

# <credits> roles whose text content sits next to <image>/<url> children
CREDIT_ROLES = frozenset(
    {
        "director",
        "actor",
        "writer",
        "adapter",
        "producer",
        "composer",
        "editor",
        "presenter",
        "commentator",
        "guest",
    }
)

BOOLEAN_LITERALS = {"yes": True, "no": False}

PROCESSING_INSTRUCTION_MARKER = "?"
DOCTYPE_MARKER = "!DOCTYPE"

DEFAULT_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
DEFAULT_DOCTYPE = '<!DOCTYPE tv SYSTEM "xmltv.dtd">'


def is_processing_instruction(tag_name: str) -> bool:
    return tag_name.startswith(PROCESSING_INSTRUCTION_MARKER)
