"""Tests for XML to model conversion."""

import pytest

from hub_rss import FORCE_LIST, xml_to_model
from hub_rss.errors import FeedParseError
from hub_rss.xml_model import as_list, node_attr, node_text

MEDIA_NS = 'xmlns:media="http://search.yahoo.com/mrss/"'


def _channel(body: str) -> dict:
    model = xml_to_model(f'<rss version="2.0" {MEDIA_NS}><channel>{body}</channel></rss>')
    return model["rss"]["channel"]


def test_force_list_names_are_declared() -> None:
    assert {"item", "media:content", "enclosure"} <= FORCE_LIST


@pytest.mark.parametrize("name", ["item", "enclosure"])
def test_single_forced_element_is_a_list(name: str) -> None:
    """A lone forced element must not collapse into a bare dict."""
    channel = _channel(f'<{name} url="https://example.com/a.jpg">x</{name}>')
    assert isinstance(channel[name], list)
    assert len(channel[name]) == 1


@pytest.mark.parametrize("name", ["item", "enclosure"])
def test_repeated_forced_element_keeps_all(name: str) -> None:
    channel = _channel(f"<{name}>a</{name}><{name}>b</{name}><{name}>c</{name}>")
    assert channel[name] == ["a", "b", "c"]


def test_single_media_content_is_a_list() -> None:
    channel = _channel('<item><media:content url="https://example.com/a.jpg"/></item>')
    media = channel["item"][0]["media:content"]
    assert isinstance(media, list)
    assert media == [{"@url": "https://example.com/a.jpg"}]


def test_multiple_media_content_is_a_list() -> None:
    channel = _channel(
        "<item>"
        '<media:content url="https://example.com/a.jpg"/>'
        '<media:content url="https://example.com/b.jpg"/>'
        "</item>"
    )
    media = channel["item"][0]["media:content"]
    assert [m["@url"] for m in media] == ["https://example.com/a.jpg", "https://example.com/b.jpg"]


def test_absent_forced_element_is_absent() -> None:
    channel = _channel("<title>Empty</title>")
    assert "item" not in channel


def test_unforced_repeats_become_list_and_singles_stay_scalar() -> None:
    channel = _channel("<category>a</category><category>b</category><title>t</title>")
    assert channel["category"] == ["a", "b"]
    assert channel["title"] == "t"


def test_attributes_and_text_are_kept_together() -> None:
    channel = _channel('<guid isPermaLink="false">abc</guid>')
    assert channel["guid"] == {"@isPermaLink": "false", "#text": "abc"}


def test_html_entities_are_decoded() -> None:
    channel = _channel("<title>Caf&eacute;&nbsp;&amp; more &hellip;</title>")
    assert channel["title"] == "Café\u00a0& more …"


def test_unknown_entity_is_kept_literally() -> None:
    channel = _channel("<title>a &bogus; b</title>")
    assert channel["title"] == "a &bogus; b"


def test_cdata_is_plain_text() -> None:
    channel = _channel("<description><![CDATA[<p>Hello <b>there</b></p>]]></description>")
    assert channel["description"] == "<p>Hello <b>there</b></p>"


def test_entities_inside_cdata_are_left_raw() -> None:
    channel = _channel(
        "<title>T&eacute;</title>"
        "<description><![CDATA[a &foo; b &nbsp; c]]></description>"
    )
    assert channel["description"] == "a &foo; b &nbsp; c"
    assert channel["title"] == "Té"


def test_bytes_honor_declared_encoding() -> None:
    xml = '<?xml version="1.0" encoding="ISO-8859-1"?><rss><channel><title>Café</title></channel></rss>'
    model = xml_to_model(xml.encode("iso-8859-1"))
    assert model["rss"]["channel"]["title"] == "Café"


def test_text_with_encoding_declaration_is_accepted() -> None:
    xml = '\n  <?xml version="1.0" encoding="UTF-8"?><rss><channel><title>Ok</title></channel></rss>'
    assert xml_to_model(xml)["rss"]["channel"]["title"] == "Ok"


def test_atom_default_namespace_uses_local_names() -> None:
    model = xml_to_model(
        '<feed xmlns="http://www.w3.org/2005/Atom"><title>A</title><entry><title>E</title></entry></feed>'
    )
    assert model["feed"]["title"] == "A"
    assert model["feed"]["entry"] == [{"title": "E"}]


def test_empty_element_is_empty_string() -> None:
    channel = _channel("<description/>")
    assert channel["description"] == ""


@pytest.mark.parametrize(
    "source",
    ["", "   ", "<rss><channel></rss>", "not xml at all", "<rss><channel><title>x</title>"],
)
def test_malformed_xml_raises_parse_error(source: str) -> None:
    with pytest.raises(FeedParseError):
        xml_to_model(source)


def test_parse_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        xml_to_model("<broken")


def test_node_helpers() -> None:
    assert as_list(None) == []
    assert as_list("") == []
    assert as_list({"a": 1}) == [{"a": 1}]
    assert as_list([1, 2]) == [1, 2]
    assert node_text({"@type": "html", "#text": "body"}) == "body"
    assert node_text(["first", "second"]) == "first"
    assert node_text(None) == ""
    assert node_attr({"@url": " https://x/a.jpg "}, "url") == "https://x/a.jpg"
    assert node_attr("text", "url") == ""
