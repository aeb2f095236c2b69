"""Tests for SVG document serialization."""

import xml.etree.ElementTree as ET

import pytest

from kittenstudio.render import render, render_svg
from kittenstudio.svg.primitives import (
    Circle,
    Group,
    Paint,
    Rotate,
    Svg,
    Text,
    Translate,
    format_number,
)
from kittenstudio.svg.serializer import SVG_NS, XML_PROLOG, serialize_svg
from tests.conftest import make_preset

NS = {"svg": SVG_NS}


def _tiny(*items) -> Svg:
    return Svg(width=100, height=100, items=tuple(items))


def test_prolog_and_namespaces(preset):
    doc = render_svg(preset)
    assert doc.startswith(XML_PROLOG + "\n<svg ")
    assert f'xmlns="{SVG_NS}"' in doc
    assert 'viewBox="0 0 500 500"' in doc
    assert doc.endswith("</svg>\n")


def test_document_is_well_formed(fancy_preset):
    root = ET.fromstring(render_svg(fancy_preset).encode("utf-8"))
    assert root.tag == f"{{{SVG_NS}}}svg"
    assert root.find("svg:defs", NS) is not None
    assert root.find(".//svg:radialGradient[@id='bg']", NS) is not None


def test_text_content_is_escaped():
    doc = serialize_svg(_tiny(Text(x=0, y=0, content="<script>alert('x')</script> & co")))
    assert "<script>" not in doc
    assert "&lt;script&gt;" in doc
    (text,) = ET.fromstring(doc.encode()).iter(f"{{{SVG_NS}}}text")
    assert text.text == "<script>alert('x')</script> & co"


def test_attribute_values_are_quoted():
    doc = serialize_svg(_tiny(Circle(part='a"b<c', cx=1, cy=2, r=3)))
    (circle,) = ET.fromstring(doc.encode()).iter(f"{{{SVG_NS}}}circle")
    assert circle.get("data-part") == 'a"b<c'


def test_no_external_references(fancy_preset):
    doc = render_svg(fancy_preset)
    assert "href" not in doc
    assert "<script" not in doc
    assert "http://" not in doc.replace(SVG_NS, "").replace('xmlns:xlink="http://www.w3.org/1999/xlink"', "")


def test_name_appears_as_text(fancy_preset):
    root = ET.fromstring(render_svg(fancy_preset).encode())
    names = [t.text for t in root.iter(f"{{{SVG_NS}}}text")]
    assert names == ["Sir Whiskers-the 3rd."]


def test_title_is_optional_and_escaped():
    assert "<title>" not in serialize_svg(_tiny())
    assert "<title>A &amp; B</title>" in serialize_svg(_tiny(), title="A & B")


def test_rendered_document_is_titled_with_name(fancy_preset):
    root = ET.fromstring(render_svg(fancy_preset).encode())
    assert root[0].tag == f"{{{SVG_NS}}}title"
    assert root[0].text == "Sir Whiskers-the 3rd."


def test_unnamed_document_uses_fallback_title():
    root = ET.fromstring(render_svg(make_preset(name="")).encode())
    assert root.find("svg:title", NS).text == "Unnamed kitten"


def test_empty_nodes_self_close():
    doc = serialize_svg(_tiny(Group(part="empty")))
    assert '<g data-part="empty" />' in doc


def test_none_attributes_are_dropped():
    doc = serialize_svg(_tiny(Circle(cx=1, cy=1, r=1, paint=Paint(fill="#ffffff"))))
    assert "stroke" not in doc
    assert 'fill="#ffffff"' in doc


def test_group_transforms():
    group = Group(transform=(Translate(10, 20.5), Rotate(-17.25, 250, 270)))
    doc = serialize_svg(_tiny(group))
    assert 'transform="translate(10 20.5) rotate(-17.25 250 270)"' in doc
    assert Rotate(5).to_svg() == "rotate(5)"


@pytest.mark.parametrize(
    "value, text",
    [(0, "0"), (3.0, "3"), (-20.0, "-20"), (0.25, "0.25"), (1 / 3, "0.333"), (12.3456, "12.346")],
)
def test_format_number(value, text):
    assert format_number(value) == text


def test_format_number_rejects_bool():
    with pytest.raises(TypeError):
        format_number(True)


def test_data_parts_survive_serialization(preset):
    root = ET.fromstring(render_svg(preset).encode())
    parts = {el.get("data-part") for el in root.iter() if el.get("data-part")}
    assert {"background", "figure", "body", "head", "eye", "label", "name"} <= parts
    assert len(render(preset).items) == 3
