"""Drawing tree of immutable vector primitives produced by the renderer.

The tree is format-agnostic data: shapes, paint, gradients, patterns and
grouping transforms. ``serializer.serialize_svg`` turns it into SVG text.
Each node exposes ``tag`` and ``attributes()`` (SVG attribute name -> value)
so the serializer never needs to know individual node types.

``part`` is a semantic label ("bell", "eyebrows"...) emitted as ``data-part``;
``id`` is reserved for definitions referenced through ``url(#id)``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, ClassVar, Union

Number = Union[int, float]


def ref(def_id: str) -> str:
    """Paint reference to a definition, e.g. ``url(#bg)``."""
    return f"url(#{def_id})"


# ── Paint ──


@dataclass(frozen=True, kw_only=True)
class Paint:
    fill: str | None = None
    fill_opacity: Number | None = None
    stroke: str | None = None
    stroke_width: Number | None = None
    stroke_opacity: Number | None = None
    stroke_linecap: str | None = None
    stroke_linejoin: str | None = None
    opacity: Number | None = None

    def attributes(self) -> dict[str, Any]:
        return {
            "fill": self.fill,
            "fill-opacity": self.fill_opacity,
            "stroke": self.stroke,
            "stroke-width": self.stroke_width,
            "stroke-opacity": self.stroke_opacity,
            "stroke-linecap": self.stroke_linecap,
            "stroke-linejoin": self.stroke_linejoin,
            "opacity": self.opacity,
        }


NO_PAINT = Paint()


# ── Transforms ──


@dataclass(frozen=True)
class Translate:
    x: Number
    y: Number

    def to_svg(self) -> str:
        return f"translate({format_number(self.x)} {format_number(self.y)})"


@dataclass(frozen=True)
class Rotate:
    """Rotation in degrees about (cx, cy)."""

    angle: Number
    cx: Number = 0
    cy: Number = 0

    def to_svg(self) -> str:
        if self.cx == 0 and self.cy == 0:
            return f"rotate({format_number(self.angle)})"
        return f"rotate({format_number(self.angle)} {format_number(self.cx)} {format_number(self.cy)})"


Transform = Union[Translate, Rotate]


def format_number(value: Number) -> str:
    """Compact number text: integers without a dot, floats to 3 decimals."""
    if isinstance(value, bool):
        raise TypeError("bool is not a coordinate")
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.3f}".rstrip("0").rstrip(".")


# ── Nodes ──


@dataclass(frozen=True, kw_only=True)
class Node:
    tag: ClassVar[str] = ""

    part: str | None = None
    paint: Paint = NO_PAINT

    @property
    def children(self) -> tuple[Node, ...]:
        return ()

    @property
    def text(self) -> str | None:
        return None

    def geometry(self) -> dict[str, Any]:
        return {}

    def attributes(self) -> dict[str, Any]:
        attrs: dict[str, Any] = {}
        attrs.update(self.geometry())
        attrs.update(self.paint.attributes())
        attrs["data-part"] = self.part
        return {k: v for k, v in attrs.items() if v is not None}


@dataclass(frozen=True, kw_only=True)
class Group(Node):
    tag: ClassVar[str] = "g"

    items: tuple[Node, ...] = ()
    transform: tuple[Transform, ...] = ()
    clip_path: str | None = None
    filter: str | None = None

    @property
    def children(self) -> tuple[Node, ...]:
        return self.items

    def geometry(self) -> dict[str, Any]:
        return {
            "transform": " ".join(t.to_svg() for t in self.transform) or None,
            "clip-path": ref(self.clip_path) if self.clip_path else None,
            "filter": ref(self.filter) if self.filter else None,
        }


@dataclass(frozen=True, kw_only=True)
class Path(Node):
    tag: ClassVar[str] = "path"

    d: str

    def geometry(self) -> dict[str, Any]:
        return {"d": self.d}


@dataclass(frozen=True, kw_only=True)
class Circle(Node):
    tag: ClassVar[str] = "circle"

    cx: Number
    cy: Number
    r: Number

    def geometry(self) -> dict[str, Any]:
        return {"cx": self.cx, "cy": self.cy, "r": self.r}


@dataclass(frozen=True, kw_only=True)
class Ellipse(Node):
    tag: ClassVar[str] = "ellipse"

    cx: Number
    cy: Number
    rx: Number
    ry: Number

    def geometry(self) -> dict[str, Any]:
        return {"cx": self.cx, "cy": self.cy, "rx": self.rx, "ry": self.ry}


@dataclass(frozen=True, kw_only=True)
class Rect(Node):
    tag: ClassVar[str] = "rect"

    x: Number
    y: Number
    width: Number
    height: Number
    rx: Number | None = None

    def geometry(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height, "rx": self.rx}


@dataclass(frozen=True, kw_only=True)
class Text(Node):
    """Literal character data. ``content`` is never interpreted as markup."""

    tag: ClassVar[str] = "text"

    x: Number
    y: Number
    content: str
    font_size: Number = 16
    font_family: str = "ui-sans-serif,system-ui"
    font_weight: int | None = None
    text_anchor: str = "start"

    @property
    def text(self) -> str | None:
        return self.content

    def geometry(self) -> dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "text-anchor": self.text_anchor,
            "font-size": self.font_size,
            "font-family": self.font_family,
            "font-weight": self.font_weight,
        }


# ── Definitions (referenced by id) ──


@dataclass(frozen=True, kw_only=True)
class GradientStop(Node):
    tag: ClassVar[str] = "stop"

    offset: str
    color: str
    stop_opacity: Number = 1

    def geometry(self) -> dict[str, Any]:
        return {"offset": self.offset, "stop-color": self.color, "stop-opacity": self.stop_opacity}


@dataclass(frozen=True, kw_only=True)
class RadialGradient(Node):
    tag: ClassVar[str] = "radialGradient"

    id: str
    cx: str = "50%"
    cy: str = "50%"
    r: str = "50%"
    stops: tuple[GradientStop, ...] = ()

    @property
    def children(self) -> tuple[Node, ...]:
        return self.stops

    def geometry(self) -> dict[str, Any]:
        return {"id": self.id, "cx": self.cx, "cy": self.cy, "r": self.r}


@dataclass(frozen=True, kw_only=True)
class LinearGradient(Node):
    tag: ClassVar[str] = "linearGradient"

    id: str
    x1: Number = 0
    y1: Number = 0
    x2: Number = 0
    y2: Number = 1
    stops: tuple[GradientStop, ...] = ()

    @property
    def children(self) -> tuple[Node, ...]:
        return self.stops

    def geometry(self) -> dict[str, Any]:
        return {"id": self.id, "x1": self.x1, "y1": self.y1, "x2": self.x2, "y2": self.y2}


@dataclass(frozen=True, kw_only=True)
class Pattern(Node):
    """Repeating tile in user space."""

    tag: ClassVar[str] = "pattern"

    id: str
    width: Number
    height: Number
    items: tuple[Node, ...] = ()

    @property
    def children(self) -> tuple[Node, ...]:
        return self.items

    def geometry(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "width": self.width,
            "height": self.height,
            "patternUnits": "userSpaceOnUse",
        }


@dataclass(frozen=True, kw_only=True)
class ClipPath(Node):
    tag: ClassVar[str] = "clipPath"

    id: str
    items: tuple[Node, ...] = ()

    @property
    def children(self) -> tuple[Node, ...]:
        return self.items

    def geometry(self) -> dict[str, Any]:
        return {"id": self.id}


@dataclass(frozen=True, kw_only=True)
class DropShadow(Node):
    """A ``<filter>`` wrapping a single ``feDropShadow``."""

    tag: ClassVar[str] = "filter"

    id: str
    dx: Number = 0
    dy: Number = 0
    std_deviation: Number = 0
    flood_color: str = "#000000"
    flood_opacity: Number = 1

    @property
    def children(self) -> tuple[Node, ...]:
        return (_FeDropShadow(shadow=self),)

    def geometry(self) -> dict[str, Any]:
        return {"id": self.id, "x": "-20%", "y": "-20%", "width": "140%", "height": "140%"}


@dataclass(frozen=True, kw_only=True)
class _FeDropShadow(Node):
    tag: ClassVar[str] = "feDropShadow"

    shadow: DropShadow

    def geometry(self) -> dict[str, Any]:
        s = self.shadow
        return {
            "dx": s.dx,
            "dy": s.dy,
            "stdDeviation": s.std_deviation,
            "flood-color": s.flood_color,
            "flood-opacity": s.flood_opacity,
        }


@dataclass(frozen=True, kw_only=True)
class Svg(Node):
    """Root of a drawing tree."""

    tag: ClassVar[str] = "svg"

    width: Number
    height: Number
    defs: tuple[Node, ...] = ()
    items: tuple[Node, ...] = ()
    aria_label: str = ""

    @property
    def children(self) -> tuple[Node, ...]:
        return self.items

    def geometry(self) -> dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "viewBox": f"0 0 {format_number(self.width)} {format_number(self.height)}",
            "role": "img",
            "aria-label": self.aria_label or None,
        }


# ── Tree helpers ──


def iter_nodes(node: Node) -> Iterator[Node]:
    """Depth-first walk over a node, its definitions and its children."""
    yield node
    if isinstance(node, Svg):
        for d in node.defs:
            yield from iter_nodes(d)
    for child in node.children:
        yield from iter_nodes(child)


def find_parts(node: Node, part: str) -> list[Node]:
    return [n for n in iter_nodes(node) if n.part == part]


def find_by_id(node: Node, def_id: str) -> Node | None:
    for n in iter_nodes(node):
        if getattr(n, "id", None) == def_id:
            return n
    return None

