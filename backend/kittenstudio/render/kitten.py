"""Render a validated preset into a drawing tree.

Pure and deterministic: no validation, no I/O, no clock. The caller must pass
a preset that already went through the validator. The one data rule enforced
here regardless of input is that the bow and bell hang from the collar, so
neither is drawn without it.
"""

from __future__ import annotations

import logging

from kittenstudio.models.preset import Accessories, EyeStyle, FurStyle, KittenPreset, Mood
from kittenstudio.render import geometry as geo
from kittenstudio.render.themes import THEMES, Palette, confetti_dots
from kittenstudio.svg.primitives import (
    Circle,
    ClipPath,
    DropShadow,
    Ellipse,
    GradientStop,
    Group,
    LinearGradient,
    Node,
    Paint,
    Path,
    Pattern,
    RadialGradient,
    Rect,
    Rotate,
    Svg,
    Text,
    Translate,
    ref,
)
from kittenstudio.utils.color import mix_hex
from kittenstudio.utils.math_helpers import clamp01

logger = logging.getLogger(__name__)

BG_GRADIENT_ID = "bg"
SHINE_GRADIENT_ID = "shine"
FACE_CLIP_ID = "faceClip"
SHADOW_FILTER_ID = "softShadow"

WHITE = "#ffffff"
CALICO_ORANGE = "#ff8a4c"
NOSE_PINK = "#ff6b8a"
BELL_GOLD = mix_hex("#ffd36e", "#ffb703", 0.3)


# ── Definitions ──


def _background_gradient(palette: Palette) -> RadialGradient:
    return RadialGradient(
        id=BG_GRADIENT_ID,
        cx="30%",
        cy="25%",
        r="80%",
        stops=(
            GradientStop(offset="0%", color=mix_hex(palette.b, WHITE, 0.1), stop_opacity=0.7),
            GradientStop(offset="55%", color=palette.b, stop_opacity=0.22),
            GradientStop(offset="100%", color=palette.a, stop_opacity=1),
        ),
    )


def _shine_gradient() -> LinearGradient:
    return LinearGradient(
        id=SHINE_GRADIENT_ID,
        stops=(
            GradientStop(offset="0", color=WHITE, stop_opacity=0.18),
            GradientStop(offset="1", color=WHITE, stop_opacity=0.02),
        ),
    )


def pattern_tile(fur: FurStyle) -> Pattern | None:
    """Fur overlay tile, or None when the overlay would be invisible.

    Every tile opacity is proportional to the intensity, so intensity 0 draws
    exactly what ``solid`` draws.
    """
    intensity = clamp01(fur.pattern_intensity)
    if fur.pattern == "solid" or intensity == 0:
        return None

    if fur.pattern == "tabby":
        stripes = mix_hex(fur.base, fur.outline, 0.5)
        return Pattern(
            id="tabby",
            part="pattern-tile",
            width=30,
            height=30,
            items=(
                Path(
                    d=geo.TABBY_WAVE_PATH,
                    paint=Paint(
                        fill="none",
                        stroke=stripes,
                        stroke_opacity=0.8 * intensity,
                        stroke_width=6,
                        stroke_linecap="round",
                    ),
                ),
            ),
        )

    if fur.pattern == "tuxedo":
        return Pattern(
            id="tuxedo",
            part="pattern-tile",
            width=48,
            height=48,
            items=(
                Circle(
                    cx=14,
                    cy=18,
                    r=10,
                    paint=Paint(fill=mix_hex(fur.outline, fur.base, 0.2), fill_opacity=0.85 * intensity),
                ),
                Circle(
                    cx=34,
                    cy=34,
                    r=12,
                    paint=Paint(fill=mix_hex(fur.outline, fur.base, 0.25), fill_opacity=0.75 * intensity),
                ),
            ),
        )

    # calico
    first, second = geo.CALICO_PATCH_PATHS
    return Pattern(
        id="calico",
        part="pattern-tile",
        width=70,
        height=70,
        items=(
            Path(d=first, paint=Paint(fill=mix_hex(fur.base, CALICO_ORANGE, 0.35), fill_opacity=0.85 * intensity)),
            Path(d=second, paint=Paint(fill=mix_hex(fur.base, WHITE, 0.55), fill_opacity=0.9 * intensity)),
        ),
    )


def _definitions(palette: Palette, tile: Pattern | None) -> tuple[Node, ...]:
    defs: list[Node] = [_background_gradient(palette), _shine_gradient()]
    if tile is not None:
        defs.append(tile)
    defs.append(ClipPath(id=FACE_CLIP_ID, items=(Path(d=geo.HEAD_PATH),)))
    defs.append(
        DropShadow(id=SHADOW_FILTER_ID, dy=10, std_deviation=10, flood_color="#000000", flood_opacity=0.35)
    )
    return tuple(defs)


# ── Layers ──


def _backdrop(confetti: bool) -> list[Node]:
    size = geo.CANVAS_SIZE
    layers: list[Node] = [
        Rect(part="background", x=0, y=0, width=size, height=size, paint=Paint(fill=ref(BG_GRADIENT_ID)))
    ]
    if confetti:
        dots = tuple(
            Circle(part="confetti-dot", cx=d.cx, cy=d.cy, r=d.r, paint=Paint(fill=d.fill, opacity=0.9))
            for d in confetti_dots()
        )
        layers.append(Group(part="confetti", items=dots))
    return layers


def _body(fur: FurStyle) -> list[Node]:
    outline = fur.outline
    return [
        Path(
            part="body",
            d=geo.BODY_PATH,
            paint=Paint(fill=fur.base, stroke=outline, stroke_width=6, stroke_linejoin="round"),
        ),
        Path(
            part="belly",
            d=geo.BELLY_PATH,
            paint=Paint(fill=fur.belly, stroke=outline, stroke_width=5, stroke_linejoin="round"),
        ),
        Group(
            part="tail",
            items=(
                Path(d=geo.TAIL_PATH, paint=Paint(fill="none", stroke=fur.base, stroke_width=22, stroke_linecap="round")),
                Path(d=geo.TAIL_PATH, paint=Paint(fill="none", stroke=outline, stroke_width=6, stroke_linecap="round")),
            ),
        ),
    ]


def _head(fur: FurStyle, tile: Pattern | None) -> list[Node]:
    ear_paint = Paint(fill=fur.base, stroke=fur.outline, stroke_width=6, stroke_linejoin="round")
    clipped: list[Node] = [Path(part="head", d=geo.HEAD_PATH, paint=Paint(fill=fur.base))]
    if tile is not None:
        clipped.append(Path(part="pattern-overlay", d=geo.HEAD_PATH, paint=Paint(fill=ref(tile.id), opacity=0.95)))
    clipped.append(
        Group(
            part="ears",
            items=(
                Path(d=geo.EAR_LEFT_PATH, paint=ear_paint),
                Path(d=geo.EAR_RIGHT_PATH, paint=ear_paint),
            ),
        )
    )
    clipped.append(
        Rect(x=120, y=170, width=260, height=250, paint=Paint(fill=ref(SHINE_GRADIENT_ID), opacity=0.55))
    )
    return [
        Group(clip_path=FACE_CLIP_ID, items=tuple(clipped)),
        Path(
            part="head-outline",
            d=geo.HEAD_PATH,
            paint=Paint(fill="none", stroke=fur.outline, stroke_width=7, stroke_linejoin="round"),
        ),
        Path(
            part="muzzle",
            d=geo.MUZZLE_PATH,
            paint=Paint(fill=fur.belly, stroke=fur.outline, stroke_width=5, stroke_linejoin="round"),
        ),
    ]


def _eye(x: float, eyes: EyeStyle, fur: FurStyle, mood: Mood) -> Group:
    shape = geo.EYE_SHAPES[eyes.shape]
    stroke = fur.outline
    items: list[Node] = [
        Ellipse(
            part="sclera",
            cx=x,
            cy=geo.EYE_CY,
            rx=shape.width / 2,
            ry=shape.height / 2,
            paint=Paint(fill=WHITE, stroke=stroke, stroke_width=5),
        ),
        Ellipse(
            part="iris",
            cx=x,
            cy=geo.IRIS_CY,
            rx=shape.width * geo.IRIS_SCALE,
            ry=shape.height * geo.IRIS_SCALE,
            paint=Paint(fill=eyes.iris),
        ),
        Ellipse(
            part="pupil",
            cx=x,
            cy=geo.IRIS_CY,
            rx=shape.pupil_rx,
            ry=shape.pupil_ry,
            paint=Paint(fill=eyes.pupil),
        ),
    ]
    if eyes.sparkle:
        items.append(Circle(part="sparkle", cx=x - 10, cy=232, r=4, paint=Paint(fill=WHITE, opacity=0.95)))

    lid = geo.lid_amount(mood)
    if lid > 0:
        items.append(
            Path(
                part="eyelid",
                d=geo.eyelid_path(x, shape.width, lid),
                paint=Paint(fill="none", stroke=fur.base, stroke_width=round(18 * lid), stroke_linecap="round"),
            )
        )
    return Group(part="eye", items=tuple(items))


def _eyebrows(mood: Mood, stroke: str) -> list[Node]:
    if mood == "grumpy":
        paths, opacity = geo.BROWS_FURROWED, None
    elif mood == "happy":
        paths, opacity = geo.BROWS_RAISED, 0.8
    else:
        return []
    return [
        Group(
            part="eyebrows",
            items=tuple(Path(d=d) for d in paths),
            paint=Paint(fill="none", stroke=stroke, stroke_width=6, stroke_linecap="round", opacity=opacity),
        )
    ]


def _face(preset: KittenPreset) -> list[Node]:
    fur, eyes, mood = preset.fur, preset.eyes, preset.pose.mood
    stroke = fur.outline
    layers: list[Node] = [_eye(x, eyes, fur, mood) for x in geo.EYE_CENTERS_X]
    layers.extend(_eyebrows(mood, stroke))
    layers.append(
        Path(
            part="nose",
            d=geo.NOSE_PATH,
            paint=Paint(fill=mix_hex(NOSE_PINK, fur.belly, 0.25), stroke=stroke, stroke_width=4, stroke_linejoin="round"),
        )
    )
    layers.append(
        Group(
            part="mouth",
            items=tuple(Path(d=d) for d in geo.mouth_paths(mood)),
            paint=Paint(fill="none", stroke=stroke, stroke_width=5, stroke_linecap="round"),
        )
    )
    layers.append(
        Group(
            part="whiskers",
            items=tuple(Path(d=d) for d in geo.WHISKER_PATHS),
            paint=Paint(stroke=stroke, stroke_width=4, stroke_linecap="round", opacity=0.85),
        )
    )
    return layers


def _collar(acc: Accessories, stroke: str) -> list[Node]:
    if not acc.collar_enabled:
        return []

    items: list[Node] = [
        Path(d=geo.COLLAR_PATH, paint=Paint(fill="none", stroke=acc.collar, stroke_width=18, stroke_linecap="round")),
        Path(
            d=geo.COLLAR_PATH,
            paint=Paint(fill="none", stroke=stroke, stroke_width=5, stroke_linecap="round", opacity=0.9),
        ),
    ]

    if acc.bow_enabled:
        wing = Paint(fill=mix_hex(acc.collar, WHITE, 0.2), stroke=stroke, stroke_width=4)
        items.append(
            Group(
                part="bow",
                transform=(Translate(*geo.BOW_ORIGIN),),
                items=(
                    Path(d=geo.BOW_WING_PATHS[0], paint=wing),
                    Path(d=geo.BOW_WING_PATHS[1], paint=wing),
                    Circle(cx=0, cy=12, r=6, paint=Paint(fill=acc.collar, stroke=stroke, stroke_width=4)),
                ),
            )
        )

    if acc.bell_enabled:
        items.append(
            Group(
                part="bell",
                transform=(Translate(*geo.BELL_ORIGIN),),
                items=(
                    Circle(cx=0, cy=0, r=14, paint=Paint(fill=BELL_GOLD, stroke=stroke, stroke_width=5)),
                    Path(
                        d=geo.BELL_SLOT_PATH,
                        paint=Paint(fill="none", stroke=stroke, stroke_width=4, stroke_linecap="round"),
                    ),
                    Circle(cx=0, cy=7, r=3, paint=Paint(fill=stroke)),
                ),
            )
        )

    return [Group(part="collar", items=tuple(items))]


def _glasses(acc: Accessories, stroke: str) -> list[Node]:
    if not acc.glasses_enabled:
        return []
    lens = Paint(fill="none", stroke=stroke, stroke_width=6)
    return [
        Group(
            part="glasses",
            paint=Paint(opacity=0.92),
            items=(
                *(Circle(cx=x, cy=geo.EYE_CY, r=geo.GLASSES_RADIUS, paint=lens) for x in geo.EYE_CENTERS_X),
                Path(
                    d=geo.GLASSES_BRIDGE_PATH,
                    paint=Paint(fill="none", stroke=stroke, stroke_width=6, stroke_linecap="round"),
                ),
            ),
        )
    ]


def _hat(acc: Accessories, palette: Palette, stroke: str) -> list[Node]:
    if acc.hat == "party":
        return [
            Group(
                part="hat-party",
                transform=(Translate(*geo.PARTY_HAT_ORIGIN),),
                items=(
                    Path(
                        d=geo.PARTY_HAT_PATH,
                        paint=Paint(fill=mix_hex(palette.c, WHITE, 0.05), stroke=stroke, stroke_width=6),
                    ),
                    Circle(
                        cx=0,
                        cy=-56,
                        r=10,
                        paint=Paint(fill=mix_hex(palette.c, WHITE, 0.2), stroke=stroke, stroke_width=5),
                    ),
                ),
            )
        ]
    if acc.hat == "beanie":
        return [
            Group(
                part="hat-beanie",
                transform=(Translate(*geo.BEANIE_ORIGIN),),
                items=(
                    Path(
                        d=geo.BEANIE_PATH,
                        paint=Paint(
                            fill=mix_hex(palette.b, palette.c, 0.35),
                            stroke=stroke,
                            stroke_width=6,
                            stroke_linejoin="round",
                        ),
                    ),
                    Path(
                        d=geo.BEANIE_BRIM_PATH,
                        paint=Paint(stroke=mix_hex(WHITE, palette.c, 0.4), stroke_width=16, stroke_linecap="round"),
                    ),
                ),
            )
        ]
    return []


def _label(name: str) -> Group:
    return Group(
        part="label",
        items=(
            Rect(
                x=70,
                y=440,
                width=360,
                height=44,
                rx=14,
                paint=Paint(fill="#000000", fill_opacity=0.28, stroke=WHITE, stroke_opacity=0.16),
            ),
            Text(
                part="name",
                x=250,
                y=468,
                content=name or geo.LABEL_FALLBACK,
                font_size=18,
                font_weight=650,
                text_anchor="middle",
                paint=Paint(fill=WHITE, fill_opacity=0.85),
            ),
        ),
    )


def render(preset: KittenPreset) -> Svg:
    """Map a validated preset to its drawing tree."""
    palette = THEMES[preset.background.theme]
    tile = pattern_tile(preset.fur)
    stroke = preset.fur.outline
    acc = preset.accessories

    figure: list[Node] = []
    figure.extend(_body(preset.fur))
    figure.extend(_head(preset.fur, tile))
    figure.extend(_face(preset))
    figure.extend(_collar(acc, stroke))
    figure.extend(_glasses(acc, stroke))
    figure.extend(_hat(acc, palette, stroke))

    cx, cy = geo.FIGURE_CENTER
    items: list[Node] = _backdrop(preset.background.confetti)
    items.append(
        Group(
            part="figure",
            transform=(Rotate(preset.pose.tilt, cx, cy),),
            filter=SHADOW_FILTER_ID,
            items=tuple(figure),
        )
    )
    items.append(_label(preset.name))

    logger.debug("Rendered kitten %r with %d top-level layers", preset.name, len(items))
    return Svg(
        width=geo.CANVAS_SIZE,
        height=geo.CANVAS_SIZE,
        defs=_definitions(palette, tile),
        items=tuple(items),
        aria_label="Customized kitten",
    )
