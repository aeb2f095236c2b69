"""Fixed kitten silhouette and mood/shape-derived measurements.

All coordinates live in a 500x500 canvas. The figure rotates about
FIGURE_CENTER when the pose is tilted.
"""

from __future__ import annotations

from dataclasses import dataclass

from kittenstudio.models.preset import EyeShape, Mood

CANVAS_SIZE = 500
FIGURE_CENTER = (250, 270)

HEAD_PATH = (
    "M250 132 C 160 132, 120 206, 122 275 C 124 360, 186 420, 250 420 "
    "C 314 420, 376 360, 378 275 C 380 206, 340 132, 250 132 Z"
)
BODY_PATH = (
    "M160 430 C 150 380, 170 320, 220 305 C 235 300, 265 300, 280 305 "
    "C 330 320, 350 380, 340 430 C 320 468, 180 468, 160 430 Z"
)
BELLY_PATH = (
    "M205 430 C 205 390, 215 340, 250 336 C 285 340, 295 390, 295 430 "
    "C 275 446, 225 446, 205 430 Z"
)
TAIL_PATH = "M345 412 C 392 402, 410 360, 396 330 C 382 300, 340 296, 328 320 C 320 336, 338 352, 352 356"
EAR_LEFT_PATH = "M160 210 C 140 175, 150 146, 180 140 C 204 136, 220 160, 222 187"
EAR_RIGHT_PATH = "M340 210 C 360 175, 350 146, 320 140 C 296 136, 280 160, 278 187"
MUZZLE_PATH = (
    "M170 290 C 205 266, 232 270, 250 288 C 268 270, 295 266, 330 290 "
    "C 312 330, 284 352, 250 352 C 216 352, 188 330, 170 290 Z"
)
NOSE_PATH = "M240 275 C 248 268, 252 268, 260 275 C 254 286, 246 286, 240 275 Z"
WHISKER_PATHS = (
    "M150 285 C 180 275, 205 275, 230 281",
    "M150 305 C 180 300, 205 302, 230 308",
    "M350 285 C 320 275, 295 275, 270 281",
    "M350 305 C 320 300, 295 302, 270 308",
)
COLLAR_PATH = "M175 352 C 210 382, 290 382, 325 352"

# Pattern tiles
TABBY_WAVE_PATH = "M 0 10 C 7 5, 14 5, 22 10 S 37 15, 44 10"
CALICO_PATCH_PATHS = (
    "M10 55 C 20 30, 30 70, 50 44 C 62 28, 55 15, 44 10 C 26 3, 16 16, 10 24 Z",
    "M52 60 C 60 50, 66 64, 68 44 C 70 22, 58 18, 50 20 C 40 24, 46 42, 52 60 Z",
)

# Eyebrows: furrowed (grumpy) sit lower than raised (happy)
BROWS_FURROWED = (
    "M176 206 C 196 198, 216 198, 236 206",
    "M264 206 C 284 198, 304 198, 324 206",
)
BROWS_RAISED = (
    "M176 210 C 196 202, 216 202, 236 210",
    "M264 210 C 284 202, 304 202, 324 210",
)

EYE_CENTERS_X = (198, 302)
EYE_CY = 240
IRIS_CY = 242


@dataclass(frozen=True)
class EyeGeometry:
    width: float
    height: float
    pupil_rx: float
    pupil_ry: float


EYE_SHAPES: dict[EyeShape, EyeGeometry] = {
    "almond": EyeGeometry(width=44, height=30, pupil_rx=6, pupil_ry=14),
    "round": EyeGeometry(width=42, height=36, pupil_rx=7, pupil_ry=12),
}

IRIS_SCALE = 0.28

# Closed-lid factor, 0 = open
SLEEPY_LID = 0.55


def lid_amount(mood: Mood) -> float:
    return SLEEPY_LID if mood == "sleepy" else 0.0


def eyelid_path(x: float, eye_width: float, lid: float) -> str:
    """Arc drooping over an eye centered at x."""
    y0 = 236
    sag = y0 + 40 * lid
    return (
        f"M {x - eye_width / 2 - 2:g} {y0} "
        f"C {x - 10:g} {sag:g}, {x + 10:g} {sag:g}, {x + eye_width / 2 + 2:g} {y0}"
    )


@dataclass(frozen=True)
class MouthGeometry:
    y: float
    smile: float


MOUTHS: dict[Mood, MouthGeometry] = {
    "happy": MouthGeometry(y=263, smile=12),
    "curious": MouthGeometry(y=263, smile=12),
    "sleepy": MouthGeometry(y=265, smile=-2),
    "grumpy": MouthGeometry(y=262, smile=-10),
}


def mouth_paths(mood: Mood) -> tuple[str, str]:
    m = MOUTHS[mood]
    y, s = m.y, m.smile
    left = f"M250 {y:g} C 244 {y + 8 + s:g}, 234 {y + 12 + s:g}, 224 {y + 8:g}"
    right = f"M250 {y:g} C 256 {y + 8 + s:g}, 266 {y + 12 + s:g}, 276 {y + 8:g}"
    return left, right


# Accessories
BOW_ORIGIN = (250, 360)
BOW_WING_PATHS = (
    "M0 0 C -14 -6, -26 2, -28 14 C -24 22, -12 22, 0 14",
    "M0 0 C 14 -6, 26 2, 28 14 C 24 22, 12 22, 0 14",
)
BELL_ORIGIN = (250, 388)
BELL_SLOT_PATH = "M -6 -2 C -2 2, 2 2, 6 -2"
GLASSES_RADIUS = 32
GLASSES_BRIDGE_PATH = "M230 240 C 240 232, 260 232, 270 240"

PARTY_HAT_ORIGIN = (250, 138)
PARTY_HAT_PATH = "M0 -52 L -44 18 L 44 18 Z"
BEANIE_ORIGIN = (250, 152)
BEANIE_PATH = "M-70 10 C -60 -44, -20 -64, 0 -64 C 20 -64, 60 -44, 70 10"
BEANIE_BRIM_PATH = "M-78 10 H78"

LABEL_FALLBACK = "Unnamed kitten"
