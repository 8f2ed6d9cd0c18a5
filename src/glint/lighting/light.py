"""Light tagged union.

A Light is one of two variants, selected by ``kind``:

    DIRECTIONAL: ``vector`` is the direction the light travels. Directional
        lights are never shadow-tested.
    SPOT: ``vector`` is the light position. Spotlights are shadow-tested
        against every shape in the scene.
"""

from enum import IntEnum

import taichi as ti

from src.glint.core.vector import Color, vec3


class LightKind(IntEnum):
    """Enumeration of light variants."""

    DIRECTIONAL = 0
    SPOT = 1


@ti.dataclass
class Light:
    """A directional light or a spotlight.

    Attributes:
        kind: The light variant (see LightKind).
        vector: Direction for DIRECTIONAL, position for SPOT.
        color: Light color (RGB).
    """

    kind: ti.i32
    vector: vec3
    color: Color
