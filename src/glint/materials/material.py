"""Surface material shared by every shape.

A material is a base color plus two independent coefficients:
- reflectivity: fraction of light coming from reflection, kept for scene
  descriptions
- diffuseness: scales both the direct (diffuse) term and the weight of the
  mirror-reflected color

The two coefficients are not required to sum to 1.
"""

import taichi as ti

from src.glint.core.vector import Color, Real


@ti.dataclass
class Material:
    """Material resolved at a surface point.

    Attributes:
        color: Surface color (RGB, conventionally in [0, 1]).
        reflectivity: Reflection coefficient in [0, 1].
        diffuseness: Diffuse coefficient in [0, 1]. A value of 0 disables the
            reflected contribution entirely.
    """

    color: Color
    reflectivity: Real
    diffuseness: Real


@ti.func
def make_material(color: Color, reflectivity: Real, diffuseness: Real) -> Material:
    return Material(color=color, reflectivity=reflectivity, diffuseness=diffuseness)
