"""Procedural textures mapping surface points to materials.

A texture is a pure function from a 3D surface point to a Material. Kernels
cannot call arbitrary Python callables, so the available textures form a small
closed set selected by ``kind``:

    SOLID: the primary material everywhere.
    CHECKER: a 3D checkerboard alternating the primary and secondary
        materials in cubes of side ``scale``.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu, default_fp=ti.f64)
    >>> from src.glint.materials.texture import texture_material
    >>> # Use texture_material(shape.texture, hit_point) within a kernel
"""

from enum import IntEnum

import taichi as ti

from src.glint.core.vector import Real, vec3
from src.glint.materials.material import Material


class TextureKind(IntEnum):
    """Enumeration of supported procedural textures."""

    SOLID = 0
    CHECKER = 1


@ti.dataclass
class Texture:
    """Procedural texture parameters.

    Attributes:
        kind: The texture kind (see TextureKind).
        primary: Material used by SOLID, and by the even CHECKER cells.
        secondary: Material used by the odd CHECKER cells.
        scale: Side length of a CHECKER cell in scene units.
    """

    kind: ti.i32
    primary: Material
    secondary: Material
    scale: Real


@ti.func
def checker_parity(point: vec3, scale: Real) -> ti.i32:
    """Return 0 for even checkerboard cells and 1 for odd ones."""
    cell = ti.floor(point / scale)
    total = ti.cast(cell[0] + cell[1] + cell[2], ti.i64)
    return ti.cast(total % 2, ti.i32)


@ti.func
def texture_material(texture: Texture, point: vec3) -> Material:
    """Resolve the material of a texture at a surface point.

    Args:
        texture: The procedural texture of the shape that was hit.
        point: The surface point in world space.

    Returns:
        The Material at that point.
    """
    result = texture.primary
    if texture.kind == int(TextureKind.CHECKER):
        if checker_parity(point, texture.scale) == 1:
            result = texture.secondary
    return result
