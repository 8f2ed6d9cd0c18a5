"""Surface materials and procedural textures."""

from .material import Material, make_material
from .texture import Texture, TextureKind, checker_parity, texture_material

__all__ = [
    "Material",
    "make_material",
    "Texture",
    "TextureKind",
    "checker_parity",
    "texture_material",
]
