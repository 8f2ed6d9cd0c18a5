"""Light sources and the local shading model.

Components:
    light: Light structure (directional lights and spotlights)
    shading: Shadow tests, Lambertian diffuse and mirror reflection
"""

from .light import Light, LightKind

# Note: shading is NOT imported here; it depends on src.glint.scene, which
# imports this package. Import directly from src.glint.lighting.shading.

__all__ = [
    "Light",
    "LightKind",
]
