"""Host-side scene description.

These frozen dataclasses describe a scene without touching Taichi. A
SceneManager turns a SceneConfig into kernel-side fields.

Scenes can be written to and read from plain dictionaries (and JSON files):

    {
        "ambient": [0.1, 0.1, 0.1],
        "background": [0.0, 0.0, 0.0],
        "shapes": [
            {"type": "sphere", "center": [0, 0, 100], "radius": 60,
             "material": {"color": [0, 1, 0], "reflectivity": 0.3,
                          "diffuseness": 0.6}},
            {"type": "plane", "normal": [0, 1, 0], "distance": 50,
             "texture": {"type": "checker", "scale": 20,
                         "primary": {...}, "secondary": {...}}}
        ],
        "lights": [
            {"type": "spot", "position": [-100, -200, -50], "color": [0.9, 0.9, 0.9]},
            {"type": "directional", "direction": [0, 1, 1], "color": [0.5, 0.5, 0.5]}
        ]
    }

A shape may give either a ``material`` (solid texture) or a ``texture``.

Example:
    >>> from src.glint.scene.description import MaterialInfo, SceneConfig, SphereInfo, TextureInfo
    >>> green = MaterialInfo(color=(0.0, 1.0, 0.0), reflectivity=0.3, diffuseness=0.6)
    >>> config = SceneConfig(
    ...     shapes=(SphereInfo((0.0, 0.0, 100.0), 60.0, TextureInfo.solid(green)),),
    ... )
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Union

from src.glint.materials.texture import TextureKind

if TYPE_CHECKING:
    from src.glint.camera.view import View

Vec3Tuple = tuple[float, float, float]


def _vec3(values: Any) -> Vec3Tuple:
    return (float(values[0]), float(values[1]), float(values[2]))


def _check_unit_interval(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be in [0, 1], got {value}")


# =============================================================================
# Materials and Textures
# =============================================================================


@dataclass(frozen=True)
class MaterialInfo:
    """Surface material description.

    Attributes:
        color: Surface color (R, G, B). Not range-checked.
        reflectivity: Reflection coefficient in [0, 1].
        diffuseness: Diffuse coefficient in [0, 1].
    """

    color: Vec3Tuple
    reflectivity: float = 0.0
    diffuseness: float = 1.0

    def __post_init__(self) -> None:
        _check_unit_interval("reflectivity", self.reflectivity)
        _check_unit_interval("diffuseness", self.diffuseness)

    def to_dict(self) -> dict[str, Any]:
        return {
            "color": list(self.color),
            "reflectivity": self.reflectivity,
            "diffuseness": self.diffuseness,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MaterialInfo:
        return cls(
            color=_vec3(data.get("color", [1.0, 1.0, 1.0])),
            reflectivity=float(data.get("reflectivity", 0.0)),
            diffuseness=float(data.get("diffuseness", 1.0)),
        )


@dataclass(frozen=True)
class TextureInfo:
    """Procedural texture description.

    Attributes:
        kind: SOLID or CHECKER.
        primary: Material of SOLID textures and of even checker cells.
        secondary: Material of odd checker cells (required for CHECKER).
        scale: Checker cell size in scene units (> 0).
    """

    kind: TextureKind
    primary: MaterialInfo
    secondary: MaterialInfo | None = None
    scale: float = 1.0

    def __post_init__(self) -> None:
        if self.kind == TextureKind.CHECKER and self.secondary is None:
            raise ValueError("Checker texture requires a secondary material")
        if self.scale <= 0.0:
            raise ValueError(f"Texture scale must be positive, got {self.scale}")

    @classmethod
    def solid(cls, material: MaterialInfo) -> TextureInfo:
        return cls(kind=TextureKind.SOLID, primary=material)

    @classmethod
    def checker(
        cls, primary: MaterialInfo, secondary: MaterialInfo, scale: float = 1.0
    ) -> TextureInfo:
        return cls(kind=TextureKind.CHECKER, primary=primary, secondary=secondary, scale=scale)

    def material_at(self, point: Vec3Tuple) -> MaterialInfo:
        """Evaluate the texture on the host (mirrors the kernel lookup)."""
        if self.kind == TextureKind.CHECKER and self.secondary is not None:
            cell = sum(math.floor(c / self.scale) for c in point)
            if cell % 2 == 1:
                return self.secondary
        return self.primary

    def to_dict(self) -> dict[str, Any]:
        if self.kind == TextureKind.SOLID:
            return {"type": "solid", "material": self.primary.to_dict()}
        assert self.secondary is not None
        return {
            "type": "checker",
            "primary": self.primary.to_dict(),
            "secondary": self.secondary.to_dict(),
            "scale": self.scale,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TextureInfo:
        """Build a texture from its dictionary form.

        Raises:
            ValueError: If the texture type is unknown.
        """
        texture_type = data.get("type", "solid").lower()
        if texture_type == "solid":
            return cls.solid(MaterialInfo.from_dict(data.get("material", {})))
        if texture_type == "checker":
            return cls.checker(
                MaterialInfo.from_dict(data.get("primary", {})),
                MaterialInfo.from_dict(data.get("secondary", {"color": [0.0, 0.0, 0.0]})),
                float(data.get("scale", 1.0)),
            )
        raise ValueError(f"Unknown texture type: {texture_type}")


def _texture_from_shape_dict(data: dict[str, Any]) -> TextureInfo:
    if "texture" in data:
        return TextureInfo.from_dict(data["texture"])
    return TextureInfo.solid(MaterialInfo.from_dict(data.get("material", {})))


# =============================================================================
# Shapes
# =============================================================================


@dataclass(frozen=True)
class SphereInfo:
    """Sphere description.

    Attributes:
        center: Center point (x, y, z).
        radius: Radius (> 0).
        texture: Procedural texture of the surface.
    """

    center: Vec3Tuple
    radius: float
    texture: TextureInfo

    def __post_init__(self) -> None:
        if self.radius <= 0.0:
            raise ValueError(f"Sphere radius must be positive, got {self.radius}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "sphere",
            "center": list(self.center),
            "radius": self.radius,
            "texture": self.texture.to_dict(),
        }


@dataclass(frozen=True)
class PlaneInfo:
    """Plane description: the points p with dot(normal, p) == distance.

    Attributes:
        normal: Plane normal (non-zero; normalized when uploaded).
        distance: Signed distance from the origin along the unit normal.
        texture: Procedural texture of the surface.
    """

    normal: Vec3Tuple
    distance: float
    texture: TextureInfo

    def __post_init__(self) -> None:
        if all(c == 0.0 for c in self.normal):
            raise ValueError("Plane normal must be non-zero")

    def unit_normal(self) -> Vec3Tuple:
        norm = math.sqrt(sum(c * c for c in self.normal))
        return (self.normal[0] / norm, self.normal[1] / norm, self.normal[2] / norm)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "plane",
            "normal": list(self.normal),
            "distance": self.distance,
            "texture": self.texture.to_dict(),
        }


ShapeInfo = Union[SphereInfo, PlaneInfo]


def shape_from_dict(data: dict[str, Any]) -> ShapeInfo:
    """Build a shape from its dictionary form.

    Raises:
        ValueError: If the shape type is unknown.
    """
    shape_type = data.get("type", "").lower()
    if shape_type == "sphere":
        return SphereInfo(
            center=_vec3(data.get("center", [0.0, 0.0, 0.0])),
            radius=float(data.get("radius", 1.0)),
            texture=_texture_from_shape_dict(data),
        )
    if shape_type == "plane":
        return PlaneInfo(
            normal=_vec3(data.get("normal", [0.0, 1.0, 0.0])),
            distance=float(data.get("distance", 0.0)),
            texture=_texture_from_shape_dict(data),
        )
    raise ValueError(f"Unknown shape type: {shape_type}")


# =============================================================================
# Lights
# =============================================================================


@dataclass(frozen=True)
class SpotlightInfo:
    """Point light at a position; shadow-tested.

    Attributes:
        position: Light position (x, y, z).
        color: Light color (R, G, B).
    """

    position: Vec3Tuple
    color: Vec3Tuple

    def to_dict(self) -> dict[str, Any]:
        return {"type": "spot", "position": list(self.position), "color": list(self.color)}


@dataclass(frozen=True)
class DirectionalLightInfo:
    """Light arriving from a fixed direction; never shadow-tested.

    Attributes:
        direction: Direction the light travels (x, y, z).
        color: Light color (R, G, B).
    """

    direction: Vec3Tuple
    color: Vec3Tuple

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "directional",
            "direction": list(self.direction),
            "color": list(self.color),
        }


LightInfo = Union[SpotlightInfo, DirectionalLightInfo]


def light_from_dict(data: dict[str, Any]) -> LightInfo:
    """Build a light from its dictionary form.

    Raises:
        ValueError: If the light type is unknown.
    """
    light_type = data.get("type", "").lower()
    color = _vec3(data.get("color", [1.0, 1.0, 1.0]))
    if light_type in ("spot", "spotlight"):
        return SpotlightInfo(position=_vec3(data.get("position", [0.0, 0.0, 0.0])), color=color)
    if light_type == "directional":
        return DirectionalLightInfo(
            direction=_vec3(data.get("direction", [0.0, 1.0, 0.0])), color=color
        )
    raise ValueError(f"Unknown light type: {light_type}")


# =============================================================================
# Scene
# =============================================================================


@dataclass(frozen=True)
class SceneConfig:
    """Complete, immutable scene description.

    Attributes:
        shapes: Spheres and planes in the scene.
        lights: Spotlights and directional lights.
        ambient: Ambient light color added to every hit.
        background: Color of rays that hit nothing.
    """

    shapes: tuple[ShapeInfo, ...] = field(default_factory=tuple)
    lights: tuple[LightInfo, ...] = field(default_factory=tuple)
    ambient: Vec3Tuple = (0.0, 0.0, 0.0)
    background: Vec3Tuple = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        # Accept lists from callers while keeping the stored value immutable
        object.__setattr__(self, "shapes", tuple(self.shapes))
        object.__setattr__(self, "lights", tuple(self.lights))

    def to_dict(self) -> dict[str, Any]:
        """Export the scene to a dictionary (for JSON serialization)."""
        return {
            "ambient": list(self.ambient),
            "background": list(self.background),
            "shapes": [shape.to_dict() for shape in self.shapes],
            "lights": [light.to_dict() for light in self.lights],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SceneConfig:
        """Load a scene from a dictionary.

        Raises:
            ValueError: If the dictionary contains invalid data.
        """
        return cls(
            shapes=tuple(shape_from_dict(s) for s in data.get("shapes", [])),
            lights=tuple(light_from_dict(light) for light in data.get("lights", [])),
            ambient=_vec3(data.get("ambient", [0.0, 0.0, 0.0])),
            background=_vec3(data.get("background", [0.0, 0.0, 0.0])),
        )


def load_scene_file(path: str | Path) -> tuple[SceneConfig, View | None]:
    """Read a scene (and optional view) from a JSON file.

    The file holds either a scene dictionary directly, or an object with a
    ``"scene"`` key and an optional ``"view"`` key.

    Args:
        path: Path of the JSON file.

    Returns:
        The scene and the view, or None when the file has no view.

    Raises:
        ValueError: If the file contents are not a valid scene.
    """
    from src.glint.camera.view import View

    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Scene file must contain a JSON object: {path}")

    scene_data = data.get("scene", data)
    view = View.from_dict(data["view"]) if "view" in data else None
    return SceneConfig.from_dict(scene_data), view


def save_scene_file(config: SceneConfig, path: str | Path, view: View | None = None) -> None:
    """Write a scene (and optional view) to a JSON file."""
    data: dict[str, Any] = {"scene": config.to_dict()}
    if view is not None:
        data["view"] = view.to_dict()

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
