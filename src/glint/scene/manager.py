"""Kernel-side scene built from a SceneConfig.

The SceneManager uploads a scene description into Taichi struct fields once,
at construction, and is then passed explicitly (as a ``ti.template()``
argument) into every kernel and function that needs the scene. It is never
modified afterwards; build a new manager to render a different scene.

Shape and light counts are plain Python attributes, so loops over them are
sized at compile time.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu, default_fp=ti.f64)
    >>> from src.glint.scene.manager import SceneManager
    >>> from src.glint.scene.reference import create_reference_scene
    >>> scene = SceneManager(create_reference_scene())
    >>> scene.shape_count
    3
"""

import logging
from typing import Any

import taichi as ti

from src.glint.core.vector import Real
from src.glint.geometry.shape import Shape, ShapeKind
from src.glint.lighting.light import Light, LightKind
from src.glint.materials.texture import TextureKind
from src.glint.scene.description import (
    DirectionalLightInfo,
    LightInfo,
    MaterialInfo,
    PlaneInfo,
    SceneConfig,
    ShapeInfo,
    SphereInfo,
    SpotlightInfo,
    TextureInfo,
)

logger = logging.getLogger(__name__)

_BLACK_MATERIAL = MaterialInfo(color=(0.0, 0.0, 0.0), reflectivity=0.0, diffuseness=0.0)


def _write_material(material_field: Any, index: int, material: MaterialInfo) -> None:
    material_field.color[index] = list(material.color)
    material_field.reflectivity[index] = material.reflectivity
    material_field.diffuseness[index] = material.diffuseness


def _write_texture(texture_field: Any, index: int, texture: TextureInfo) -> None:
    texture_field.kind[index] = int(texture.kind)
    texture_field.scale[index] = texture.scale
    _write_material(texture_field.primary, index, texture.primary)
    _write_material(texture_field.secondary, index, texture.secondary or _BLACK_MATERIAL)


@ti.data_oriented
class SceneManager:
    """Immutable kernel-side scene.

    Attributes:
        shape_count: Number of shapes in the scene.
        light_count: Number of lights in the scene.
        shapes: Struct field of Shape (at least one slot).
        lights: Struct field of Light (at least one slot).
        ambient: 0-D vector field holding the ambient color.
        background: 0-D vector field holding the background color.
    """

    def __init__(self, config: SceneConfig) -> None:
        """Upload a scene description.

        Args:
            config: The scene to upload.

        Raises:
            TypeError: If the config holds an unsupported shape or light.
        """
        self._config = config
        self.shape_count = len(config.shapes)
        self.light_count = len(config.lights)

        # Taichi fields cannot have zero size
        self.shapes = Shape.field(shape=max(1, self.shape_count))
        self.lights = Light.field(shape=max(1, self.light_count))
        self.ambient = ti.Vector.field(3, dtype=Real, shape=())
        self.background = ti.Vector.field(3, dtype=Real, shape=())

        for i, shape in enumerate(config.shapes):
            self._write_shape(i, shape)
        for i, light in enumerate(config.lights):
            self._write_light(i, light)
        self.ambient[None] = list(config.ambient)
        self.background[None] = list(config.background)

        logger.debug(
            "Uploaded scene with %d shapes and %d lights", self.shape_count, self.light_count
        )

    def _write_shape(self, index: int, shape: ShapeInfo) -> None:
        if isinstance(shape, SphereInfo):
            self.shapes.kind[index] = int(ShapeKind.SPHERE)
            self.shapes.center[index] = list(shape.center)
            self.shapes.radius[index] = shape.radius
            self.shapes.normal[index] = [0.0, 0.0, 0.0]
            self.shapes.distance[index] = 0.0
        elif isinstance(shape, PlaneInfo):
            self.shapes.kind[index] = int(ShapeKind.PLANE)
            self.shapes.center[index] = [0.0, 0.0, 0.0]
            self.shapes.radius[index] = 0.0
            self.shapes.normal[index] = list(shape.unit_normal())
            self.shapes.distance[index] = shape.distance
        else:
            raise TypeError(f"Unsupported shape: {shape!r}")
        _write_texture(self.shapes.texture, index, shape.texture)

    def _write_light(self, index: int, light: LightInfo) -> None:
        if isinstance(light, SpotlightInfo):
            self.lights.kind[index] = int(LightKind.SPOT)
            self.lights.vector[index] = list(light.position)
        elif isinstance(light, DirectionalLightInfo):
            self.lights.kind[index] = int(LightKind.DIRECTIONAL)
            self.lights.vector[index] = list(light.direction)
        else:
            raise TypeError(f"Unsupported light: {light!r}")
        self.lights.color[index] = list(light.color)

    @property
    def config(self) -> SceneConfig:
        """The scene description this manager was built from."""
        return self._config

    def get_shape_info(self, index: int) -> ShapeInfo:
        return self._config.shapes[index]

    def __repr__(self) -> str:
        return f"SceneManager(shapes={self.shape_count}, lights={self.light_count})"
