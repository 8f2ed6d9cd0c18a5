"""Scene module for scene description, upload and ray queries.

Components:
    description: Host-side scene dataclasses and JSON (de)serialization
    manager: SceneManager uploading a description into Taichi fields
    intersection: Closest-hit and occlusion queries over all shapes
    reference: The built-in reference scene and view
"""

from .description import (
    DirectionalLightInfo,
    LightInfo,
    MaterialInfo,
    PlaneInfo,
    SceneConfig,
    ShapeInfo,
    SphereInfo,
    SpotlightInfo,
    TextureInfo,
    light_from_dict,
    load_scene_file,
    save_scene_file,
    shape_from_dict,
)
from .intersection import SceneHit, intersect_scene, occluded_before
from .manager import SceneManager
from .reference import ReferenceSceneParams, create_reference_scene, create_reference_view

__all__ = [
    "MaterialInfo",
    "TextureInfo",
    "SphereInfo",
    "PlaneInfo",
    "ShapeInfo",
    "SpotlightInfo",
    "DirectionalLightInfo",
    "LightInfo",
    "SceneConfig",
    "shape_from_dict",
    "light_from_dict",
    "load_scene_file",
    "save_scene_file",
    "SceneManager",
    "SceneHit",
    "intersect_scene",
    "occluded_before",
    "ReferenceSceneParams",
    "create_reference_scene",
    "create_reference_view",
]
