"""Reference scene configuration.

The reference scene is a small still life used by the CLI and the end-to-end
tests:

- a shiny red ground plane at y = 50 (below the camera, since +Y is down)
- a semi-shiny green sphere on the left
- a larger black-and-white checkered sphere on the right
- two white-ish spotlights above the scene
- a dim grey ambient term and a black background

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu, default_fp=ti.f64)
    >>> from src.glint.scene.manager import SceneManager
    >>> from src.glint.scene.reference import create_reference_scene, create_reference_view
    >>>
    >>> scene = SceneManager(create_reference_scene())
    >>> view = create_reference_view()
"""

from dataclasses import dataclass

from src.glint.camera.view import View
from src.glint.scene.description import (
    MaterialInfo,
    PlaneInfo,
    SceneConfig,
    SphereInfo,
    SpotlightInfo,
    TextureInfo,
)


@dataclass
class ReferenceSceneParams:
    """Parameters for customizing the reference scene.

    Attributes:
        key_light_color: Color of the spotlight at (-100, -200, -50).
        fill_light_color: Color of the spotlight at (150, -150, 0).
        ambient: Ambient light color.
        background: Background color.
        ground_color: Color of the ground plane.
        sphere_color: Color of the solid sphere.
        checker_colors: Colors of the checkered sphere's two cell kinds.

    Example:
        >>> params = ReferenceSceneParams(ground_color=(0.2, 0.2, 0.8))
        >>> config = create_reference_scene(params)
    """

    key_light_color: tuple[float, float, float] = (0.9, 0.9, 0.9)
    fill_light_color: tuple[float, float, float] = (0.8, 0.8, 0.85)
    ambient: tuple[float, float, float] = (0.1, 0.1, 0.1)
    background: tuple[float, float, float] = (0.0, 0.0, 0.0)
    ground_color: tuple[float, float, float] = (1.0, 0.0, 0.0)
    sphere_color: tuple[float, float, float] = (0.0, 1.0, 0.0)
    checker_colors: tuple[tuple[float, float, float], tuple[float, float, float]] = (
        (1.0, 1.0, 1.0),
        (0.0, 0.0, 0.0),
    )


def create_reference_scene(params: ReferenceSceneParams | None = None) -> SceneConfig:
    """Create the reference scene description.

    Args:
        params: Optional overrides; defaults reproduce the reference scene.

    Returns:
        The scene configuration (upload it with SceneManager to render).
    """
    if params is None:
        params = ReferenceSceneParams()

    # Shiny red ground, the plane y = 50
    ground = PlaneInfo(
        normal=(0.0, 1.0, 0.0),
        distance=50.0,
        texture=TextureInfo.solid(
            MaterialInfo(color=params.ground_color, reflectivity=0.5, diffuseness=0.8)
        ),
    )

    green_sphere = SphereInfo(
        center=(-40.0, 20.0, 120.0),
        radius=30.0,
        texture=TextureInfo.solid(
            MaterialInfo(color=params.sphere_color, reflectivity=0.3, diffuseness=0.6)
        ),
    )

    light_cells, dark_cells = params.checker_colors
    checker_sphere = SphereInfo(
        center=(40.0, 0.0, 150.0),
        radius=50.0,
        texture=TextureInfo.checker(
            MaterialInfo(color=light_cells, reflectivity=0.0, diffuseness=0.5),
            MaterialInfo(color=dark_cells, reflectivity=0.0, diffuseness=0.5),
            scale=20.0,
        ),
    )

    return SceneConfig(
        shapes=(ground, green_sphere, checker_sphere),
        lights=(
            SpotlightInfo(position=(-100.0, -200.0, -50.0), color=params.key_light_color),
            SpotlightInfo(position=(150.0, -150.0, 0.0), color=params.fill_light_color),
        ),
        ambient=params.ambient,
        background=params.background,
    )


def create_reference_view() -> View:
    """Camera looking down +Z at the reference scene."""
    return View(
        position=(0.0, 0.0, -100.0),
        view_distance=250.0,
        look_at=(0.0, 0.0, 100.0),
        up=(0.0, -1.0, 0.0),
    )
