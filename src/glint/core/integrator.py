"""Whitted-style integrator with depth-bounded mirror reflection.

The color seen along a ray is computed recursively:

    raytrace(depth, ray):
        background                              if nothing is hit
        overall_lighting(depth, closest hit)    otherwise

    overall_lighting(depth, hit):
        clamp(local_lighting(hit) + reflected_color(depth, hit))
        where the reflected term is only added while depth < MAX_REFLECTION_DEPTH

    reflected_color(depth, hit):
        black                                   if diffuseness == 0
        raytrace(depth + 1, mirrored ray) * diffuseness   otherwise

Taichi functions cannot recurse at run time, so ``depth`` is a compile-time
template argument and the recursion is unrolled when the kernel is compiled.
A pixel path casts at most MAX_REFLECTION_DEPTH + 1 rays.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu, default_fp=ti.f64)
    >>> from src.glint.core.integrator import render
    >>> from src.glint.scene.manager import SceneManager
    >>> from src.glint.scene.reference import create_reference_scene, create_reference_view
    >>> scene = SceneManager(create_reference_scene())
    >>> colors = render(scene, create_reference_view(), 64, 64)  # (4096, 3)
"""

import numpy as np
import numpy.typing as npt
import taichi as ti

from src.glint.camera.projection import CameraFrame, Projection, project
from src.glint.camera.view import View
from src.glint.core.ray import Ray, make_ray
from src.glint.core.vector import Color, black, clamp_color, scale_color, vec3
from src.glint.geometry.shape import Intersection
from src.glint.lighting.shading import local_lighting, reflect_direction
from src.glint.scene.intersection import intersect_scene

# Reflection bounces after which no reflected color is computed
MAX_REFLECTION_DEPTH = 2


@ti.func
def raytrace(scene: ti.template(), depth: ti.template(), ray: Ray) -> Color:
    """Color seen along a ray.

    Args:
        scene: The SceneManager to trace against.
        depth: Reflection bounce count (compile-time constant, 0 for
            primary rays).
        ray: The ray to trace.

    Returns:
        The scene background if nothing is hit, otherwise the clamped
        lighting at the closest hit.
    """
    color = scene.background[None]
    scene_hit = intersect_scene(scene, ray)
    if scene_hit.hit == 1:
        color = overall_lighting(scene, depth, scene_hit.intersection)
    return color


@ti.func
def reflected_color(scene: ti.template(), depth: ti.template(), intersection: Intersection) -> Color:
    """Color arriving along the mirror reflection of the incoming ray.

    The reflected ray starts on the surface; the EPSILON cutoff in the
    intersection engine prevents it from hitting its own origin.
    """
    color = black()
    material = intersection.material
    if material.diffuseness != 0.0:
        direction = reflect_direction(intersection.normal, intersection.ray.direction)
        reflected = raytrace(scene, depth + 1, make_ray(intersection.point, direction))
        color = scale_color(reflected, material.diffuseness)
    return color


@ti.func
def overall_lighting(scene: ti.template(), depth: ti.template(), intersection: Intersection) -> Color:
    """Local plus (depth-bounded) global lighting, clamped to [0, 1]."""
    color = local_lighting(scene, intersection)
    if ti.static(depth < MAX_REFLECTION_DEPTH):
        color += reflected_color(scene, depth, intersection)
    return clamp_color(color)


# =============================================================================
# Render Kernel
# =============================================================================


@ti.kernel
def render_points(
    scene: ti.template(),
    position: vec3,
    direction: vec3,
    points: ti.types.ndarray(dtype=vec3, ndim=1),
    colors: ti.types.ndarray(dtype=vec3, ndim=1),
    projection: ti.template(),
):
    """Trace one primary ray per image-plane point.

    Points and colors are ndarrays, so the kernel is compiled once per
    scene and projection mode regardless of image size. The loop over points
    is parallelized by Taichi; each iteration writes only its own slot of
    ``colors``, so raster order is preserved.

    Args:
        scene: The SceneManager to render.
        position: Camera position.
        direction: Unit view direction.
        points: Image-plane points in raster order.
        colors: Receives one color per point, clamped to [0, 1].
        projection: Projection mode (int value of Projection).
    """
    for k in range(points.shape[0]):
        frame = CameraFrame(position=position, view_direction=direction)
        ray = project(frame, points[k], projection)
        colors[k] = clamp_color(raytrace(scene, 0, ray))


def render(
    scene,
    view: View,
    width: int,
    height: int,
    projection: Projection = Projection.PERSPECTIVE,
) -> npt.NDArray[np.float64]:
    """Render a scene to a flat sequence of colors.

    Args:
        scene: The SceneManager to render.
        view: The camera view.
        width: Image width in pixels.
        height: Image height in pixels.
        projection: Projection mode (default perspective).

    Returns:
        Array of shape (width * height, 3) in raster order (row-major, top
        row first), each channel in [0, 1].

    Raises:
        ValueError: If width or height is not positive.
    """
    from src.glint.core.renderer import Renderer

    renderer = Renderer(width, height)
    renderer.render(scene, view, projection)
    return renderer.get_colors_numpy()

