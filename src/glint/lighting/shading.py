"""Local shading model: ambient, Lambertian diffuse and hard shadows.

For an intersection with material m and normal n, each light contributes

    combine(m.color, light.color) * diffuse_coefficient(l, n) * m.diffuseness

where l is the light direction (the directional light's vector, or
hit_point - light_position for a spotlight). Spotlight contributions are zero
when the hit point is in shadow. Directional lights are never shadowed.

The global (reflected) term lives in the integrator, which recurses back into
the ray tracer.
"""

import taichi as ti

from src.glint.core.ray import make_ray
from src.glint.core.vector import (
    Color,
    Real,
    black,
    combine,
    dot,
    length,
    normalize,
    scale_color,
    vec3,
)
from src.glint.geometry.shape import Intersection
from src.glint.lighting.light import Light, LightKind
from src.glint.scene.intersection import occluded_before


@ti.func
def is_lit(scene: ti.template(), point: vec3, light_position: vec3) -> ti.i32:
    """Test whether a point can see a light position.

    A shadow ray is cast from the point toward the light. Hits at or below
    EPSILON are discarded by the intersection engine, so the surface the
    point lies on does not shadow itself.

    Args:
        scene: The SceneManager providing the occluders.
        point: The surface point being shaded.
        light_position: Position of the spotlight.

    Returns:
        1 if no shape is hit before the light, 0 otherwise.
    """
    to_light = light_position - point
    shadow_ray = make_ray(point, normalize(to_light))
    return 1 - occluded_before(scene, shadow_ray, length(to_light))


@ti.func
def diffuse_coefficient(light_direction: vec3, normal: vec3) -> Real:
    """Lambertian term, zero for surfaces facing away from the light."""
    return ti.max(0.0, -dot(normalize(light_direction), normalize(normal)))


@ti.func
def _diffuse(intersection: Intersection, light_direction: vec3, light_color: Color) -> Color:
    material = intersection.material
    coefficient = diffuse_coefficient(light_direction, intersection.normal)
    return scale_color(
        combine(material.color, light_color), coefficient * material.diffuseness
    )


@ti.func
def local_light(scene: ti.template(), intersection: Intersection, light: Light) -> Color:
    """Diffuse contribution of a single light at an intersection.

    Args:
        scene: The SceneManager used for shadow tests.
        intersection: The surface hit being shaded.
        light: The light to evaluate.

    Returns:
        The light's diffuse color contribution (black if shadowed).
    """
    result = black()
    if light.kind == int(LightKind.DIRECTIONAL):
        result = _diffuse(intersection, light.vector, light.color)
    elif light.kind == int(LightKind.SPOT):
        if is_lit(scene, intersection.point, light.vector) == 1:
            result = _diffuse(intersection, intersection.point - light.vector, light.color)
    return result


@ti.func
def local_lighting(scene: ti.template(), intersection: Intersection) -> Color:
    """Ambient light plus the diffuse contribution of every light."""
    total = scene.ambient[None]
    for i in range(scene.light_count):
        total += local_light(scene, intersection, scene.lights[i])
    return total


@ti.func
def reflect_direction(normal: vec3, incoming: vec3) -> vec3:
    """Mirror an incoming direction about a unit normal.

    With d' = -incoming, the reflected direction is 2 * dot(n, d') * n - d'.
    """
    d = -incoming
    return 2.0 * dot(normal, d) * normal - d
