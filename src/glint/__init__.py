"""glint: a Taichi-based Whitted-style ray tracer.

This package renders scenes made of analytic shapes (spheres, planes) lit by
spot and directional lights, with:
- Ambient and Lambertian diffuse lighting
- Hard shadows from spotlights
- Mirror reflection bounded at two bounces
- Procedural (checkerboard) textures

Subpackages:
    core: Vector/color arithmetic, rays, the recursive integrator and renderer
    geometry: Shape tagged union and ray-shape intersection
    materials: Materials and procedural textures
    lighting: Light tagged union and the local shading model
    scene: Host-side scene descriptions and the kernel-side scene manager
    camera: View configuration, pixel grid and ray projections
    preview: Image export and Matplotlib preview

Kernels expect double precision; initialize Taichi with
``ti.init(arch=..., default_fp=ti.f64)`` before importing the subpackages.
"""

__version__ = "0.1.0"
