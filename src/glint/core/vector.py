"""Vector and color arithmetic for the ray tracer kernels.

Vectors and colors share one Taichi type, a 3-component double-precision
vector. Whether a value is a point, a direction, a normal or an RGB color is a
matter of how the caller uses it.

All functions are ``@ti.func`` and side-effect free, so they can be called from
any kernel.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu, default_fp=ti.f64)
    >>> from src.glint.core.vector import normalize, vec3
    >>> @ti.kernel
    ... def unit_x() -> vec3:
    ...     return normalize(vec3(5.0, 0.0, 0.0))
"""

import taichi as ti

# Scalar type used by every kernel-side struct and function
Real = ti.f64

# 3-component vector; also used for RGB colors
vec3 = ti.types.vector(3, Real)
Color = vec3


@ti.dataclass
class Roots:
    """Real roots of a quadratic equation.

    Attributes:
        count: 0 when the discriminant is negative, otherwise 2.
        plus: The root taken with +sqrt(discriminant).
        minus: The root taken with -sqrt(discriminant).
    """

    count: ti.i32
    plus: Real
    minus: Real


# =============================================================================
# Vector Operations
# =============================================================================


@ti.func
def add(a: vec3, b: vec3) -> vec3:
    return a + b


@ti.func
def sub(a: vec3, b: vec3) -> vec3:
    return a - b


@ti.func
def neg(v: vec3) -> vec3:
    return -v


@ti.func
def scale(v: vec3, s: Real) -> vec3:
    return v * s


@ti.func
def dot(a: vec3, b: vec3) -> Real:
    """Compute the dot product a . b."""
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


@ti.func
def cross(a: vec3, b: vec3) -> vec3:
    """Compute the right-handed cross product a x b."""
    return vec3(
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


@ti.func
def length_squared(v: vec3) -> Real:
    return dot(v, v)


@ti.func
def length(v: vec3) -> Real:
    return ti.sqrt(length_squared(v))


@ti.func
def normalize(v: vec3) -> vec3:
    """Normalize a vector to unit length.

    Args:
        v: The input vector.

    Returns:
        A unit vector in the same direction as v, or the zero vector when v
        has zero magnitude.
    """
    result = vec3(0.0, 0.0, 0.0)
    magnitude = length(v)
    if magnitude != 0.0:
        result = v / magnitude
    return result


# =============================================================================
# Color Operations
# =============================================================================


@ti.func
def black() -> Color:
    return Color(0.0, 0.0, 0.0)


@ti.func
def scale_color(c: Color, s: Real) -> Color:
    return c * s


@ti.func
def add_color(a: Color, b: Color) -> Color:
    return a + b


@ti.func
def combine(a: Color, b: Color) -> Color:
    """Tint one color by another (component-wise product)."""
    return Color(a[0] * b[0], a[1] * b[1], a[2] * b[2])


@ti.func
def clamp_color(c: Color) -> Color:
    """Clamp each channel independently to [0, 1]."""
    return Color(
        ti.min(ti.max(c[0], 0.0), 1.0),
        ti.min(ti.max(c[1], 0.0), 1.0),
        ti.min(ti.max(c[2], 0.0), 1.0),
    )


# =============================================================================
# Quadratic Solver
# =============================================================================


@ti.func
def quadratic_roots(a: Real, b: Real, c: Real) -> Roots:
    """Solve a*t^2 + b*t + c = 0.

    The roots are returned unsorted: ``plus`` holds (-b + sqrt(d)) / 2a and
    ``minus`` holds (-b - sqrt(d)) / 2a.

    Args:
        a: Quadratic coefficient.
        b: Linear coefficient.
        c: Constant term.

    Returns:
        Roots with count 0 for a negative discriminant, otherwise count 2.
    """
    discriminant = b * b - 4.0 * a * c
    result = Roots(count=0, plus=0.0, minus=0.0)
    if discriminant >= 0.0:
        sqrt_d = ti.sqrt(discriminant)
        result = Roots(
            count=2,
            plus=(-b + sqrt_d) / (2.0 * a),
            minus=(-b - sqrt_d) / (2.0 * a),
        )
    return result
