"""Scattering of rays off diffuse, metallic and glass surfaces."""

from __future__ import annotations

import math

from raytracer.rng import RandomSource, default_generator
from raytracer.vector import Vector, random_unit_vector


def scatter_diffuse(normal: Vector, rng: RandomSource | None = None) -> Vector:
    """Lambertian bounce direction about ``normal``."""
    direction = normal + random_unit_vector(rng)
    if direction.near_zero():
        return normal
    return direction


def scatter_metallic(incoming: Vector, normal: Vector) -> Vector:
    """Mirror reflection of ``incoming``."""
    return incoming.reflect(normal)


def scatter_glass(
    incoming: Vector,
    normal: Vector,
    front_face: bool,
    constant: float,
    rng: RandomSource | None = None,
) -> Vector:
    """Reflect or refract through a dielectric with refractive index ``constant``."""
    src = rng if rng is not None else default_generator()
    if front_face:
        constant = 1.0 / constant
    unit_dir = incoming.unit()
    cos_theta = min((-unit_dir).dot(normal), 1.0)
    sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

    r0 = ((1.0 - constant) / (1.0 + constant)) ** 2
    reflectance = r0 + (1.0 - r0) * (1.0 - cos_theta) ** 5

    if constant * sin_theta > 1.0 or reflectance > src.random():
        return unit_dir.reflect(normal)
    return unit_dir.refract(normal, constant)