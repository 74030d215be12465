"""Materials, hit records and sphere intersection."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from raytracer.vector import Interval, Ray, Vector


class MaterialKind(Enum):
    DIFFUSE = "diffuse"
    METALLIC = "metallic"
    GLASS = "glass"


@dataclass(frozen=True)
class Material:
    """Surface kind, colour and, for glass, the refractive index."""

    kind: MaterialKind
    albedo: Vector
    constant: float = 0.0


@dataclass(frozen=True)
class HitRecord:
    t: float
    p: Vector
    normal: Vector
    attenuation: Vector
    front_face: bool


@dataclass(frozen=True)
class Sphere:
    center: Vector
    radius: float
    material: Material

    def hit(self, ray: Ray, interval: Interval) -> HitRecord | None:
        """Nearest intersection within ``interval``, or None."""
        oc = self.center - ray.origin
        a = ray.direction.length_squared()
        h = ray.direction.dot(oc)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = h * h - a * c
        if discriminant < 0.0:
            return None

        sqrt_d = math.sqrt(discriminant)
        root = (h - sqrt_d) / a
        if not interval.surrounds(root):
            root = (h + sqrt_d) / a
            if not interval.surrounds(root):
                return None

        p = ray.at(root)
        normal = (p - self.center) / self.radius
        front_face = ray.direction.dot(normal) <= 0.0
        if not front_face:
            normal = -normal
        return HitRecord(root, p, normal, self.material.albedo, front_face)