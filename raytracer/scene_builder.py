"""Construction of the demo scene."""

from __future__ import annotations

from raytracer.hittable import Material, MaterialKind, Sphere
from raytracer.scene import Scene
from raytracer.vector import Vector


def build_demo_scene() -> Scene:
    """A red ground, a glass, a metal and a red diffuse sphere."""
    red = Vector(1.0, 0.2, 0.2)
    blue = Vector(0.2, 0.2, 1.0)
    white = Vector(1.0, 1.0, 1.0)

    diffuse_red = Material(MaterialKind.DIFFUSE, red, 0.0)
    metal_blue = Material(MaterialKind.METALLIC, blue, 0.0)
    glass_white = Material(MaterialKind.GLASS, white, 1.5)

    scene = Scene()
    scene.add(Sphere(Vector(0.0, -100.5, -1.0), 100.0, diffuse_red))
    scene.add(Sphere(Vector(0.55, 0.0, -1.0), 0.5, glass_white))
    scene.add(Sphere(Vector(0.1, 0.0, -1.5), 0.5, metal_blue))
    scene.add(Sphere(Vector(-0.5, 0.0, -2.0), 0.5, diffuse_red))
    return scene