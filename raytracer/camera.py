"""Camera model: ray generation, ray colouring and image rendering."""

from __future__ import annotations

import math
import sys
import time
from dataclasses import dataclass, field
from typing import Callable

from raytracer.hittable import MaterialKind
from raytracer.rng import RandomSource, default_generator, set_seed
from raytracer.scatter import scatter_diffuse, scatter_glass, scatter_metallic
from raytracer.scene import Scene
from raytracer.vector import Interval, Ray, Vector, random_in_unit_disk

PixelSetter = Callable[[int, int, Vector], None]

_BLACK = Vector(0.0, 0.0, 0.0)
_WHITE = Vector(1.0, 1.0, 1.0)
_SKY_TOP = Vector(0.5, 0.7, 1.0)
_SKY_BOTTOM = Vector(1.0, 1.0, 1.0)
_HIT_INTERVAL = Interval(0.001, 1000.0)


def background_colour(ray: Ray) -> Vector:
    """Vertical sky gradient seen by a ray that hits nothing."""
    unit_dir = ray.direction.unit()
    a = 0.5 * (unit_dir.y + 1.0)
    return _SKY_BOTTOM * (1.0 - a) + _SKY_TOP * a


@dataclass
class CameraTransform:
    """Position and orientation of the camera plus its derived basis."""

    position: Vector = field(default_factory=lambda: Vector(0.0, 0.0, 0.0))
    facing: Vector = field(default_factory=lambda: Vector(0.0, 0.0, -1.0))
    v_up: Vector = field(default_factory=lambda: Vector(0.0, 1.0, 0.0))
    u: Vector = field(default_factory=lambda: Vector(0.0, 0.0, 0.0))
    v: Vector = field(default_factory=lambda: Vector(0.0, 0.0, 0.0))
    w: Vector = field(default_factory=lambda: Vector(0.0, 0.0, 0.0))


class Camera:
    """A thin-lens camera that renders a scene pixel by pixel."""

    def __init__(
        self,
        screen_width: int,
        screen_height: int,
        rng: RandomSource | None = None,
    ) -> None:
        if rng is None:
            set_seed(int(time.time()))
            rng = default_generator()
        self.rng = rng
        self.transform = CameraTransform()
        self.aspect_ratio = screen_width / screen_height
        self.samples_per_pixel = 200
        self.max_ray_bounces = 75
        self.fov_radians = math.pi / 2.0
        self.focus_distance = 1.5
        self.defocus_angle = 0.1
        self.calculate_matrices(screen_width, screen_height)

    def calculate_matrices(self, screen_width: int, screen_height: int) -> None:
        """Recompute the viewport and basis vectors from the current settings."""
        width = float(screen_width)
        height = float(screen_height)
        tr = self.transform

        self.vp_height = 2.0 * math.tan(self.fov_radians / 2.0) * self.focus_distance
        self.vp_width = self.vp_height * (width / height)

        tr.w = (tr.facing * -1.0).unit()
        tr.u = tr.v_up.cross(tr.w).unit()
        tr.v = tr.w.cross(tr.u)

        self.vp_u = tr.u * self.vp_width
        self.vp_v = tr.v * -self.vp_height

        self.pixel_delta_u = self.vp_u / width
        self.pixel_delta_v = self.vp_v / height

        offset = tr.w * self.focus_distance + (self.vp_u / 2.0 + self.vp_v / 2.0)
        self.pixel_0_pos = (tr.position - offset) + (
            self.pixel_delta_u + self.pixel_delta_v
        ) / 2.0

        self.defocus_disk_u = tr.u * self.defocus_angle
        self.defocus_disk_v = tr.v * self.defocus_angle

    def get_ray(self, col: int, row: int) -> Ray:
        """A jittered ray through pixel (col, row) from a point on the lens."""
        sx = self.rng.random() - 0.5
        sy = self.rng.random() - 0.5
        pixel_sample = (
            self.pixel_delta_u * (col + sx)
            + self.pixel_delta_v * (row + sy)
            + self.pixel_0_pos
        )
        if self.defocus_angle <= 0.0:
            origin = self.transform.position
        else:
            disk = random_in_unit_disk(self.rng)
            origin = (
                self.defocus_disk_u * disk.x
                + self.defocus_disk_v * disk.y
                + self.transform.position
            )
        return Ray(origin, pixel_sample - origin)

    def ray_colour(self, ray: Ray, scene: Scene, max_bounces: int) -> Vector:
        """Colour carried back along ``ray`` after at most ``max_bounces`` bounces."""
        throughput = _WHITE
        for _ in range(max_bounces):
            found = scene.hit(ray, _HIT_INTERVAL)
            if found is None:
                return throughput.hadamard(background_colour(ray))
            index, record = found
            material = scene[index].material
            if material.kind is MaterialKind.DIFFUSE:
                direction = scatter_diffuse(record.normal, self.rng)
            elif material.kind is MaterialKind.METALLIC:
                direction = scatter_metallic(ray.direction, record.normal)
            elif material.kind is MaterialKind.GLASS:
                direction = scatter_glass(
                    ray.direction,
                    record.normal,
                    record.front_face,
                    material.constant,
                    self.rng,
                )
            else:
                return throughput.hadamard(background_colour(ray))
            throughput = throughput.hadamard(record.attenuation)
            ray = Ray(record.p, direction)
        return _BLACK

    def _pixel_colour(self, scene: Scene, col: int, row: int) -> Vector:
        samples = self.samples_per_pixel
        total = sum(
            (
                self.ray_colour(self.get_ray(col, row), scene, self.max_ray_bounces)
                for _ in range(samples)
            ),
            _BLACK,
        )
        return total / float(samples)

    def render_section(
        self,
        set_pixel: PixelSetter,
        scene: Scene,
        start_x: int,
        start_y: int,
        end_x: int,
        end_y: int,
    ) -> None:
        """Render the rectangle [start_x, end_x) x [start_y, end_y)."""
        for row in range(start_y, end_y):
            for col in range(start_x, end_x):
                set_pixel(col, row, self._pixel_colour(scene, col, row))

    def render(
        self,
        set_pixel: PixelSetter,
        scene: Scene,
        screen_width: int,
        screen_height: int,
    ) -> None:
        """Render the whole image, reporting remaining scanlines on stdout."""
        for row in range(screen_height):
            sys.stdout.write(f"\rscanlines remaining: {screen_height - row - 1}  ")
            sys.stdout.flush()
            for col in range(screen_width):
                set_pixel(col, row, self._pixel_colour(scene, col, row))
        sys.stdout.write("\rrender complete         \n")
        sys.stdout.flush()