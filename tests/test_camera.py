import math

import pytest

from raytracer.camera import Camera, CameraTransform, background_colour
from raytracer.hittable import Material, MaterialKind, Sphere
from raytracer.rng import Xoshiro256Plus
from raytracer.scene import Scene
from raytracer.vector import Ray, Vector


@pytest.fixture
def camera() -> Camera:
    return Camera(20, 10, Xoshiro256Plus(7))


def test_defaults(camera):
    assert camera.samples_per_pixel == 200
    assert camera.max_ray_bounces == 75
    assert camera.fov_radians == pytest.approx(math.pi / 2.0)
    assert camera.focus_distance == pytest.approx(1.5)
    assert camera.defocus_angle == pytest.approx(0.1)
    assert camera.aspect_ratio == pytest.approx(20 / 10)


def test_transform_defaults():
    tr = CameraTransform()
    assert tr.position == Vector(0.0, 0.0, 0.0)
    assert tr.facing == Vector(0.0, 0.0, -1.0)
    assert tr.v_up == Vector(0.0, 1.0, 0.0)


def test_basis_is_orthonormal(camera):
    tr = camera.transform
    assert (tr.w.x, tr.w.y, tr.w.z) == pytest.approx((0.0, 0.0, 1.0), abs=1e-9)
    assert (tr.u.x, tr.u.y, tr.u.z) == pytest.approx((1.0, 0.0, 0.0), abs=1e-9)
    assert (tr.v.x, tr.v.y, tr.v.z) == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)
    assert tr.u.dot(tr.v) == pytest.approx(0.0)


def test_viewport_aspect_follows_screen(camera):
    assert camera.vp_width / camera.vp_height == pytest.approx(2.0)
    assert camera.vp_height == pytest.approx(3.0)


def test_pixel_grid_is_centred_on_focus_point(camera):
    centre = camera.pixel_0_pos + (
        camera.pixel_delta_u * 19 + camera.pixel_delta_v * 9
    ) / 2.0
    # default position is the origin, facing -z, focus distance 1.5
    assert (centre.x, centre.y, centre.z) == pytest.approx((0.0, 0.0, -1.5), abs=1e-9)


def test_get_ray_without_defocus_starts_at_position(camera):
    camera.defocus_angle = 0.0
    camera.calculate_matrices(20, 10)
    ray = camera.get_ray(3, 4)
    assert ray.origin == camera.transform.position
    target = ray.origin + ray.direction
    pixel_centre = camera.pixel_0_pos + camera.pixel_delta_u * 3 + camera.pixel_delta_v * 4
    offset = target - pixel_centre
    assert abs(offset.x) <= camera.pixel_delta_u.length() / 2 + 1e-12
    assert abs(offset.y) <= camera.pixel_delta_v.length() / 2 + 1e-12


def test_get_ray_with_defocus_stays_on_lens(camera):
    for _ in range(50):
        ray = camera.get_ray(0, 0)
        assert ray.origin.length() < camera.defocus_angle + 1e-12


def test_background_straight_up_and_down():
    up = background_colour(Ray(Vector(0, 0, 0), Vector(0, 1, 0)))
    down = background_colour(Ray(Vector(0, 0, 0), Vector(0, -1, 0)))
    assert (up.x, up.y, up.z) == pytest.approx((0.5, 0.7, 1.0))
    assert (down.x, down.y, down.z) == pytest.approx((1.0, 1.0, 1.0))


def test_ray_colour_without_bounces_is_black(camera):
    ray = Ray(Vector(0, 0, 0), Vector(0, 0, -1))
    assert camera.ray_colour(ray, Scene(), 0) == Vector(0.0, 0.0, 0.0)


def test_ray_colour_empty_scene_is_background(camera):
    # straight ahead: unit y is 0, so the blend is halfway
    ray = Ray(Vector(0, 0, 0), Vector(0, 0, -1))
    colour = camera.ray_colour(ray, Scene(), 5)
    assert (colour.x, colour.y, colour.z) == pytest.approx((0.75, 0.85, 1.0))


def test_ray_colour_metallic_reflection(camera):
    albedo = Vector(0.2, 0.4, 0.8)
    scene = Scene()
    scene.add(Sphere(Vector(0, 0, -2), 0.5, Material(MaterialKind.METALLIC, albedo)))
    ray = Ray(Vector(0, 0, 0), Vector(0, 0, -1))
    colour = camera.ray_colour(ray, scene, 10)
    # reflected ray points along +z, whose background is (0.75, 0.85, 1.0)
    assert (colour.x, colour.y, colour.z) == pytest.approx((0.15, 0.34, 0.8))


def test_render_section_covers_region_once(camera):
    camera.samples_per_pixel = 2
    calls = []
    camera.render_section(lambda x, y, c: calls.append((x, y, c)), Scene(), 2, 1, 5, 3)
    coords = [(x, y) for x, y, _ in calls]
    assert sorted(coords) == sorted((x, y) for x in range(2, 5) for y in range(1, 3))
    colours = [c for _, _, c in calls]
    assert len(colours) == 6
    assert all(0.5 <= c.x <= 1.0 for c in colours)
    assert all(0.7 <= c.y <= 1.0 for c in colours)
    assert [c.z for c in colours] == pytest.approx([1.0] * 6)


def test_render_covers_image_and_reports(camera, capsys):
    camera.samples_per_pixel = 1
    seen = set()
    camera.render(lambda x, y, c: seen.add((x, y)), Scene(), 4, 3)
    assert seen == {(x, y) for x in range(4) for y in range(3)}
    out = capsys.readouterr().out
    assert "scanlines remaining: 0" in out
    assert out.endswith("render complete         \n")