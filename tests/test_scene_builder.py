from raytracer.hittable import MaterialKind
from raytracer.scene_builder import build_demo_scene
from raytracer.vector import Interval, Ray, Vector

RANGE = Interval(0.001, 1000.0)


def test_demo_scene_contents():
    scene = build_demo_scene()
    assert len(scene) == 4
    assert [s.material.kind for s in scene] == [
        MaterialKind.DIFFUSE,
        MaterialKind.GLASS,
        MaterialKind.METALLIC,
        MaterialKind.DIFFUSE,
    ]


def test_ground_sphere():
    ground = build_demo_scene()[0]
    assert ground.center == Vector(0.0, -100.5, -1.0)
    assert ground.radius == 100.0
    assert ground.material.albedo == Vector(1.0, 0.2, 0.2)


def test_glass_sphere_constant():
    glass = build_demo_scene()[1]
    assert glass.material.constant == 1.5
    assert glass.center == Vector(0.55, 0.0, -1.0)


def test_looking_down_hits_ground():
    scene = build_demo_scene()
    index, record = scene.hit(Ray(Vector(0.0, 0.0, 0.0), Vector(0.0, -1.0, 0.0)), RANGE)
    assert index == 0
    assert record.front_face is True


def test_looking_at_glass_sphere_hits_it():
    scene = build_demo_scene()
    index, _ = scene.hit(Ray(Vector(0.0, 0.0, 0.0), Vector(0.55, 0.0, -1.0)), RANGE)
    assert scene[index].material.kind is MaterialKind.GLASS


def test_each_call_builds_fresh_scene():
    first = build_demo_scene()
    second = build_demo_scene()
    first.add(first[0])
    assert len(first) == 5
    assert len(second) == 4