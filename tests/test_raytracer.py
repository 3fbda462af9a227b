from pyraycast.colour import GREEN, RED, RGB
from pyraycast.geometry import Ray, Sphere
from pyraycast.materials import Light, Material
from pyraycast.raytracer import canvas_to_viewport, trace_ray
from pyraycast.scene import Scene
from pyraycast.vector import Vec3


def _scene(center=Vec3(0, 0, 5), radius=1.0, material=Material(RED, -1, 0.3)):
    scene = Scene()
    scene.add_sphere(Sphere(center, radius), material)
    scene.add_light(Light.ambient(0.5))
    scene.build_bvh()
    return scene


def test_canvas_centre_maps_to_axis():
    assert canvas_to_viewport(256, 256, 512, 512) == Vec3(0.0, 0.0, 1.0)


def test_canvas_corner():
    assert canvas_to_viewport(0, 0, 512, 512) == Vec3(-0.5, -0.5, 1.0)


def test_canvas_divides_both_axes_by_width():
    assert canvas_to_viewport(0, 0, 200, 100) == Vec3(-0.5, -0.25, 1.0)


def test_miss_is_white():
    ray = Ray(Vec3(), Vec3(0, 1, 0))
    assert trace_ray(ray, _scene(), 3) == RGB(255, 255, 255)


def test_hit_is_colour_scaled_by_lighting():
    ray = Ray(Vec3(), Vec3(0, 0, 1))
    assert trace_ray(ray, _scene(), 3) == RED.scale(0.5)


def test_depth_does_not_change_result():
    scene = _scene(material=Material(GREEN, -1, 0.4))
    ray = Ray(Vec3(), Vec3(0, 0, 1))
    assert trace_ray(ray, scene, 0) == trace_ray(ray, scene, 3)


def test_hits_nearer_than_viewport_are_ignored():
    scene = _scene(center=Vec3(0, 0, 0.5), radius=0.1)
    ray = Ray(Vec3(), Vec3(0, 0, 1))
    assert trace_ray(ray, scene, 3) == RGB(255, 255, 255)