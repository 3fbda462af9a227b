import pytest

from pyraycast.cli import build_demo_scene, main, render
from pyraycast.colour import WHITE
from pyraycast.geometry import Sphere
from pyraycast.materials import Light, LightType, Material
from pyraycast.colour import RED
from pyraycast.scene import Scene
from pyraycast.vector import Vec3


@pytest.fixture
def model_file(tmp_path):
    path = tmp_path / "tri.obj"
    path.write_text(
        "# small model\n"
        "v 0 0 0\n"
        "v 1 0 0\n"
        "v 0 1 0\n"
        "v 1 1 0\n"
        "f 1 2 3\n"
        "f 2 4 3\n",
        encoding="utf-8",
    )
    return path


def test_demo_scene_without_model():
    scene = build_demo_scene(None)
    assert len(scene.objects) == 4
    assert [light.type for light in scene.lights] == [
        LightType.AMBIENT,
        LightType.POINT,
        LightType.DIRECTION,
    ]


def test_demo_scene_with_model(model_file):
    scene = build_demo_scene(model_file)
    assert len(scene.objects) == 6
    xs = [obj.bounds.center.x for obj in scene.objects]
    assert xs == sorted(xs)


def test_demo_scene_missing_model(tmp_path):
    with pytest.raises(OSError):
        build_demo_scene(tmp_path / "nope.obj")


def test_render_empty_scene_is_white():
    image = render(Scene(), 4, 3, 3)
    assert (image.width, image.height) == (4, 3)
    assert all(image[x, y] == WHITE.as_ints() for x in range(4) for y in range(3))


def test_render_sphere_ahead_is_coloured():
    scene = Scene()
    scene.add_sphere(Sphere(Vec3(0, 0, 5), 2), Material(RED, specular=-1, reflective=0))
    scene.add_light(Light.ambient(1.0))
    image = render(scene, 5, 5, 0)
    assert image[2, 2] == RED.as_ints()
    assert image[0, 4] == WHITE.as_ints()


def test_main_writes_image(tmp_path, model_file, capsys):
    out = tmp_path / "img.ppm"
    code = main(
        ["--model", str(model_file), "--width", "4", "--height", "3", "--output", str(out)]
    )
    assert code == 0
    text = out.read_text(encoding="ascii")
    assert text.startswith("P3\n4 3\n255\n")
    assert len(text.split("\n", 3)[3].split()) == 4 * 3 * 3
    assert "Image created!!" in capsys.readouterr().out


def test_main_without_model(tmp_path):
    out = tmp_path / "img.ppm"
    assert main(["--no-model", "--width", "2", "--height", "2", "--output", str(out)]) == 0
    assert out.read_text(encoding="ascii").startswith("P3\n2 2\n")


def test_main_missing_model_fails(tmp_path):
    out = tmp_path / "img.ppm"
    code = main(["--model", str(tmp_path / "none.obj"), "--output", str(out)])
    assert code == 1
    assert not out.exists()


def test_main_unwritable_output_fails(tmp_path):
    out = tmp_path / "missing" / "img.ppm"
    code = main(["--no-model", "--width", "2", "--height", "2", "--output", str(out)])
    assert code == 1


def test_main_rejects_bad_size(tmp_path):
    out = tmp_path / "img.ppm"
    assert main(["--no-model", "--width", "0", "--output", str(out)]) == 2
    assert not out.exists()