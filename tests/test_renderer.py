import io

import pytest

from particlekit.renderer import Renderer
from particlekit.vec3 import Vec3


def test_draw_vector():
    out = io.StringIO()
    Renderer(out).draw("Particle", Vec3(10, 10, 10))
    assert out.getvalue() == "Particle(10,10,10)\n"


def test_draw_scalar():
    out = io.StringIO()
    Renderer(out).draw("s", 0.5)
    assert out.getvalue() == "s:0.5\n"


def test_draw_chains_and_appends_lines():
    out = io.StringIO()
    renderer = Renderer(out)
    assert renderer.draw("a", Vec3(1, 2, 3)).draw("b", 2) is renderer
    lines = out.getvalue().splitlines()
    assert lines == ["a" + str(Vec3(1, 2, 3)), "b:2"]


def test_draw_defaults_to_stdout(capsys):
    Renderer().draw("Particle", Vec3(1, 2, 3))
    assert capsys.readouterr().out == "Particle" + str(Vec3(1, 2, 3)) + "\n"


def test_draw_rejects_other_values():
    with pytest.raises(TypeError):
        Renderer(io.StringIO()).draw("x", "text")