# tests/render/test_named_render.py
"""
Named Renderer Tests

Jinja2 rendering against mappings, dataclasses, pydantic models and plain
objects; strict failure on missing fields and bad syntax.
"""

from collections import namedtuple
from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from falta.core.errors import ConfigError, RenderError, codes
from falta.core.render import NamedRenderer, record_fields


@dataclass
class Circle:
    Radius: int


class Square(BaseModel):
    side: int


class Plain:
    def __init__(self, name):
        self.name = name


def test_renders_mapping():
    r = NamedRenderer("radius ({{ Radius }}) <= 0")
    assert r.render(({"Radius": -1},)).text == "radius (-1) <= 0"


def test_renders_dotted_field_form():
    r = NamedRenderer("radius ({{.Radius}}) <= 0")
    assert r.render(({"Radius": -1},)).text == "radius (-1) <= 0"


def test_dotted_nested_field():
    r = NamedRenderer("host={{.server.host}}")
    assert r.render(({"server": {"host": "db1"}},)).text == "host=db1"


def test_renders_dataclass_record():
    r = NamedRenderer("invalid circle: radius ({{.Radius}}) <= 0")
    assert r.render((Circle(Radius=-1),)).text == "invalid circle: radius (-1) <= 0"


def test_renders_pydantic_record():
    r = NamedRenderer("side {{ side }} too short")
    assert r.render((Square(side=0),)).text == "side 0 too short"


def test_renders_namedtuple_and_plain_object():
    Point = namedtuple("Point", "x y")
    assert NamedRenderer("{{ x }},{{ y }}").render((Point(1, 2),)).text == "1,2"
    assert NamedRenderer("hi {{ name }}").render((Plain("bo"),)).text == "hi bo"


def test_no_args_renders_raw_spec():
    r = NamedRenderer("radius ({{.Radius}}) <= 0")
    assert r.render(()).text == "radius ({{.Radius}}) <= 0"


def test_extra_records_are_ignored():
    r = NamedRenderer("code={{ code }}")
    assert r.render(({"code": 1}, {"code": 2})).text == "code=1"


def test_missing_field_raises_render_error():
    r = NamedRenderer("radius ({{.Radius}}) <= 0")
    with pytest.raises(RenderError) as exc_info:
        r.render(({"Diameter": 2},))
    assert exc_info.value.error_code == codes.MISSING_FIELD
    assert "Radius" in exc_info.value.message


def test_unsupported_record_raises_render_error():
    r = NamedRenderer("value {{ x }}")
    with pytest.raises(RenderError) as exc_info:
        r.render((42,))
    assert exc_info.value.error_code == codes.UNSUPPORTED_RECORD


def test_invalid_syntax_fails_at_creation():
    with pytest.raises(ConfigError) as exc_info:
        NamedRenderer("radius ({{ Radius ) <= 0")
    assert exc_info.value.error_code == codes.INVALID_SPEC
    assert exc_info.value.is_config


def test_record_fields_rejects_fieldless_values():
    with pytest.raises(TypeError):
        record_fields(3.5)


def test_whole_record_form():
    r = NamedRenderer("invalid value {{.}}")
    assert r.render((42,)).text == "invalid value 42"
    assert r.render(("abc",)).text == "invalid value abc"


def test_whole_record_with_fields():
    r = NamedRenderer("{{ . }}: code={{.code}}")
    record = {"code": 7}
    assert r.render((record,)).text == "{'code': 7}: code=7"
    assert record == {"code": 7}
