# tests/factory/test_factory.py
"""
Factory Tests

Construction, archetype errors and dialect dispatch.
"""

from dataclasses import dataclass

import pytest

import falta
from falta import ConfigError, Dialect, Falta, NamedFactory, PositionalFactory, RenderError
from falta.core.errors import codes


@dataclass
class Circle:
    Radius: float


ErrInvalidCircle = falta.new("invalid circle: radius ({{.Radius}}) <= 0", Circle)


def test_fmt_factory_renders_params():
    factory = falta.newf("test error: the %s is %s")
    err = factory.new("dog", "black")
    assert isinstance(err, Falta)
    assert isinstance(err, Exception)
    assert str(err) == "test error: the dog is black"
    assert err.message == "test error: the dog is black"
    assert err.spec == "test error: the %s is %s"


def test_fmt_factory_without_params():
    factory = falta.newf("test error")
    assert str(factory.new()) == "test error"


def test_archetype_message_is_raw_spec():
    factory = falta.newf("the %s is %s")
    archetype = factory.new()
    assert archetype.message == "the %s is %s"
    assert falta.is_error(archetype, factory)


def test_named_factory_with_record_type():
    err = ErrInvalidCircle.new(Circle(Radius=-1.0))
    assert str(err) == "invalid circle: radius (-1.0) <= 0"
    assert ErrInvalidCircle.record_type is Circle
    assert ErrInvalidCircle.dialect is Dialect.NAMED


def test_named_factory_archetype():
    archetype = ErrInvalidCircle.new()
    assert archetype.message == "invalid circle: radius ({{.Radius}}) <= 0"
    assert falta.is_error(archetype, ErrInvalidCircle)


def test_call_is_new():
    factory = falta.new_m("code={{.code}}")
    assert str(factory({"code": 404})) == "code=404"


def test_raise_and_catch():
    with pytest.raises(Falta) as exc_info:
        raise ErrInvalidCircle(Circle(Radius=0))
    assert falta.is_error(exc_info.value, ErrInvalidCircle)


def test_factory_is_error_like():
    factory = falta.newf("open: cannot open file %s")
    assert str(factory) == "open: cannot open file %s"
    assert factory.message == factory.spec
    assert falta.is_error(factory, factory)


def test_named_missing_field_fails_construct():
    with pytest.raises(RenderError):
        ErrInvalidCircle.new({"Diameter": 3})


def test_invalid_named_spec_fails_at_creation():
    with pytest.raises(ConfigError) as exc_info:
        falta.new_m("bad {{ field ")
    assert exc_info.value.error_code == codes.INVALID_SPEC


def test_non_string_spec_rejected():
    with pytest.raises(ConfigError):
        falta.newf(42)


def test_mismatched_positional_args_log_warning(caplog):
    factory = falta.newf("the %s is %s")
    with caplog.at_level("WARNING", logger="falta.core.factory"):
        err = factory.new("dog")
    assert str(err) == "the dog is %!s(MISSING)"
    assert "do not fit" in caplog.text


def test_mismatch_warning_can_be_disabled(caplog):
    falta.set_config(falta.FaltaConfig(warn_on_render_mismatch=False))
    factory = falta.newf("the %s")
    with caplog.at_level("WARNING", logger="falta.core.factory"):
        factory.new("dog", "cat")
    assert caplog.text == ""


def test_wrap_verb_sets_cause():
    cause = OSError("disk full")
    err = falta.newf("save failed: %w").new(cause)
    assert str(err) == "save failed: disk full"
    assert err.unwrap() is cause
    assert falta.is_error(err, cause)


def test_create_factory_dispatches_on_dialect():
    assert isinstance(falta.create_factory("a %s", Dialect.POSITIONAL), PositionalFactory)
    assert isinstance(falta.create_factory("a {{ x }}", "named"), NamedFactory)
    assert isinstance(falta.create_factory("a %s"), PositionalFactory)


def test_create_factory_unknown_dialect():
    with pytest.raises(ConfigError) as exc_info:
        falta.create_factory("a %s", "shouty")
    assert exc_info.value.error_code == codes.UNKNOWN_DIALECT


def test_new_error_standalone():
    err = falta.new_error("connection reset")
    assert str(err) == "connection reset"
    assert err.spec == "connection reset"
    assert falta.is_error(err.annotate("retrying"), err)


def test_new_error_rejects_verbs():
    with pytest.raises(ConfigError) as exc_info:
        falta.new_error("connection %s reset")
    assert exc_info.value.error_code == codes.FORBIDDEN_VERB


def test_factory_base_is_abstract():
    with pytest.raises(TypeError):
        falta.Factory("x", None)
