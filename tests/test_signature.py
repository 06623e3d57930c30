"""Tests for callable descriptions and wrapping."""

import pytest

from fitadapt import AdaptorConfig, BindingError, Wrapped, make, wrap
from fitadapt.kernel import CallableSpec, ParameterSpec, describe, get_config, set_config
from fakes import Recorder, CallLog, plus, total


class TestDescribe:
    def test_fixed_arity(self) -> None:
        spec = describe(plus)
        assert spec.name == "plus"
        assert spec.min_positional == 2
        assert spec.max_positional == 2
        assert spec.accepts(2)
        assert not spec.accepts(1)
        assert not spec.accepts(3)

    def test_defaults_and_varargs(self) -> None:
        def f(a, b=1, *rest):
            return a

        spec = describe(f)
        assert spec.min_positional == 1
        assert spec.max_positional is None
        assert spec.accepts(1)
        assert spec.accepts(10)
        assert not spec.accepts(0)

    def test_required_keyword_only_never_positional(self) -> None:
        def f(a, *, key):
            return a

        assert not describe(f).accepts(1)

    def test_optional_keyword_only_ignored(self) -> None:
        def f(a, *, key=None):
            return a

        assert describe(f).accepts(1)

    def test_callable_instance(self) -> None:
        spec = describe(Recorder("r", CallLog()))
        assert [p.name for p in spec.parameters] == ["x"]
        assert spec.accepts(1)

    def test_uninspectable_accepts_anything(self) -> None:
        spec = describe(max)
        assert spec.introspectable is False
        assert spec.accepts(0)
        assert spec.accepts(5)

    def test_spec_is_a_model(self) -> None:
        spec = CallableSpec(
            name="f",
            parameters=[ParameterSpec(name="x", kind="positional_only", required=True)],
        )
        assert spec.model_dump()["parameters"][0]["kind"] == "positional_only"
        assert spec.accepts(1)


class TestWrap:
    def test_wrap_calls_through(self) -> None:
        assert wrap(plus)(1, 2) == 3

    def test_wrap_is_idempotent(self) -> None:
        wrapped = wrap(plus)
        assert wrap(wrapped) is wrapped
        assert Wrapped(wrapped).fn is plus

    def test_wrap_rejects_non_callable(self) -> None:
        with pytest.raises(BindingError):
            wrap(None)

    def test_check(self) -> None:
        with pytest.raises(BindingError) as exc_info:
            wrap(plus).check(3)
        assert exc_info.value.target == "plus"
        assert exc_info.value.arity == 3
        wrap(plus).check(2)

    def test_make(self) -> None:
        factory = make(Wrapped)
        wrapped = factory(total)
        assert isinstance(wrapped, Wrapped)
        assert wrapped(1, 2) == 3
        assert factory.__name__ == "make_Wrapped"


class TestConfig:
    def test_default(self) -> None:
        assert AdaptorConfig().check_signatures is True

    @pytest.mark.parametrize("raw, expected", [("0", False), ("off", False), ("FALSE", False), ("1", True), ("yes", True)])
    def test_from_env(self, monkeypatch, raw, expected) -> None:
        monkeypatch.setenv("FITADAPT_CHECK_SIGNATURES", raw)
        assert AdaptorConfig.from_env().check_signatures is expected

    def test_from_env_unset(self, monkeypatch) -> None:
        monkeypatch.delenv("FITADAPT_CHECK_SIGNATURES", raising=False)
        assert AdaptorConfig.from_env() == AdaptorConfig()

    def test_disabling_checks_skips_signature_rejection(self) -> None:
        previous = set_config(AdaptorConfig(check_signatures=False))
        try:
            assert get_config().check_signatures is False
            wrap(plus).check(3)
            with pytest.raises(TypeError):
                wrap(plus)(1, 2, 3)
        finally:
            set_config(previous)
        assert get_config() == previous
