from __future__ import annotations

import pytest

from blockier_engine.runtime import telemetry


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose-ish")


def test_config_and_preset_are_exclusive() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="quiet")


def test_loggers_are_cached_per_name() -> None:
    first = telemetry.get_logger("blockier_engine.tests")

    assert telemetry.get_logger("blockier_engine.tests") is first


def test_span_reraises_and_keeps_metadata() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("tests::span", component=True, metadata={"k": 1}) as handle:
            handle.add_metadata("status", "running")
            assert handle.metadata == {"k": "1", "status": "running"}
            assert handle.component_name == "tests::span"
            raise RuntimeError("boom")
