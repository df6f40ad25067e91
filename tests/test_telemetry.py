import pytest

from softwrap.runtime import telemetry


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError, match="Unknown preset"):
        telemetry.configure(preset="verbose")


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="quiet")


def test_get_logger_is_cached_per_name() -> None:
    assert telemetry.get_logger("softwrap.test") is telemetry.get_logger(
        "softwrap.test"
    )


def test_span_reraises_and_yields_handle() -> None:
    with telemetry.span("test::ok", component=True, metadata={"k": 1}) as handle:
        handle.add_metadata("rows", 3)
    assert handle.metadata == {"k": "1", "rows": "3"}
    assert handle.component_name == "test::ok"

    with pytest.raises(RuntimeError, match="boom"):
        with telemetry.span("test::fail"):
            raise RuntimeError("boom")
