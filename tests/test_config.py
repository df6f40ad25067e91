import pytest

from softwrap.runtime import WrapSettings


def test_defaults() -> None:
    settings = WrapSettings()

    assert settings.wrap_width_for(80) == 78
    assert settings.wrap_width_for(10) == 20
    assert settings.visible_height_for(30) == 28
    assert settings.visible_height_for(1) == 1
    assert settings.page_step(28) == 26
    assert settings.page_step(1) == 1


def test_from_env_reads_prefixed_variables() -> None:
    settings = WrapSettings.from_env(
        {"SOFTWRAP_MIN_WIDTH": "30", "SOFTWRAP_MARGIN": "0", "SOFTWRAP_TAB_WIDTH": " "}
    )

    assert settings.min_width == 30
    assert settings.margin == 0
    assert settings.tab_width == 4
    assert settings.status_rows == 2


def test_from_env_defaults_to_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("SOFTWRAP_STATUS_ROWS", "0")

    assert WrapSettings.from_env().visible_height_for(24) == 24


def test_from_env_rejects_non_integers() -> None:
    with pytest.raises(ValueError, match="SOFTWRAP_MIN_WIDTH"):
        WrapSettings.from_env({"SOFTWRAP_MIN_WIDTH": "wide"})


@pytest.mark.parametrize(
    "kwargs",
    [{"min_width": 0}, {"margin": -1}, {"page_overlap": -2}, {"tab_width": 0}],
)
def test_invalid_settings_raise(kwargs) -> None:
    with pytest.raises(ValueError):
        WrapSettings(**kwargs)
