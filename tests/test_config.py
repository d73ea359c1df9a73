import json
import logging

from config import Config, load_config


def test_missing_config_uses_defaults(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))

    config = load_config(tmp_path / "absent.json")

    assert config == Config()
    assert config.first_day_of_week == 1
    assert config.page_by == "months"
    assert config.state_path == tmp_path / "data" / "calpick" / "selection.parquet"


def test_config_values_and_trailing_commas(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        '{"first_day_of_week": 0, "months": 3, "page_by": "single",'
        ' "locale": "de_DE", "show_week_numbers": true,'
        ' "state_path": "%s",}' % (tmp_path / "state.parquet")
    )

    config = load_config(path)

    assert config.first_day_of_week == 0
    assert config.months == 3
    assert config.page_by == "single"
    assert config.locale == "de_DE"
    assert config.show_week_numbers is True
    assert config.state_path == tmp_path / "state.parquet"


def test_invalid_values_fall_back_with_warning(tmp_path, caplog) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"months": 13, "page_by": "weeks", "weekday_style": "long"}))

    with caplog.at_level(logging.WARNING, logger="config"):
        config = load_config(path)

    assert config.months == 1
    assert config.page_by == "months"
    assert config.weekday_style == "long"
    assert "months=13" in caplog.text
    assert "page_by='weeks'" in caplog.text


def test_unreadable_config_is_ignored(tmp_path, caplog) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2")

    with caplog.at_level(logging.WARNING, logger="config"):
        config = load_config(path)

    assert config.months == 1
    assert "unreadable" in caplog.text


def test_rtl_option(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"rtl": True}))

    assert load_config(path).rtl is True
    assert Config().rtl is False
