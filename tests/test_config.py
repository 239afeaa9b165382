import yaml

from qrisk.utils.config import DEFAULT_SETTINGS_PATH, load_settings, merge_settings


def test_default_settings(settings_path):
    assert DEFAULT_SETTINGS_PATH == settings_path

    settings = load_settings()

    assert settings["version"] == "2015"
    assert settings["follow_up_year"] == 10
    assert settings["columns"]["townsend"] == "townsend_score"
    assert settings["impute"] == {"townsend": 0}


def test_override_settings(tmp_path, settings_path):
    override = tmp_path / "settings.yaml"
    override.write_text(
        yaml.safe_dump(
            {
                "version": "2012",
                "columns": {"age": "age_at_recruitment"},
                "impute": {"townsend": -1.5},
            }
        )
    )

    settings = load_settings(override, defaults_path=settings_path)

    assert settings["version"] == "2012"
    assert settings["follow_up_year"] == 10
    assert settings["columns"]["age"] == "age_at_recruitment"
    assert settings["columns"]["bmi"] == "bmi"
    assert settings["impute"]["townsend"] == -1.5


def test_empty_override_keeps_defaults(tmp_path, settings_path):
    override = tmp_path / "empty.yaml"
    override.write_text("")

    assert load_settings(override, defaults_path=settings_path) == load_settings(
        defaults_path=settings_path
    )


def test_merge_settings_does_not_modify_defaults():
    defaults = {"a": {"b": 1, "c": 2}, "d": 3}

    merged = merge_settings(defaults, {"a": {"b": 10}, "e": 4})

    assert merged == {"a": {"b": 10, "c": 2}, "d": 3, "e": 4}
    assert defaults == {"a": {"b": 1, "c": 2}, "d": 3}
