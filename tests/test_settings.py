import json

from settings import DEFAULT_SETTINGS, load_settings, save_settings


def test_missing_file_gives_defaults(tmp_path):
    assert load_settings(tmp_path / "nope.json") == DEFAULT_SETTINGS


def test_saved_settings_are_loaded(tmp_path):
    path = tmp_path / "s.json"
    save_settings({"distance": 50, "wind": "heavy", "extra": 1}, path)
    assert json.loads(path.read_text()) == {"distance": 50, "wind": "heavy"}
    assert load_settings(path) == {"distance": 50, "wind": "heavy"}


def test_invalid_values_fall_back(tmp_path):
    path = tmp_path / "s.json"
    path.write_text(json.dumps({"distance": 45, "wind": "light"}))
    assert load_settings(path) == {"distance": 20, "wind": "light"}


def test_corrupt_file_falls_back(tmp_path, caplog):
    path = tmp_path / "s.json"
    path.write_text("{not json")
    assert load_settings(path) == DEFAULT_SETTINGS
    assert "Could not read" in caplog.text


def test_non_dict_file_falls_back(tmp_path):
    path = tmp_path / "s.json"
    path.write_text("[1, 2]")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_wrong_value_types_fall_back(tmp_path):
    path = tmp_path / "s.json"
    path.write_text(json.dumps({"distance": 30, "wind": ["light"]}))
    assert load_settings(path) == {"distance": 30, "wind": "none"}
    path.write_text(json.dumps({"distance": {"yds": 40}, "wind": {"light": 1}}))
    assert load_settings(path) == DEFAULT_SETTINGS


def test_float_distance_falls_back(tmp_path):
    path = tmp_path / "s.json"
    path.write_text(json.dumps({"distance": 30.0, "wind": "heavy"}))
    settings = load_settings(path)
    assert settings == {"distance": 20, "wind": "heavy"}
    assert type(settings["distance"]) is int
