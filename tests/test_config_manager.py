import json

from services.config_manager import ConfigManager


def test_defaults_without_config_file(config_manager, tmp_path):
    assert config_manager.config_file == tmp_path / "config" / "config.json"
    review = config_manager.review_settings()
    assert review["diffModeEnabled"] is True
    assert review["maxDiffCells"] == 4_000_000
    assert review["contextLines"] == 3


def test_saved_values_survive_a_new_instance(config_manager):
    config = config_manager.get_config()
    config["review"] = {**config["review"], "diffModeEnabled": False}
    config_manager.save_config(config)

    ConfigManager.reset_instance()
    reloaded = ConfigManager.get_instance()
    assert reloaded.review_settings()["diffModeEnabled"] is False


def test_partial_sections_are_merged_with_defaults(config_manager):
    config_manager.config_file.write_text(json.dumps({"review": {"contextLines": 1}}))
    review = config_manager.review_settings()
    assert review["contextLines"] == 1
    assert review["diffModeEnabled"] is True


def test_corrupt_file_falls_back_to_defaults(config_manager):
    config_manager.config_file.write_text("{not json")
    assert config_manager.get_config()["logging"] == {"level": "INFO"}


def test_set_persists_a_single_key(config_manager):
    config_manager.set("logging", {"level": "DEBUG"})
    assert json.loads(config_manager.config_file.read_text())["logging"] == {"level": "DEBUG"}
    assert config_manager.get("logging") == {"level": "DEBUG"}
