import json
from pathlib import Path

import pytest

from enro.config import Config
from enro.config_schemas import ClassifierConfig, EnroConfig, OutputConfig, ScanConfig
from enro.config_store import ConfigStore


def test_missing_config_file_is_created_with_defaults(tmp_path):
    path = tmp_path / "cfg" / "config.json"
    config = Config(str(path))
    assert path.exists()
    assert json.loads(path.read_text()) == EnroConfig().to_dict()
    assert config.scan.max_bytes == 1048576


def test_default_path_lives_under_home():
    config = Config()
    assert config.config_path == str(Path.home() / ".enro" / "config.json")


def test_user_values_are_merged(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"scan": {"min_size": 512}, "classifier": {"text_ratio": 0.9}}))
    config = Config(str(path))
    assert config.scan.min_size == 512
    assert config.scan.max_bytes == 1048576
    assert config.classifier.text_ratio == 0.9
    assert config.get("scan", "min_size") == 512


def test_invalid_section_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"classifier": {"random_threshold": 9.5}, "scan": {"threads": 4}}))
    config = Config(str(path))
    assert config.classifier == ClassifierConfig()
    assert config.scan.threads == 4


def test_wrong_value_type_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"scan": {"max_bytes": "lots"}}))
    assert Config(str(path)).scan == ScanConfig()


def test_malformed_json_is_ignored(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    config = Config(str(path))
    assert config.typed_config == EnroConfig()


def test_unknown_keys_are_ignored_by_typed_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"scan": {"colour": "blue"}, "extra": {"a": 1}}))
    config = Config(str(path))
    assert config.scan == ScanConfig()
    assert "extra" in config
    assert config["extra"] == {"a": 1}


def test_apply_overrides_does_not_save(tmp_path):
    path = tmp_path / "config.json"
    config = Config(str(path))
    config.apply_overrides({"scan": {"recursive": True, "max_bytes": 0}})
    assert config.scan.recursive is True
    assert config.scan.max_bytes == 0
    assert json.loads(path.read_text())["scan"]["recursive"] is False


def test_set_updates_typed_config(tmp_path):
    config = Config(str(tmp_path / "config.json"))
    config.set("output", "high_entropy_threshold", 7.0)
    assert config.output.high_entropy_threshold == 7.0


def test_to_dict_is_a_copy(tmp_path):
    config = Config(str(tmp_path / "config.json"))
    data = config.to_dict()
    data["scan"]["min_size"] = 99
    assert config.scan.min_size == 0


def test_config_store_rejects_non_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]")
    assert ConfigStore.load(str(path)) is None


def test_config_store_drops_scalar_sections(tmp_path):
    path = tmp_path / "scalar.json"
    path.write_text(json.dumps({"scan": 5, "output": {"json_indent": 4}, "extra": [1]}))
    assert ConfigStore.load(str(path)) == {"output": {"json_indent": 4}, "extra": [1]}


def test_scalar_section_keeps_section_defaults(tmp_path):
    path = tmp_path / "scalar.json"
    path.write_text(json.dumps({"scan": "fast", "output": {"json_indent": 4}}))
    config = Config(str(path))
    assert config.scan == ScanConfig()
    assert config["scan"] == EnroConfig().to_dict()["scan"]
    assert config.output.json_indent == 4


def test_config_store_round_trip(tmp_path):
    path = tmp_path / "nested" / "store.json"
    ConfigStore.save(str(path), {"general": {"verbose": True}})
    assert ConfigStore.load(str(path)) == {"general": {"verbose": True}}


def test_classifier_config_validation():
    with pytest.raises(ValueError):
        ClassifierConfig(encrypted_threshold=7.0, random_threshold=7.5)
    with pytest.raises(ValueError):
        ClassifierConfig(random_threshold=-0.1)
    with pytest.raises(ValueError):
        ClassifierConfig(text_ratio=0.0)
    with pytest.raises(ValueError):
        ClassifierConfig(text_sample_size=-1)


def test_scan_and_output_config_validation():
    with pytest.raises(ValueError):
        ScanConfig(max_bytes=-1)
    with pytest.raises(ValueError):
        ScanConfig(threads=-2)
    with pytest.raises(ValueError):
        OutputConfig(high_entropy_threshold=6.0, medium_entropy_threshold=7.0)


def test_enro_config_from_dict_and_merge():
    config = EnroConfig.from_dict({"scan": {"recursive": True}})
    assert config.scan.recursive is True
    assert config.classifier == ClassifierConfig()
    merged = EnroConfig().merge(config)
    assert merged.scan.recursive is True
    with pytest.raises(TypeError):
        EnroConfig.from_dict(["not", "a", "dict"])
