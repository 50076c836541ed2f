import json

import pytest

from goetags import config as config_module


def _prepare_config(tmp_path, monkeypatch):
    config_dir = tmp_path / "config"
    config_file = config_dir / "config.json"
    monkeypatch.setattr(config_module, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_file)
    return config_file


def test_load_config_defaults(tmp_path, monkeypatch):
    _prepare_config(tmp_path, monkeypatch)

    cfg = config_module.load_config()

    assert cfg.output == config_module.DEFAULT_OUTPUT == "TAGS"
    assert cfg.directory is None
    assert cfg.workers == config_module.DEFAULT_WORKERS == 8
    assert cfg.full_tag is False
    assert cfg.append is False


def test_save_and_load_round_trip(tmp_path, monkeypatch):
    config_file = _prepare_config(tmp_path, monkeypatch)

    config_module.save_config(
        config_module.Config(output="GOTAGS", directory="/tmp/tags", workers=3, full_tag=True)
    )

    stored = json.loads(config_file.read_text())
    assert stored == {
        "output": "GOTAGS",
        "directory": "/tmp/tags",
        "workers": 3,
        "full_tag": True,
        "append": False,
    }
    cfg = config_module.load_config()
    assert cfg.output == "GOTAGS"
    assert cfg.workers == 3
    assert cfg.full_tag is True


def test_setters_persist(tmp_path, monkeypatch):
    _prepare_config(tmp_path, monkeypatch)

    config_module.set_output("  ETAGS ")
    config_module.set_workers(2)
    config_module.set_append(True)
    config_module.set_directory("out")

    cfg = config_module.load_config()
    assert cfg.output == "ETAGS"
    assert cfg.workers == 2
    assert cfg.append is True
    assert cfg.directory == "out"

    config_module.set_directory(None)
    assert config_module.load_config().directory is None


def test_set_workers_rejects_zero(tmp_path, monkeypatch):
    _prepare_config(tmp_path, monkeypatch)
    with pytest.raises(ValueError):
        config_module.set_workers(0)


def test_config_from_json_coerces_values():
    cfg = config_module.config_from_json(
        '{"workers": "4", "full_tag": "yes", "append": 0, "output": ""}'
    )
    assert cfg.workers == 4
    assert cfg.full_tag is True
    assert cfg.append is False
    assert cfg.output == config_module.DEFAULT_OUTPUT


def test_config_from_json_keeps_base_values():
    base = config_module.Config(output="X", workers=5)
    cfg = config_module.config_from_json({"full_tag": True}, base=base)
    assert cfg.output == "X"
    assert cfg.workers == 5
    assert cfg.full_tag is True
    assert base.full_tag is False


@pytest.mark.parametrize(
    "payload",
    ['{"workers": true}', '{"workers": 1.5}', '{"full_tag": "maybe"}', '{"output": 3}', "[1]", "{"],
)
def test_config_from_json_rejects_invalid(payload):
    with pytest.raises(ValueError):
        config_module.config_from_json(payload)


def test_config_dir_context_overrides(tmp_path, monkeypatch):
    _prepare_config(tmp_path, monkeypatch)
    override = tmp_path / "override"

    with config_module.config_dir_context(override):
        config_module.set_output("INNER")
        assert config_module.load_config().output == "INNER"

    assert (override / "config.json").exists()
    assert config_module.load_config().output == config_module.DEFAULT_OUTPUT


def test_set_config_dir_rejects_file(tmp_path, monkeypatch):
    _prepare_config(tmp_path, monkeypatch)
    not_dir = tmp_path / "file"
    not_dir.write_text("x")
    with pytest.raises(NotADirectoryError):
        config_module.set_config_dir(not_dir)
