from goetags import config as config_module
from goetags.services.config_service import apply_config_updates, get_config_snapshot


def _prepare_config(tmp_path, monkeypatch):
    config_dir = tmp_path / "config"
    monkeypatch.setattr(config_module, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_dir / "config.json")


def test_apply_config_updates_reports_changes(tmp_path, monkeypatch):
    _prepare_config(tmp_path, monkeypatch)

    result = apply_config_updates(output="MYTAGS", workers=4, full_tag=True)

    assert result.changed
    assert result.output_set and result.workers_set and result.full_tag_set
    assert not result.append_set
    snapshot = get_config_snapshot()
    assert snapshot.output == "MYTAGS"
    assert snapshot.workers == 4
    assert snapshot.full_tag is True


def test_apply_config_updates_clear_directory(tmp_path, monkeypatch):
    _prepare_config(tmp_path, monkeypatch)
    apply_config_updates(directory="/srv/tags")
    assert get_config_snapshot().directory == "/srv/tags"

    result = apply_config_updates(clear_directory=True)

    assert result.directory_cleared
    assert get_config_snapshot().directory is None


def test_apply_config_updates_noop(tmp_path, monkeypatch):
    _prepare_config(tmp_path, monkeypatch)
    assert apply_config_updates().changed is False
