import json
import pytest
from src.core.config import ConfigManager, LayoutSettings


def test_config_read_default():
    config = ConfigManager()
    assert config.data.layout == LayoutSettings()
    assert config.get("layout", "node_width") == 192.0
    assert config.get("interaction", "pin_hit_radius") == 10.0
    assert config.data.tasks_file is None


def test_config_update_event():
    config = ConfigManager()
    received = []

    def on_change(section, key, val):
        received.append((section, key, val))

    config.on_changed.connect(on_change)

    # Update value
    config.update("layout", "pin_gap", 8)

    assert config.data.layout.pin_gap == 8.0
    assert received == [("layout", "pin_gap", 8.0)]


def test_config_rejects_unknown_section_and_key():
    config = ConfigManager()
    with pytest.raises(ValueError):
        config.update("audio", "volume", 1)
    with pytest.raises(ValueError):
        config.update("layout", "corner_radius", 4)


def test_config_rejects_bad_value():
    config = ConfigManager()
    with pytest.raises(ValueError):
        config.update("layout", "node_width", "wide")
    assert config.data.layout.node_width == 192.0


def test_config_persists_json(tmp_path):
    path = tmp_path / "settings" / "blueprint.json"
    config = ConfigManager(str(path))
    assert path.exists()

    config.update("interaction", "start_task", 2)

    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["interaction"]["start_task"] == 2
    assert ConfigManager(str(path)).data.interaction.start_task == 2


def test_config_loads_toml(tmp_path):
    path = tmp_path / "blueprint.toml"
    path.write_text('[layout]\nnode_width = 240\n\n[general]\ndebug_mode = false\n', encoding="utf-8")
    config = ConfigManager(str(path))
    assert config.data.layout.node_width == 240.0
    assert config.data.general.debug_mode is False
    assert config.data.layout.pin_height == 24.0
