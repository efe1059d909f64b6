import pytest

from planelab.settings import (
    DEFAULT_MODE,
    Settings,
    Snapshot,
    directory_exists,
    load_settings,
    save_settings,
)


def test_default_settings_bytes():
    assert Settings().to_bytes() == b"\xea\x03\x00\x00" + bytes(20)


def test_bytes_round_trip():
    settings = Settings(1004, 5, 123, 250, 17, 255)
    data = settings.to_bytes()
    assert len(data) == 24
    assert Settings.from_bytes(data) == settings


def test_from_bytes_ignores_trailing_data():
    settings = Settings(1003, 7, 1, 2, 3, 4)
    assert Settings.from_bytes(settings.to_bytes() + b"extra") == settings


def test_from_bytes_rejects_short_data():
    with pytest.raises(ValueError):
        Settings.from_bytes(bytes(10))


def test_to_bytes_rejects_negative():
    with pytest.raises(ValueError):
        Settings(counter=-1).to_bytes()


def test_to_bytes_rejects_too_large():
    with pytest.raises(ValueError):
        Settings(elapsed=2**32).to_bytes()


def test_load_missing_file_creates_it(tmp_path):
    path = tmp_path / "default.data"
    settings = load_settings(path)
    assert settings == Settings()
    assert settings.mode == DEFAULT_MODE
    assert path.exists()
    assert path.stat().st_size == 0


def test_save_then_load(tmp_path):
    path = tmp_path / "profile.data"
    settings = Settings(1003, 3, 42, 100, 16, 32)
    save_settings(path, settings)
    assert load_settings(path) == settings


def test_save_overwrites(tmp_path):
    path = tmp_path / "profile.data"
    save_settings(path, Settings(counter=9))
    save_settings(path, Settings(counter=1))
    assert load_settings(path).counter == 1
    assert path.stat().st_size == 24


def test_load_corrupt_file_raises(tmp_path):
    path = tmp_path / "bad.data"
    path.write_bytes(b"abc")
    with pytest.raises(ValueError):
        load_settings(path)


def test_directory_exists(tmp_path):
    file_path = tmp_path / "file.data"
    file_path.write_bytes(b"")
    assert directory_exists(tmp_path) is True
    assert directory_exists(file_path) is False
    assert directory_exists(tmp_path / "missing") is False


def test_render_saved_snapshot():
    snapshot = Snapshot("default", True, "opt1, opt2", "active", 5, 100, 16, 32)
    lines = snapshot.render()
    assert lines == [
        "combo select [default] ",
        "option type [active]",
        "options [opt1, opt2]",
        "counter [5]",
        "timer elapsed [100]",
        "horizontal scroll [16]",
        "vertical scroll [32]",
    ]


def test_render_unsaved_snapshot_marks_it():
    lines = Snapshot(combo_select="draft", combo_saved=False).render()
    assert lines[0] == "combo select [draft]  (*no save)"
    assert len(lines) == 7