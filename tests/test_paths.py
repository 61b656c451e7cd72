# tests/test_paths.py

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from gauntlet import paths
from gauntlet.errors import ErrorKind, GauntletError
from gauntlet.paths import default_data_dir, setup_data_directory


@pytest.fixture()
def linux(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    home = tmp_path / "home"
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    return home


def test_xdg_data_home_wins(linux: Path, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg"))
    assert default_data_dir("gauntlet") == tmp_path / "xdg" / "gauntlet"


def test_relative_xdg_data_home_is_ignored(linux: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", "relative/dir")
    assert default_data_dir("gauntlet") == linux / ".local" / "share" / "gauntlet"


def test_macos_application_support(linux: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "platform", "darwin")
    assert default_data_dir("gauntlet") == linux / "Library" / "Application Support" / "gauntlet"


def test_falls_back_to_home_when_nothing_discoverable(
    linux: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(paths, "_user_data_root", lambda: None)
    assert default_data_dir("gauntlet") == linux


def test_setup_creates_missing_directory(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b"
    assert setup_data_directory(target) == target
    assert target.is_dir()


def test_setup_accepts_existing_directory(tmp_path: Path) -> None:
    assert setup_data_directory(tmp_path) == tmp_path


def test_setup_fails_when_a_file_is_in_the_way(tmp_path: Path) -> None:
    blocker = tmp_path / "data"
    blocker.write_text("not a dir", "utf-8")

    with pytest.raises(GauntletError) as ei:
        setup_data_directory(blocker)
    assert ei.value.kind is ErrorKind.FILESYSTEM


def test_windows_prefers_localappdata(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(sys, "platform", "win32")
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path / "local"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "roaming"))

    assert default_data_dir("gauntlet") == tmp_path / "local" / "gauntlet"


def test_windows_falls_back_to_appdata(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(sys, "platform", "win32")
    monkeypatch.delenv("LOCALAPPDATA", raising=False)
    monkeypatch.setenv("APPDATA", str(tmp_path / "roaming"))

    assert default_data_dir("gauntlet") == tmp_path / "roaming" / "gauntlet"


def test_windows_without_appdata_uses_home(
    linux: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(sys, "platform", "win32")
    monkeypatch.delenv("LOCALAPPDATA", raising=False)
    monkeypatch.delenv("APPDATA", raising=False)

    assert default_data_dir("gauntlet") == linux
