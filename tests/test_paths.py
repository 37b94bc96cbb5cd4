import os
import pwd

import pytest

from touchflow import paths


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


def test_home_path_uses_environment(home):
    assert paths.home_path() == home


def test_home_path_falls_back_to_password_database(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    expected = pwd.getpwuid(os.getuid()).pw_dir
    assert str(paths.home_path()) == expected


def test_home_path_missing_user_raises(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)

    def missing(uid):
        raise KeyError(uid)

    monkeypatch.setattr(pwd, "getpwuid", missing)
    with pytest.raises(RuntimeError):
        paths.home_path()


def test_user_config_dir_is_under_dot_config(home):
    config_dir = paths.user_config_dir()
    assert config_dir.parent == home / ".config"
    assert config_dir.name == "touchflow"


def test_config_and_lock_files_live_in_config_dir(home):
    config_dir = paths.user_config_dir()
    assert paths.user_config_file().parent == config_dir
    assert paths.user_lock_file().parent == config_dir
    assert paths.user_config_file() != paths.user_lock_file()
    assert paths.user_lock_file().name.startswith(".")


def test_system_config_file_is_absolute():
    system_file = paths.system_config_file()
    assert system_file.is_absolute()
    assert system_file.suffix == ".conf"


def test_create_user_config_dir(home):
    assert not paths.user_config_dir().exists()
    created = paths.create_user_config_dir()
    assert created == paths.user_config_dir()
    assert created.is_dir()


def test_create_user_config_dir_twice_keeps_contents(home):
    created = paths.create_user_config_dir()
    marker = created / "keep"
    marker.write_text("x")
    paths.create_user_config_dir()
    assert marker.read_text() == "x"