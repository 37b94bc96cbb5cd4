import pytest

from touchflow.client_lock import AlreadyRunningError, ClientLock


@pytest.fixture
def lock_path(tmp_path):
    return tmp_path / "sub" / "app.lock"


def test_acquire_creates_lock_file(lock_path):
    lock = ClientLock(lock_path)
    lock.acquire()
    try:
        assert lock_path.exists()
        assert lock.locked is True
    finally:
        lock.release()
    assert lock.locked is False


def test_second_lock_is_refused(lock_path):
    with ClientLock(lock_path):
        with pytest.raises(AlreadyRunningError) as excinfo:
            ClientLock(lock_path).acquire()
    assert str(lock_path) in str(excinfo.value)
    assert "$ rm" in str(excinfo.value)


def test_error_is_a_runtime_error(lock_path):
    with ClientLock(lock_path):
        with pytest.raises(RuntimeError):
            ClientLock(lock_path).acquire()


def test_lock_can_be_taken_after_release(lock_path):
    first = ClientLock(lock_path)
    first.acquire()
    first.release()
    second = ClientLock(lock_path)
    second.acquire()
    try:
        assert second.locked is True
    finally:
        second.release()


def test_context_manager_releases(lock_path):
    with ClientLock(lock_path) as lock:
        assert lock.locked is True
    assert lock.locked is False
    with ClientLock(lock_path) as again:
        assert again.locked is True


def test_release_without_acquire_is_harmless(lock_path):
    lock = ClientLock(lock_path)
    lock.release()
    assert lock.locked is False


def test_default_path_is_in_user_config_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    lock = ClientLock()
    assert lock.path.parent == tmp_path / ".config" / "touchflow"
    assert lock.path.parent.is_dir()
    with lock:
        assert lock.path.exists()