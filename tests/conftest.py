import itertools

import pytest


class ScriptedSource:
    """Byte source that replays a fixed byte sequence forever and counts requests."""

    def __init__(self, data):
        self._cycle = itertools.cycle(bytes(data))
        self.calls = 0

    def __call__(self, n):
        self.calls += 1
        return bytes(next(self._cycle) for _ in range(n))


@pytest.fixture
def scripted_source():
    return ScriptedSource


@pytest.fixture
def config_home(tmp_path, monkeypatch):
    monkeypatch.setenv("APPDATA", str(tmp_path))
    return tmp_path / "StrictPass"
