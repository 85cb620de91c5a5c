import pytest


class StubSource:
    """Replays a fixed byte sequence, wrapping around at the end."""

    def __init__(self, data: bytes):
        self.data = bytes(data)
        self.pos = 0
        self.calls = []

    def fill(self, n: int) -> bytes:
        self.calls.append(n)
        out = bytearray()
        for _ in range(n):
            out.append(self.data[self.pos % len(self.data)])
            self.pos += 1
        return bytes(out)


@pytest.fixture
def stub_source():
    return StubSource


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("APPDATA", str(tmp_path))
    return tmp_path / "pwordgen"
