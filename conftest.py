import json

import pytest
from fastapi.testclient import TestClient

from leaderboard_server.app import create_app
from leaderboard_server.config import Config
from leaderboard_server.services import RateLimiter


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def public_root(tmp_path):
    root = tmp_path / "public"
    root.mkdir()
    (root / "index.html").write_text("<h1>Jetpack Voice Hero</h1>", encoding="utf-8")
    (root / "game.js").write_text("console.log('fly');", encoding="utf-8")
    (root / "style.css").write_text("body { margin: 0; }", encoding="utf-8")
    (root / "sprite.png").write_bytes(b"\x89PNG\r\n")
    return root


@pytest.fixture()
def config(tmp_path, public_root):
    return Config(
        host="127.0.0.1",
        port=8787,
        public_root=public_root,
        data_file=tmp_path / "data" / "leaderboard-data.json",
    )


@pytest.fixture()
def seed_scores(config):
    """Write raw rows to the leaderboard file before an app is built."""
    def _seed(rows):
        config.data_file.parent.mkdir(parents=True, exist_ok=True)
        config.data_file.write_text(json.dumps(rows), encoding="utf-8")
    return _seed


@pytest.fixture()
def app(config, clock):
    return create_app(config, limiter=RateLimiter(clock=clock))


@pytest.fixture()
def client(app):
    return TestClient(app)
