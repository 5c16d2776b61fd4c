"""Tests for the in-memory leaderboard and its JSON file storage."""

import json

import pytest

from leaderboard_server.errors import StorageWriteError
from leaderboard_server.models import ScoreEntry
from leaderboard_server.services import LEADERBOARD_CAPACITY, ScoreStore
from leaderboard_server.storage import JsonFileStorage, ScoreStorage


class FailingStorage(ScoreStorage):
    def __init__(self, rows=None):
        self.rows = rows or []

    def read_rows(self):
        return self.rows

    def write_rows(self, rows):
        raise StorageWriteError()


@pytest.fixture()
def data_file(tmp_path):
    return tmp_path / "leaderboard-data.json"


@pytest.fixture()
def store(data_file):
    store = ScoreStore(JsonFileStorage(data_file))
    store.load()
    return store


def test_load_missing_file_is_empty(store):
    assert store.entries == []


@pytest.mark.parametrize("content", ["not json", '{"name": "Ace", "score": 5}', "42", ""])
def test_load_corrupt_or_non_array_is_empty(data_file, content):
    data_file.write_text(content, encoding="utf-8")
    assert ScoreStore(JsonFileStorage(data_file)).load() == []


def test_load_filters_sorts_and_defaults(data_file):
    rows = [
        {"name": "Low", "score": 10},
        {"score": 500},
        {"name": "Neg", "score": -5},
        {"name": "Frac", "score": 2.5},
        {"name": "Huge", "score": 10_000_001},
        {"name": "Text", "score": "abc"},
        {"name": "NoScore"},
        "garbage",
        {"name": "High", "score": 9000},
    ]
    data_file.write_text(json.dumps(rows), encoding="utf-8")

    loaded = ScoreStore(JsonFileStorage(data_file)).load()

    assert [(e.name, e.score) for e in loaded] == [
        ("High", 9000),
        ("Pilot", 500),
        ("Low", 10),
        ("NoScore", 0),
    ]


def test_load_truncates_to_capacity(data_file):
    rows = [{"name": f"P{i}", "score": i} for i in range(150)]
    data_file.write_text(json.dumps(rows), encoding="utf-8")

    loaded = ScoreStore(JsonFileStorage(data_file)).load()

    assert len(loaded) == LEADERBOARD_CAPACITY
    assert loaded[0].score == 149
    assert loaded[-1].score == 50


def test_submit_keeps_sorted_and_bounded(store):
    for i in range(130):
        store.submit(ScoreEntry(name=f"P{i}", score=(i * 7919) % 1000))
        scores = [e.score for e in store.entries]
        assert scores == sorted(scores, reverse=True)
        assert len(store) <= LEADERBOARD_CAPACITY
    assert len(store) == LEADERBOARD_CAPACITY


def test_ties_keep_insertion_order(store):
    store.submit(ScoreEntry(name="First", score=100))
    store.submit(ScoreEntry(name="Second", score=100))
    store.submit(ScoreEntry(name="Top", score=200))
    assert [e.name for e in store.entries] == ["Top", "First", "Second"]


def test_top(store):
    for score in (5, 50, 500):
        store.submit(ScoreEntry(name="Ace", score=score))
    assert [e.score for e in store.top(2)] == [500, 50]
    assert store.top(0) == []
    assert len(store.top(20)) == 3


def test_submit_overwrites_file_with_full_list(store, data_file):
    store.submit(ScoreEntry(name="Ace", score=10))
    store.submit(ScoreEntry(name="Bee", score=20))

    saved = json.loads(data_file.read_text(encoding="utf-8"))
    assert saved == [{"name": "Bee", "score": 20}, {"name": "Ace", "score": 10}]
    assert not list(data_file.parent.glob("*.tmp"))


def test_persist_then_reload_round_trip(store, data_file):
    for i, score in enumerate([30, 10, 30, 99, 0]):
        store.submit(ScoreEntry(name=f"P{i}", score=score))

    reloaded = ScoreStore(JsonFileStorage(data_file)).load()

    assert reloaded == store.entries


def test_failed_write_rolls_back():
    store = ScoreStore(FailingStorage([{"name": "Ace", "score": 10}]))
    store.load()

    with pytest.raises(StorageWriteError):
        store.submit(ScoreEntry(name="Bee", score=20))

    assert [(e.name, e.score) for e in store.entries] == [("Ace", 10)]


def test_json_storage_wraps_os_errors(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    storage = JsonFileStorage(blocker / "leaderboard-data.json")

    with pytest.raises(StorageWriteError):
        storage.write_rows([{"name": "Ace", "score": 1}])


def test_entries_are_immutable():
    entry = ScoreEntry(name="Ace", score=1)
    with pytest.raises(Exception):
        entry.score = 2
