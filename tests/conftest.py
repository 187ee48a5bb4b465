from __future__ import annotations

import pytest
import requests

from raid_checker import config
from raid_checker.game_logic.cache import FreshnessCache
from raid_checker.game_logic.experience import experience_for

DEFAULT_LEVELS = {
    "attack": 75,
    "strength": 75,
    "defence": 75,
    "hitpoints": 75,
    "ranged": 1,
    "prayer": 44,
    "magic": 1,
}


def make_hiscore_text(levels: dict | None = None, unranked: tuple = (), activities: int = 3, skill_lines: int | None = None) -> str:
    """Builds an index_lite style payload; skills missing from `levels` are level 1."""
    levels = levels or {}
    lines = []
    names = config.HISCORE_SKILL_ORDER if skill_lines is None else config.HISCORE_SKILL_ORDER[:skill_lines]
    for position, skill in enumerate(names):
        if skill == "overall":
            total = sum(levels.get(name, 10 if name == "hitpoints" else 1) for name in config.HISCORE_SKILL_ORDER[1:])
            lines.append(f"{1000},{total},{total * 100}")
            continue
        level = levels.get(skill, 10 if skill == "hitpoints" else 1)
        if skill in unranked:
            lines.append(f"-1,{level},-1")
        else:
            lines.append(f"{position * 1000 + 1},{level},{experience_for(level)}")
    for activity in range(activities):
        lines.append(f"{activity + 5},{activity * 10 + 1}")
    return "\n".join(lines) + "\n"


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = "") -> None:
        self.status_code = status_code
        self.text = text

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400


class FakeSession:
    """Stands in for requests.Session; answers with the scripted responses in order."""

    def __init__(self, *responses) -> None:
        self.responses = list(responses)
        self.calls: list[tuple[str, float]] = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakeFetcher:
    def __init__(self, payload: str | None = None, error: Exception | None = None) -> None:
        self.payload = payload
        self.error = error
        self.calls: list[str] = []

    def fetch(self, player_name: str) -> str:
        self.calls.append(player_name)
        if self.error is not None:
            raise self.error
        return self.payload


class FakeUpdateResult:
    def __init__(self, matched_count: int, modified_count: int, upserted_id=None) -> None:
        self.matched_count = matched_count
        self.modified_count = modified_count
        self.upserted_id = upserted_id


class FakeCursor(list):
    def sort(self, key, direction=1):
        return FakeCursor(sorted(self, key=lambda doc: doc.get(key, 0), reverse=direction < 0))


class FakeCollection:
    """The handful of pymongo collection calls the database modules use."""

    def __init__(self) -> None:
        self.docs: list[dict] = []
        self._next_id = 1

    def _matches(self, doc, query):
        return all(doc.get(key) == value for key, value in query.items())

    def count_documents(self, query):
        return sum(1 for doc in self.docs if self._matches(doc, query))

    def insert_many(self, docs):
        for doc in docs:
            self.docs.append(dict(doc))

    def find(self, query=None):
        return FakeCursor(dict(doc) for doc in self.docs if self._matches(doc, query or {}))

    def find_one(self, query):
        for doc in self.docs:
            if self._matches(doc, query):
                return dict(doc)
        return None

    def update_one(self, query, update, upsert=False):
        for doc in self.docs:
            if self._matches(doc, query):
                doc.update(update["$set"])
                return FakeUpdateResult(1, 1)
        if not upsert:
            return FakeUpdateResult(0, 0)
        doc = dict(query)
        doc.update(update["$set"])
        doc["_id"] = self._next_id
        self._next_id += 1
        self.docs.append(doc)
        return FakeUpdateResult(0, 0, upserted_id=doc["_id"])


class FakeDatabase(dict):
    def __missing__(self, name):
        collection = FakeCollection()
        self[name] = collection
        return collection


class ManualClock:
    def __init__(self, now: int = 0) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, milliseconds: int) -> None:
        self.now += milliseconds


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock(1_700_000_000_000)


@pytest.fixture
def cache(clock: ManualClock) -> FreshnessCache:
    return FreshnessCache(clock=clock)


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def connection_error() -> Exception:
    return requests.ConnectionError("connection refused")
