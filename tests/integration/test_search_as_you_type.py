from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from smart_generics.data.comparator import sort_by
from smart_generics.data.parser import parse_json, try_parse_data
from smart_generics.result import Failure, Result, Success
from smart_generics.timing.debounce import Debouncer
from smart_generics.timing.throttle import Throttler
from tests.shared.scheduling import ManualScheduler

CATALOG = [
    {"name": "Flutter", "stars": 160},
    {"name": "Flask", "stars": 65},
    {"name": "FastAPI", "stars": 70},
    {"name": "Django", "stars": 75},
]


@dataclass(frozen=True)
class Repo:
    name: str
    stars: int

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> "Repo":
        return cls(name=str(payload["name"]), stars=int(payload["stars"]))


def _search(term: str) -> list[Repo]:
    body = json.dumps({"items": [r for r in CATALOG if r["name"].startswith(term)]})
    page = parse_json(body, lambda payload: [Repo.from_json(item) for item in payload["items"]])
    return sort_by(page, lambda repo: repo.stars, descending=True)


def test_debounced_search_renders_only_final_term(scheduler: ManualScheduler):
    rendered: list[list[str]] = []
    searches: list[str] = []

    def run_search(term: str) -> None:
        searches.append(term)
        rendered.append([repo.name for repo in _search(term)])

    debouncer = Debouncer[str](0.3, action=run_search, scheduler=scheduler)
    for term in ("F", "Fl", "Fla"):
        debouncer(term)
        scheduler.advance(0.1)
    scheduler.advance(0.3)

    assert searches == ["Fla"]
    assert rendered == [["Flask"]]

    debouncer("F")
    scheduler.advance(0.3)
    assert rendered[-1] == ["Flutter", "FastAPI", "Flask"]


def test_throttled_submit_collects_results(scheduler: ManualScheduler):
    results: list[Result[Repo]] = []
    throttler = Throttler[dict](1.0, scheduler=scheduler)
    throttler.action = lambda payload: results.append(try_parse_data(payload, Repo.from_json))

    throttler({"name": "Flask", "stars": "65"})
    throttler({"name": "ignored", "stars": 1})
    scheduler.advance(1.0)
    throttler({"name": "broken"})

    assert results[0] == Success(Repo("Flask", 65))
    assert isinstance(results[1], Failure)
    assert len(results) == 2
