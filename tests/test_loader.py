"""Tests for concurrent reference layer loading."""

import threading

import requests

from travel_sketch.geo.loader import (
    empty_layers,
    has_any_features,
    load_reference_layers,
    start_reference_fetch,
)
from travel_sketch.geo.model import LAYER_DATASETS, LAYER_NAMES, BoundingBox

BBOX = BoundingBox(min_lng=-5, max_lng=0, min_lat=50, max_lat=58)

NEAR_LINE = {
    "type": "Feature",
    "properties": {},
    "geometry": {"type": "LineString", "coordinates": [[-3, 55], [-2, 56]]},
}
FAR_LINE = {
    "type": "Feature",
    "properties": {},
    "geometry": {"type": "LineString", "coordinates": [[140, -30], [141, -31]]},
}


class FakeResponse:
    def __init__(self, body=None, status_code=200, bad_json=False):
        self._body = body
        self.status_code = status_code
        self._bad_json = bad_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if self._bad_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._body


class FakeSession:
    """Answers each dataset from a table; exceptions in the table are raised."""

    def __init__(self, answers):
        self.answers = answers
        self.calls = []
        self.closed = False

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params["dataset"], timeout))
        answer = self.answers[params["dataset"]]
        if isinstance(answer, Exception):
            raise answer
        return answer

    def close(self):
        self.closed = True


def _fc(*features):
    return {"type": "FeatureCollection", "features": list(features)}


def test_every_layer_requested_through_proxy():
    answers = {ds: FakeResponse(_fc()) for ds in LAYER_DATASETS.values()}
    session = FakeSession(answers)
    load_reference_layers(BBOX, session=session, base_url="http://proxy/api/geo", timeout=3)

    assert sorted(ds for _, ds, _ in session.calls) == sorted(LAYER_DATASETS.values())
    assert all(url == "http://proxy/api/geo" for url, _, _ in session.calls)
    assert all(timeout == 3 for _, _, timeout in session.calls)
    # Caller-owned session is left open
    assert not session.closed


def test_partial_failure_keeps_other_layers():
    answers = {
        LAYER_DATASETS["coastlines"]: FakeResponse(_fc(NEAR_LINE)),
        LAYER_DATASETS["rivers"]: requests.Timeout("read timed out"),
        LAYER_DATASETS["lakes"]: FakeResponse(status_code=500),
        LAYER_DATASETS["land"]: FakeResponse(bad_json=True),
        LAYER_DATASETS["borders"]: FakeResponse({"error": "not allowed"}),
    }
    layers = load_reference_layers(BBOX, session=FakeSession(answers), base_url="http://proxy")

    assert set(layers) == set(LAYER_NAMES)
    assert layers["coastlines"]["features"] == [NEAR_LINE]
    for name in ("rivers", "lakes", "land", "borders"):
        assert layers[name] == {"type": "FeatureCollection", "features": []}


def test_all_layers_failing_is_not_fatal():
    answers = {ds: requests.ConnectionError("refused") for ds in LAYER_DATASETS.values()}
    layers = load_reference_layers(BBOX, session=FakeSession(answers), base_url="http://proxy")
    assert set(layers) == set(LAYER_NAMES)
    assert not has_any_features(layers)


def test_unexpected_error_in_one_layer_is_contained():
    answers = {ds: FakeResponse(_fc(NEAR_LINE)) for ds in LAYER_DATASETS.values()}
    answers[LAYER_DATASETS["lakes"]] = RuntimeError("boom")
    layers = load_reference_layers(BBOX, session=FakeSession(answers), base_url="http://proxy")
    assert layers["lakes"]["features"] == []
    assert layers["land"]["features"] == [NEAR_LINE]


def test_loaded_layers_are_filtered_to_region():
    answers = {ds: FakeResponse(_fc()) for ds in LAYER_DATASETS.values()}
    answers[LAYER_DATASETS["rivers"]] = FakeResponse(_fc(FAR_LINE, NEAR_LINE))
    layers = load_reference_layers(BBOX, session=FakeSession(answers), base_url="http://proxy")
    assert layers["rivers"]["features"] == [NEAR_LINE]


def test_empty_layers_shape():
    layers = empty_layers()
    assert list(layers) == list(LAYER_NAMES)
    assert not has_any_features(layers)


class BlockingSession(FakeSession):
    def __init__(self, answers, gate):
        super().__init__(answers)
        self.gate = gate

    def get(self, url, params=None, timeout=None):
        self.gate.wait(5)
        return super().get(url, params=params, timeout=timeout)


def test_cancelled_fetch_does_not_affect_newer_fetch():
    gate = threading.Event()
    old_answers = {ds: FakeResponse(_fc(NEAR_LINE)) for ds in LAYER_DATASETS.values()}
    new_answers = {ds: FakeResponse(_fc()) for ds in LAYER_DATASETS.values()}
    new_answers[LAYER_DATASETS["coastlines"]] = FakeResponse(_fc(NEAR_LINE))

    old = start_reference_fetch(BBOX, session=BlockingSession(old_answers, gate),
                                base_url="http://proxy")
    new = start_reference_fetch(BBOX, session=FakeSession(new_answers),
                                base_url="http://proxy")
    old.cancel()
    gate.set()

    assert old.cancelled
    assert old.done()
    assert old.result() is None

    layers = new.result(timeout=5)
    assert not new.cancelled
    assert layers["coastlines"]["features"] == [NEAR_LINE]
    assert layers["land"]["features"] == []
