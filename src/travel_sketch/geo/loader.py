"""Reference layer loading through the geo proxy.

Every layer is requested concurrently and settles on its own. A layer that
times out, returns a non-success status or an unusable body comes back as an
empty collection; the other layers are unaffected and the result always
carries every layer name.
"""

from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Any

import requests
import structlog

from travel_sketch.geo.filter import filter_by_region
from travel_sketch.geo.model import (
    LAYER_DATASETS,
    LAYER_NAMES,
    BoundingBox,
    FeatureCollection,
    empty_collection,
)
from travel_sketch.settings import settings

logger = structlog.get_logger(__name__)

ReferenceLayers = dict[str, FeatureCollection]


def empty_layers() -> ReferenceLayers:
    """All reference layers, each empty."""
    return {name: empty_collection() for name in LAYER_NAMES}


def has_any_features(layers: ReferenceLayers) -> bool:
    return any(layers.get(name, {}).get("features") for name in LAYER_NAMES)


def _fetch_layer(
    session: requests.Session,
    base_url: str,
    dataset: str,
    timeout: float,
) -> FeatureCollection | None:
    """Fetch one dataset from the proxy; None on any failure."""
    try:
        resp = session.get(base_url, params={"dataset": dataset}, timeout=timeout)
        resp.raise_for_status()
        body: Any = resp.json()
    except requests.RequestException as exc:
        logger.warning("Reference layer fetch failed", dataset=dataset, error=str(exc))
        return None
    except ValueError as exc:
        logger.warning("Reference layer body is not JSON", dataset=dataset, error=str(exc))
        return None

    if not isinstance(body, dict) or not isinstance(body.get("features"), list):
        logger.warning("Reference layer body is not a FeatureCollection", dataset=dataset)
        return None
    return body


def load_reference_layers(
    bbox: BoundingBox,
    *,
    session: requests.Session | None = None,
    base_url: str | None = None,
    timeout: float | None = None,
) -> ReferenceLayers:
    """Fetch and filter every reference layer for ``bbox``."""
    base_url = base_url or settings.GEO_PROXY_URL
    timeout = settings.GEO_TIMEOUT if timeout is None else timeout
    own_session = session is None
    if session is None:
        session = requests.Session()

    layers = empty_layers()
    try:
        with ThreadPoolExecutor(max_workers=len(LAYER_NAMES)) as pool:
            pending = {
                pool.submit(_fetch_layer, session, base_url, LAYER_DATASETS[name], timeout): name
                for name in LAYER_NAMES
            }
            for future in as_completed(pending):
                name = pending[future]
                try:
                    raw = future.result()
                except Exception as exc:
                    logger.warning("Reference layer failed", layer=name, error=str(exc), exc_info=True)
                    continue
                if raw is not None:
                    layers[name] = filter_by_region(raw, bbox)
    finally:
        if own_session:
            session.close()

    summary = {name: len(fc["features"]) for name, fc in layers.items() if fc["features"]}
    if summary:
        logger.info("Reference layers loaded", **summary)
    else:
        logger.warning("No reference layers loaded", base_url=base_url)
    return layers


class PendingLayers:
    """Handle on one in-flight reference fetch.

    Cancelling a handle discards only its own result; other handles started
    for other renders keep running and deliver normally.
    """

    def __init__(self, future: Future) -> None:
        self._future = future
        self._cancelled = threading.Event()

    def cancel(self) -> None:
        self._cancelled.set()
        self._future.cancel()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def done(self) -> bool:
        return self.cancelled or self._future.done()

    def result(self, timeout: float | None = None) -> ReferenceLayers | None:
        """Wait for the layers; None if this fetch was cancelled."""
        if self.cancelled:
            return None
        layers = self._future.result(timeout=timeout)
        if self.cancelled:
            return None
        return layers


def start_reference_fetch(
    bbox: BoundingBox,
    *,
    session: requests.Session | None = None,
    base_url: str | None = None,
    timeout: float | None = None,
) -> PendingLayers:
    """Start ``load_reference_layers`` in the background."""
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="reference-fetch")
    future = executor.submit(
        load_reference_layers,
        bbox,
        session=session,
        base_url=base_url,
        timeout=timeout,
    )
    executor.shutdown(wait=False)
    return PendingLayers(future)
