"""Property checks for in-place integer sort routines."""

from __future__ import annotations

import logging
import random
import time
from collections import Counter
from statistics import mean
from typing import Callable, Iterable, Mapping, MutableSequence, Sequence

from .sorter import is_sorted

LOGGER = logging.getLogger(__name__)

_RNG = random.Random(1337)

SortFn = Callable[[MutableSequence[int]], None]

DATASETS: tuple[tuple[int, ...], ...] = (
    (64, 34, 25, 12, 22, 11, 90),
    (5, 3, 5, 1),
    (),
    (42,),
    tuple(range(10)),
    tuple(range(32, 0, -1)),
    (0, -7, 3, -7, 12, -100, 5),
    tuple(_RNG.randint(-50, 50) for _ in range(25)),
)

PROPERTIES = ("sortedness", "permutation", "idempotence", "matches_builtin")


def is_permutation(before: Iterable[int], after: Iterable[int]) -> bool:
    """Return ``True`` when both iterables hold the same values with the same multiplicity."""

    return Counter(before) == Counter(after)


def _check_dataset(sort_fn: SortFn, dataset: Sequence[int]) -> tuple[dict[str, bool], float]:
    payload = list(dataset)
    start = time.perf_counter()
    sort_fn(payload)
    duration_ms = (time.perf_counter() - start) * 1000

    once = list(payload)
    sort_fn(payload)
    results = {
        "sortedness": is_sorted(once),
        "permutation": is_permutation(dataset, once),
        "idempotence": payload == once,
        "matches_builtin": once == sorted(dataset),
    }
    return results, duration_ms


def check_properties(sort_fn: SortFn, datasets: Sequence[Sequence[int]] = DATASETS) -> Mapping[str, float]:
    """Return the fraction of *datasets* on which *sort_fn* satisfies each property.

    ``sort_fn`` must sort its argument in place. An exception raised for one
    dataset marks every property as failed for that dataset and evaluation
    moves on to the next.
    """

    passes = dict.fromkeys(PROPERTIES, 0)
    durations: list[float] = []
    LOGGER.debug("Checking sort routine across %s dataset(s)", len(datasets))
    for index, dataset in enumerate(datasets):
        try:
            results, duration_ms = _check_dataset(sort_fn, dataset)
        except Exception as exc:  # noqa: BLE001
            LOGGER.debug("Dataset %s: sort routine raised %r", index + 1, exc)
            continue
        durations.append(duration_ms)
        for name, ok in results.items():
            if ok:
                passes[name] += 1
            else:
                LOGGER.debug("Dataset %s: %s violated for %s", index + 1, name, list(dataset)[:10])

    total = len(datasets)
    metrics: dict[str, float] = {
        name: (count / total if total else 1.0) for name, count in passes.items()
    }
    metrics["time_ms"] = mean(durations) if durations else 0.0
    LOGGER.debug("Property check finished: %s", metrics)
    return metrics
