"""Классификация возраста ресурса по относительным временным корзинам."""

from __future__ import annotations

import math
from typing import Optional, Tuple

from docker_tree.descriptors.models import RelativeTime

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
MONTH = 30 * DAY
YEAR = 365 * DAY

# (верхняя граница, шаблон, единица для {n} либо None), границы исключающие
_BUCKETS: Tuple[Tuple[float, str, Optional[int]], ...] = (
    (45, "a few seconds ago", None),
    (90, "a minute ago", None),
    (45 * MINUTE, "{n} minutes ago", MINUTE),
    (90 * MINUTE, "an hour ago", None),
    (22 * HOUR, "{n} hours ago", HOUR),
    (36 * HOUR, "a day ago", None),
    (25 * DAY, "{n} days ago", DAY),
    (45 * DAY, "a month ago", None),
    (320 * DAY, "{n} months ago", MONTH),
    (548 * DAY, "a year ago", None),
    (math.inf, "{n} years ago", YEAR),
)


def round_half_up(value: float) -> int:
    """Округление .5 вверх (round() в Python округляет к чётному)."""

    return int(math.floor(value + 0.5))


def classify_age(age_seconds: float) -> RelativeTime:
    """Возвращает подпись и ранг для возраста в секундах.

    Ранг равен наименьшему возрасту, дающему ту же подпись, поэтому
    корзины сравниваются хронологически независимо от текста.
    Отрицательный или нечисловой (NaN, бесконечность) возраст считается нулевым.
    """

    age = float(age_seconds)
    if not math.isfinite(age) or age < 0:
        age = 0.0
    lower = 0.0
    for upper, template, unit in _BUCKETS:
        if age < upper:
            if unit is None:
                return RelativeTime(label=template, rank=int(lower))
            count = round_half_up(age / unit)
            rank = max(lower, (count - 0.5) * unit)
            return RelativeTime(label=template.format(n=count), rank=int(math.ceil(rank)))
        lower = upper
    raise AssertionError("unreachable: the last bucket is unbounded")  # pragma: no cover


def describe_created(created_at: float, now: float) -> RelativeTime:
    """Относительное время создания ресурса на момент ``now``."""

    return classify_age(now - created_at)
