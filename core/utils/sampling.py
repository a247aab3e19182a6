"""Random-offset sampling for suggestion widgets."""

import random
from collections.abc import Sequence

from django.db.models import Model, QuerySet


def random_offset_sample(
    queryset: QuerySet,
    requested: int,
    order_by: Sequence[str],
    rng: random.Random | None = None,
) -> list[Model]:
    """Return up to ``requested`` consecutive rows from a random offset.

    Counts the rows, picks an offset in ``[0, max(1, total - k))`` where
    ``k = min(requested, total)`` and slices ``k`` rows ordered by
    ``order_by``. This avoids a full scan-and-shuffle but is not uniform per
    row: rows cluster around the chosen offset, and with few rows the same
    window keeps coming back. Good enough for "suggested" lists only.

    Args:
        queryset: Rows to sample from
        requested: Desired sample size
        order_by: Stable ordering; include a unique key as the last field
        rng: Random source, mainly for tests

    Returns:
        At most ``min(requested, total)`` rows; empty when there are none
    """
    if requested <= 0:
        return []

    total = queryset.count()
    if total == 0:
        return []

    size = min(requested, total)
    offset = (rng or random).randrange(max(1, total - size))
    return list(queryset.order_by(*order_by)[offset : offset + size])
