"""Average rating of a movie, computed from its vote values.

Every read path goes through this module so that the list endpoint and the
entity report the same number: the arithmetic mean of all recorded votes.
"""

import math
from typing import Optional, Sequence

from movie_catalog.domain.models.rating_summary import RatingSummary

NO_VOTES_MESSAGE = "No votes on this movie yet!"

# Integral means beyond this are printed in exponent form
EXACT_INTEGER_LIMIT = 2**53


def average(values: Sequence[float]) -> Optional[float]:
    """Arithmetic mean of ``values``, or ``None`` when there are no votes.

    ``math.fsum`` is exactly rounded, so the result does not depend on the
    order in which the votes were recorded. Each term is scaled before
    summing so that votes near the float maximum cannot overflow. Values
    must be finite; the vote schema rejects infinities and NaN.
    """
    if not values:
        return None
    count = len(values)
    return math.fsum(value / count for value in values)


def render(mean: float) -> str:
    if mean.is_integer() and abs(mean) < EXACT_INTEGER_LIMIT:
        return str(int(mean))
    return repr(mean)


def format_average(values: Sequence[float]) -> str:
    mean = average(values)
    if mean is None:
        return NO_VOTES_MESSAGE
    return render(mean)


def summarize(movie_id: Optional[int], values: Sequence[float]) -> RatingSummary:
    mean = average(values)
    return RatingSummary(
        movie_id=movie_id,
        vote_count=len(values),
        average=mean,
        average_rating=NO_VOTES_MESSAGE if mean is None else render(mean),
    )
