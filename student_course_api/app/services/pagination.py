"""Page slicing shared by the listing endpoints."""

from typing import List, Tuple, TypeVar

T = TypeVar("T")


def paginate(records: List[T], page: int = 1, limit: int = 10) -> Tuple[List[T], int]:
    """Return the ``page``‑th slice of ``limit`` records and the full count.

    Pages are 1‑based: page ``P`` covers ``[(P-1)*limit, P*limit)``.
    """
    start = (page - 1) * limit
    return records[start:start + limit], len(records)
