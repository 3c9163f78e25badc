"""
Owner rating aggregation.

Reviews rate owners, not listings.  When listings are read, each one is
enriched with ``owner_rating``: the arithmetic mean of every review
whose ``owner_id`` equals the id of the listing's resolved owner, or 0
when there are none.  The value is derived on every read and never
stored.

The join is a full scan of ``reviews`` per listing, i.e.
O(listings x reviews).  That is fine for a small catalogue; a larger
one needs a grouped query in the store, with the same mean and
zero-default semantics.
"""

from typing import Any, Iterable, List, Mapping, Optional, Sequence


def owner_rating(owner_id: Optional[int], reviews: Iterable[Mapping[str, Any]]) -> float:
    """Mean rating of the reviews about ``owner_id``; 0 if there are none.

    A missing owner (``None``) matches nothing.
    """
    if owner_id is None:
        return 0
    total = 0
    count = 0
    for review in reviews:
        if review.get("owner_id") == owner_id:
            total += review.get("rating") or 0
            count += 1
    if count == 0:
        return 0
    return total / count


def _owner_id(listing: Mapping[str, Any]) -> Optional[int]:
    owner = listing.get("owner")
    if owner is None:
        return None
    return owner.get("id")


def attach_owner_ratings(
    listings: Sequence[Mapping[str, Any]],
    reviews: Sequence[Mapping[str, Any]],
) -> List[dict]:
    """Return shallow copies of ``listings`` with ``owner_rating`` added.

    The owner is taken from the populated ``owner`` of each listing, so
    a listing whose user was deleted gets 0 even if reviews for the old
    id remain.  Output order follows ``listings``; neither input is
    modified.
    """
    return [
        {**listing, "owner_rating": owner_rating(_owner_id(listing), reviews)}
        for listing in listings
    ]
