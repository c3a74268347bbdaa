"""Intent validator skill: untrusted RawIntent -> trusted Intent."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from mongo_nlq.models import Intent, IntentKind, RawIntent

logger = logging.getLogger(__name__)

DEFAULT_COLLECTION = "articles"

_KINDS = {k.value for k in IntentKind}


def fallback_collection(
    collections: Sequence[str], default: str = DEFAULT_COLLECTION
) -> str | None:
    """Return ``default`` if discovered, else the first collection, else None."""
    if default in collections:
        return default
    if collections:
        return collections[0]
    return None


def validate_intent(
    raw: RawIntent | None,
    collections: Sequence[str],
    default_collection: str = DEFAULT_COLLECTION,
) -> Intent:
    """Normalize model output into an executable Intent.

    Never raises: a missing object becomes ``list`` on the fallback
    collection with an empty filter, an unknown collection is replaced by
    the fallback collection and an unknown kind becomes ``list``. The query
    is passed through untouched; its shape is checked at dispatch time.
    """
    if raw is None:
        return Intent(
            kind=IntentKind.LIST,
            collection=fallback_collection(collections, default_collection),
            query={},
        )

    collection = raw.get("collection")
    if not isinstance(collection, str) or collection not in collections:
        replacement = fallback_collection(collections, default_collection)
        logger.warning(
            "Invalid or missing collection %r, using %r", collection, replacement
        )
        collection = replacement

    kind = raw.get("intent")
    if not isinstance(kind, str) or kind not in _KINDS:
        logger.warning("Invalid intent %r, using 'list'", kind)
        kind = IntentKind.LIST.value

    return Intent(
        kind=IntentKind(kind),
        collection=collection,
        query=raw.get("query", {}),
    )
