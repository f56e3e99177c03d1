# Multi-entity retriever.
#  - Targeted mode: substring search per kind, small caps
#  - Broad mode: most recent rows per kind, larger caps
#  - The five kinds run concurrently; a failing kind yields [] and is logged

from __future__ import annotations

import asyncio
import logging
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional

from .store import RecordStore
from .types import EntityKind, RetrievalQuery, RetrievalResult, RetrievedItem

logger = logging.getLogger(__name__)

# kind -> (targeted limit, broad limit)
KIND_LIMITS: Mapping[EntityKind, tuple[int, int]] = MappingProxyType({
    EntityKind.BLOGS: (5, 10),
    EntityKind.EVENTS: (5, 10),
    EntityKind.PROJECTS: (5, 10),
    EntityKind.LEADERS: (5, 10),
    EntityKind.REPORTS: (3, 3),
})


class Retriever:
    def __init__(self, store: RecordStore, limits: Optional[Mapping[EntityKind, tuple[int, int]]] = None):
        self.store = store
        self.limits = limits or KIND_LIMITS

    def _search_fn(self, kind: EntityKind) -> Callable[[Optional[str], int], List[RetrievedItem]]:
        return getattr(self.store, f"search_{kind.value}")

    async def _retrieve_kind(self, kind: EntityKind, query: RetrievalQuery) -> List[RetrievedItem]:
        targeted_limit, broad_limit = self.limits[kind]
        term = None if query.is_broad else query.raw_text.strip()
        limit = broad_limit if query.is_broad else targeted_limit
        try:
            rows = await asyncio.to_thread(self._search_fn(kind), term, limit)
            return list(rows)[:limit]
        except Exception:
            logger.exception("Retrieval failed for %s; continuing without it", kind.value)
            return []

    # -------------------------
    # Public API
    # -------------------------
    async def retrieve(self, query: RetrievalQuery) -> RetrievalResult:
        kinds = list(EntityKind)
        results = await asyncio.gather(*(self._retrieve_kind(k, query) for k in kinds))
        out: RetrievalResult = dict(zip(kinds, results))
        logger.debug(
            "Retrieved (broad=%s) %s",
            query.is_broad,
            {k.value: len(v) for k, v in out.items()},
        )
        return out
