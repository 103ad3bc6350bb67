"""
Delivery booking feed.

A feed subscribes once to the live query "bookings starting today or later,
earliest first" and turns the store's snapshot callbacks into a stream of
FeedState updates the consumer reads at its own pace.

Lifecycle of one feed:

    Loading --first snapshot--> Streaming --snapshot--> Streaming
       |                            |
       +---------- close() ---------+--> Terminated

Every snapshot replaces the booking list wholesale. A store error clears
the loading flag, keeps the last list and is only logged; nothing retries.
The "today" boundary is fixed when the feed is created, so a feed that
stays open past midnight keeps its original filter.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from datetime import date
from typing import Deque, Iterator, List, Optional, Tuple

from django.utils import timezone  # type: ignore

from apps.bookings.domain.entities import BookingRecord
from shared.infrastructure.document_store import Document, DocumentStore, Query, Unsubscribe

logger = logging.getLogger(__name__)

BOOKINGS_COLLECTION = "bookings"
TODAY_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class FeedState:
    """What the feed exposes after each update."""
    bookings: Tuple[BookingRecord, ...]
    loading: bool
    today_str: str


class FeedStream:
    """
    Cancellable stream of feed updates.

    Iterating yields the updates received since the last read and stops
    when none are pending; it never blocks. close() tears the subscription
    down and may be called any number of times.
    """

    def __init__(self, feed: "DeliveryBookingFeed"):
        self._feed = feed
        self._pending: Deque[FeedState] = deque()

    def _push(self, state: FeedState) -> None:
        self._pending.append(state)

    def __iter__(self) -> Iterator[FeedState]:
        while self._pending:
            yield self._pending.popleft()

    def drain(self) -> List[FeedState]:
        return list(self)

    @property
    def closed(self) -> bool:
        return self._feed.terminated

    def close(self) -> None:
        self._feed.close()

    def __enter__(self) -> "FeedStream":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class DeliveryBookingFeed:
    """
    Live feed of upcoming bookings.

    The store client is injected; the feed owns at most one subscription and
    releases it exactly once.

    Usage:
        with DeliveryBookingFeed(store) as stream:
            for state in stream:
                render(state.bookings)
    """

    def __init__(self, store: DocumentStore, today: Optional[date] = None):
        self._store = store
        self.today_str = (today or timezone.localdate()).strftime(TODAY_FORMAT)
        self.bookings: List[BookingRecord] = []
        self.loading = True
        self._stream: Optional[FeedStream] = None
        self._unsubscribe: Optional[Unsubscribe] = None
        self._terminated = False

    @property
    def query(self) -> Query:
        # ISO yyyy-MM-dd strings sort in date order, so >= on strings is a date filter
        return (
            Query(BOOKINGS_COLLECTION)
            .where("fecha_inicio", ">=", self.today_str)
            .ordered_by("fecha_inicio", "asc")
        )

    @property
    def state(self) -> FeedState:
        return FeedState(bookings=tuple(self.bookings), loading=self.loading, today_str=self.today_str)

    @property
    def terminated(self) -> bool:
        return self._terminated

    def open(self) -> FeedStream:
        """Subscribe, or return the stream of the existing subscription."""
        if self._terminated:
            raise RuntimeError("Feed is closed")
        if self._stream is not None:
            return self._stream

        self._stream = FeedStream(self)
        try:
            self._unsubscribe = self._store.watch(self.query, self._on_snapshot, self._on_error)
        except Exception:
            self._stream = None
            raise
        logger.debug(f"Delivery feed subscribed from {self.today_str}")
        return self._stream

    def close(self) -> None:
        """Tear the subscription down; later calls do nothing."""
        if self._terminated:
            return
        self._terminated = True
        unsubscribe, self._unsubscribe = self._unsubscribe, None
        if unsubscribe is not None:
            unsubscribe()
            logger.debug("Delivery feed unsubscribed")

    def __enter__(self) -> FeedStream:
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _on_snapshot(self, documents: List[Document]) -> None:
        if self._terminated:
            return
        self.bookings = [BookingRecord.from_document(document) for document in documents]
        self.loading = False
        self._publish()

    def _on_error(self, error: Exception) -> None:
        if self._terminated:
            return
        logger.error(f"Error fetching delivery bookings: {error}")
        self.loading = False
        self._publish()

    def _publish(self) -> None:
        if self._stream is not None:
            self._stream._push(self.state)
