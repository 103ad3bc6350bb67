"""
Document Store Client

Store-client interface used by the apps instead of a module-wide database
handle. Stores serve two kinds of reads:

- get(): one-shot query returning the matching documents
- watch(): live query that pushes the full result set to a callback
  whenever the matching data changes, until the returned unsubscribe
  callable is invoked

Two implementations ship with the project:
- InMemoryDocumentStore: plain dictionaries, used in development and tests
- DjangoDocumentStore: maps collections to Django models and re-runs the
  query on post_save/post_delete signals
"""

from __future__ import annotations

import itertools
import logging
import operator
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from django.db.models.signals import post_delete, post_save

logger = logging.getLogger(__name__)

SnapshotCallback = Callable[[List["Document"]], None]
ErrorCallback = Callable[[Exception], None]
Unsubscribe = Callable[[], None]

OPERATORS: Dict[str, Callable[[Any, Any], bool]] = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
    "in": lambda value, options: value in options,
}


@dataclass(frozen=True)
class Filter:
    """A single ``field <op> value`` condition."""
    field: str
    op: str
    value: Any

    def __post_init__(self):
        if self.op not in OPERATORS:
            raise ValueError(f"Unsupported operator: {self.op}")

    def matches(self, data: Mapping[str, Any]) -> bool:
        # Documents without the field never match, whatever the operator
        if self.field not in data:
            return False
        try:
            return OPERATORS[self.op](data[self.field], self.value)
        except TypeError:
            return False


@dataclass(frozen=True)
class Query:
    """
    Filtered, ordered query against one collection.

    Built fluently:
        Query("bookings").where("fecha_inicio", ">=", "2026-01-01").ordered_by("fecha_inicio")
    """
    collection: str
    filters: Tuple[Filter, ...] = ()
    order_by: Optional[str] = None
    descending: bool = False

    def where(self, field: str, op: str, value: Any) -> "Query":
        return replace(self, filters=self.filters + (Filter(field, op, value),))

    def ordered_by(self, field: str, direction: str = "asc") -> "Query":
        if direction not in ("asc", "desc"):
            raise ValueError(f"Unsupported direction: {direction}")
        return replace(self, order_by=field, descending=direction == "desc")


@dataclass(frozen=True)
class Document:
    """Stored document: identifier plus its fields."""
    id: str
    data: Mapping[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, **self.data}


class DocumentStore(ABC):
    """Abstract store client."""

    @abstractmethod
    def get(self, query: Query) -> List[Document]:
        """Run the query once."""

    @abstractmethod
    def watch(
        self,
        query: Query,
        on_snapshot: SnapshotCallback,
        on_error: Optional[ErrorCallback] = None,
    ) -> Unsubscribe:
        """
        Subscribe to the query.

        The current result set is delivered right away, then again after
        every change to the collection. Errors raised while evaluating the
        query go to on_error when given, otherwise they propagate.
        """

    @staticmethod
    def _deliver(
        query: Query,
        run: Callable[[Query], List[Document]],
        on_snapshot: SnapshotCallback,
        on_error: Optional[ErrorCallback],
    ) -> None:
        try:
            documents = run(query)
        except Exception as exc:
            if on_error is None:
                raise
            on_error(exc)
            return
        on_snapshot(documents)


class InMemoryDocumentStore(DocumentStore):
    """Dictionary-backed store; writes notify watchers synchronously."""

    def __init__(self):
        self._collections: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self._watchers: Dict[int, Tuple[Query, SnapshotCallback, Optional[ErrorCallback]]] = {}
        self._tokens = itertools.count(1)

    def set(self, collection: str, doc_id: str, data: Mapping[str, Any]) -> None:
        self._collections.setdefault(collection, {})[doc_id] = dict(data)
        self._notify(collection)

    def add(self, collection: str, data: Mapping[str, Any]) -> str:
        doc_id = uuid.uuid4().hex
        self.set(collection, doc_id, data)
        return doc_id

    def delete(self, collection: str, doc_id: str) -> None:
        if self._collections.get(collection, {}).pop(doc_id, None) is not None:
            self._notify(collection)

    def get(self, query: Query) -> List[Document]:
        documents = [
            Document(doc_id, dict(data))
            for doc_id, data in self._collections.get(query.collection, {}).items()
            if all(condition.matches(data) for condition in query.filters)
        ]
        if query.order_by:
            field = query.order_by
            documents = [doc for doc in documents if field in doc.data]
            documents.sort(key=lambda doc: doc.data[field], reverse=query.descending)
        return documents

    def watch(self, query, on_snapshot, on_error=None):
        token = next(self._tokens)
        self._watchers[token] = (query, on_snapshot, on_error)
        logger.debug(f"Watching {query.collection} (subscription {token})")
        self._deliver(query, self.get, on_snapshot, on_error)

        def unsubscribe() -> None:
            if self._watchers.pop(token, None) is not None:
                logger.debug(f"Stopped watching {query.collection} (subscription {token})")

        return unsubscribe

    @property
    def active_watchers(self) -> int:
        return len(self._watchers)

    def _notify(self, collection: str) -> None:
        for token, (query, on_snapshot, on_error) in list(self._watchers.items()):
            # A callback may have unsubscribed a later watcher
            if token not in self._watchers or query.collection != collection:
                continue
            self._deliver(query, self.get, on_snapshot, on_error)


class DjangoDocumentStore(DocumentStore):
    """
    Store over Django models.

    Each collection name maps to a model whose instances provide
    ``to_document()``; filter fields are model field names. Live queries
    re-run on the model's post_save and post_delete signals, in the thread
    that performed the write.
    """

    LOOKUPS = {
        "==": "exact",
        "<": "lt",
        "<=": "lte",
        ">": "gt",
        ">=": "gte",
        "in": "in",
    }

    _dispatch_ids = itertools.count(1)

    def __init__(self, collections: Mapping[str, Any]):
        self._collections = dict(collections)

    def _model(self, collection: str):
        try:
            return self._collections[collection]
        except KeyError:
            raise ValueError(f"Unknown collection: {collection}") from None

    def get(self, query: Query) -> List[Document]:
        queryset = self._model(query.collection)._default_manager.all()
        for condition in query.filters:
            if condition.op == "!=":
                queryset = queryset.exclude(**{condition.field: condition.value})
            else:
                lookup = f"{condition.field}__{self.LOOKUPS[condition.op]}"
                queryset = queryset.filter(**{lookup: condition.value})
        if query.order_by:
            prefix = "-" if query.descending else ""
            queryset = queryset.order_by(f"{prefix}{query.order_by}", "pk")
        return [Document(str(obj.pk), obj.to_document()) for obj in queryset]

    def watch(self, query, on_snapshot, on_error=None):
        model = self._model(query.collection)
        dispatch_uid = f"document-store-watch-{next(self._dispatch_ids)}"

        def on_change(**_: object) -> None:
            self._deliver(query, self.get, on_snapshot, on_error)

        post_save.connect(on_change, sender=model, weak=False, dispatch_uid=dispatch_uid)
        post_delete.connect(on_change, sender=model, weak=False, dispatch_uid=dispatch_uid)
        logger.debug(f"Watching {query.collection} ({dispatch_uid})")

        def unsubscribe() -> None:
            post_save.disconnect(sender=model, dispatch_uid=dispatch_uid)
            post_delete.disconnect(sender=model, dispatch_uid=dispatch_uid)

        try:
            self._deliver(query, self.get, on_snapshot, on_error)
        except Exception:
            unsubscribe()
            raise
        return unsubscribe
