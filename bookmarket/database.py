"""In-memory entity store.

Each record class (``User``, ``Book``, ``CartItem``, ``Order``, ``OrderItem``)
gets its own table mapping integer ids to records, the way a database session
maps primary keys to rows.  State lives for the lifetime of the process only.
"""
import logging
import threading
from contextlib import contextmanager
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional, Type, TypeVar

from fastapi import Request
from pydantic import ValidationError as PydanticValidationError
from sqlmodel import SQLModel

from bookmarket.exceptions import ValidationError
from bookmarket.models import ENTITY_KINDS
from bookmarket.utils.locks import KeyedLock

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=SQLModel)

# fields the store owns; callers can never overwrite them
PROTECTED_FIELDS = ("id", "created_at")


class EntityStore:
    def __init__(self, kinds: Iterable[Type[SQLModel]] = ENTITY_KINDS):
        self._lock = threading.RLock()
        self._user_locks = KeyedLock()
        self._tables: Dict[Type[SQLModel], Dict[int, SQLModel]] = {kind: {} for kind in kinds}
        self._next_ids: Dict[Type[SQLModel], int] = {kind: 1 for kind in kinds}

    def _table(self, kind: Type[T]) -> Dict[int, T]:
        try:
            return self._tables[kind]
        except KeyError:
            raise KeyError(f"Unknown entity kind: {kind.__name__}") from None

    def _validate(self, kind: Type[T], data: dict) -> T:
        try:
            return kind.model_validate(data)
        except PydanticValidationError as exc:
            errors = [
                {"loc": [str(part) for part in error["loc"]], "msg": error["msg"]}
                for error in exc.errors()
            ]
            raise ValidationError(f"Invalid {kind.__name__} data", errors=errors) from exc

    # ---------- locking ----------

    @contextmanager
    def transaction(self):
        """Hold the store-wide lock across several operations."""
        with self._lock:
            yield self

    def user_lock(self, user_id: int):
        """Serialise read-modify-write sequences scoped to one user."""
        return self._user_locks.hold(user_id)

    # ---------- CRUD ----------

    def get(self, kind: Type[T], record_id: int) -> Optional[T]:
        with self._lock:
            record = self._table(kind).get(record_id)
            return record.model_copy(deep=True) if record is not None else None

    def create(self, kind: Type[T], data: dict) -> T:
        with self._lock:
            table = self._table(kind)
            record_id = self._next_ids[kind]
            fields = {k: v for k, v in data.items() if k not in PROTECTED_FIELDS}
            record = self._validate(
                kind, {**fields, "id": record_id, "created_at": datetime.utcnow()}
            )
            # ids are never reused, even after a delete
            self._next_ids[kind] = record_id + 1
            table[record_id] = record
            return record.model_copy(deep=True)

    def update(self, kind: Type[T], record_id: int, fields: dict) -> Optional[T]:
        with self._lock:
            table = self._table(kind)
            current = table.get(record_id)
            if current is None:
                return None
            changes = {k: v for k, v in fields.items() if k not in PROTECTED_FIELDS}
            record = self._validate(kind, {**current.model_dump(), **changes})
            table[record_id] = record
            return record.model_copy(deep=True)

    def delete(self, kind: Type[T], record_id: int) -> bool:
        with self._lock:
            return self._table(kind).pop(record_id, None) is not None

    def list(self, kind: Type[T], predicate: Optional[Callable[[T], bool]] = None) -> List[T]:
        with self._lock:
            return [
                record.model_copy(deep=True)
                for record in self._table(kind).values()
                if predicate is None or predicate(record)
            ]

    def first(self, kind: Type[T], predicate: Callable[[T], bool]) -> Optional[T]:
        with self._lock:
            for record in self._table(kind).values():
                if predicate(record):
                    return record.model_copy(deep=True)
            return None

    def count(self, kind: Type[T]) -> int:
        with self._lock:
            return len(self._table(kind))


def create_store(seed: bool = False) -> EntityStore:
    store = EntityStore()
    if seed:
        from bookmarket.seed import load_sample_data
        load_sample_data(store)
    return store


def get_store(request: Request) -> EntityStore:
    return request.app.state.store
