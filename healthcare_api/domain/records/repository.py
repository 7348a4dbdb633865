"""
Records Repository Layer

Owned, id-keyed storage for one resource collection. All id assignment and
mutation happens under the collection lock.
"""

from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, TypeVar
import threading

from pydantic import BaseModel

RecordT = TypeVar("RecordT", bound=BaseModel)


class RecordRepository(Generic[RecordT]):
    """Repository for one in-memory collection of records"""

    def __init__(self, name: str, record_class: Callable[..., RecordT]):
        self.name = name
        self.record_class = record_class
        self._records: Dict[int, RecordT] = {}
        self._lock = threading.RLock()

    def _next_id(self) -> int:
        return max(self._records, default=0) + 1

    def create(self, record_data: Dict[str, Any]) -> RecordT:
        """Create a new record with the next free id"""
        with self._lock:
            record = self.record_class(id=self._next_id(), **record_data)
            self._records[record.id] = record
            return record

    def load(self, records: Iterable[Dict[str, Any]]) -> None:
        """Replace the whole collection with records that carry their own ids"""
        with self._lock:
            self._records = {}
            for record_data in records:
                record = self.record_class(**record_data)
                self._records[record.id] = record

    def get_by_id(self, record_id: int) -> Optional[RecordT]:
        """Get record by ID"""
        return self._records.get(record_id)

    def get_all(self) -> List[RecordT]:
        """Get all records in insertion order"""
        with self._lock:
            return list(self._records.values())

    def exists(self, record_id: int) -> bool:
        return record_id in self._records

    def count(self) -> int:
        return len(self._records)

    def replace(self, record_id: int, record_data: Dict[str, Any]) -> Optional[RecordT]:
        """Replace a record wholesale, keeping its id"""
        with self._lock:
            if record_id not in self._records:
                return None
            record = self.record_class(id=record_id, **record_data)
            self._records[record_id] = record
            return record

    def update(self, record_id: int, update_data: Dict[str, Any]) -> Optional[RecordT]:
        """Shallow-merge the given fields onto a record"""
        with self._lock:
            current = self._records.get(record_id)
            if current is None:
                return None
            record = current.model_copy(update=update_data)
            self._records[record_id] = record
            return record

    def delete(self, record_id: int) -> Optional[RecordT]:
        """Delete a record, returning it"""
        with self._lock:
            return self._records.pop(record_id, None)

    def clear(self) -> None:
        with self._lock:
            self._records = {}
