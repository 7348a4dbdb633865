"""
Records Service Layer

The CRUD contract shared by every resource: lookups that fail with a
"<Resource> not found" error, id assignment on create, wholesale replace,
shallow-merge patch, and optional checks that patientId/doctorId point at
existing records.
"""

from typing import Any, Dict, Generic, List, Optional, Union
import logging

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from healthcare_api.core.exceptions import NotFoundError, ValidationError, field_error
from healthcare_api.domain.records.repository import RecordRepository, RecordT

logger = logging.getLogger(__name__)


class RecordService(Generic[RecordT]):
    """Service layer for one resource collection"""

    def __init__(
        self,
        repository: RecordRepository[RecordT],
        label: str,
        references: Optional[Dict[str, RecordRepository]] = None,
        enforce_references: bool = False
    ):
        self.repository = repository
        self.label = label
        self.references = references or {}
        self.enforce_references = enforce_references

    def _check_references(self, data: Dict[str, Any]) -> None:
        if not self.enforce_references:
            return

        errors = []
        for field, target in self.references.items():
            if field not in data:
                continue
            value = data[field]
            if not target.exists(value):
                errors.append(field_error(
                    path=to_camel(field),
                    msg=f"{target.name[:-1].capitalize()} {value} does not exist",
                    value=value
                ))
        if errors:
            raise ValidationError(errors=errors, message=f"Invalid {self.label.lower()} references")

    def _not_found(self, record_id: Any) -> NotFoundError:
        return NotFoundError(f"{self.label} not found", details={"id": record_id})

    def parse_id(self, raw_id: Union[int, str]) -> int:
        """Turn a path segment into a record id; a non-numeric id matches nothing"""
        try:
            return int(raw_id)
        except (TypeError, ValueError):
            raise self._not_found(raw_id)

    def list_records(self) -> List[RecordT]:
        return self.repository.get_all()

    def get_record(self, record_id: Union[int, str]) -> RecordT:
        """Get record by ID or raise a not found error"""
        record = self.repository.get_by_id(self.parse_id(record_id))
        if record is None:
            raise self._not_found(record_id)
        return record

    def create_record(self, record_in: BaseModel) -> RecordT:
        data = record_in.model_dump()
        self._check_references(data)
        record = self.repository.create(data)
        logger.info("Created %s %s", self.label.lower(), record.id)
        return record

    def replace_record(self, record_id: int, record_in: BaseModel) -> RecordT:
        self.get_record(record_id)
        data = record_in.model_dump()
        self._check_references(data)
        record = self.repository.replace(record_id, data)
        if record is None:
            raise self._not_found(record_id)
        logger.info("Replaced %s %s", self.label.lower(), record_id)
        return record

    def patch_record(self, record_id: int, record_in: BaseModel) -> RecordT:
        """Overwrite only the fields present in the request body"""
        self.get_record(record_id)
        changes = record_in.model_dump(exclude_unset=True)
        self._check_references(changes)
        record = self.repository.update(record_id, changes)
        if record is None:
            raise self._not_found(record_id)
        logger.info("Patched %s %s: %s", self.label.lower(), record_id, ", ".join(sorted(changes)) or "no fields")
        return record

    def delete_record(self, record_id: Union[int, str]) -> RecordT:
        record = self.repository.delete(self.parse_id(record_id))
        if record is None:
            raise self._not_found(record_id)
        logger.info("Deleted %s %s", self.label.lower(), record.id)
        return record
