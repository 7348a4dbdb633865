from collections import Counter
from datetime import datetime, timezone
from typing import Any, Dict, Iterable
import math

from healthcare_api.infrastructure.store import DataStore


def count_by(values: Iterable[Any]) -> Dict[str, int]:
    """Count occurrences, keeping keys in first-seen order"""
    return dict(Counter(str(value) for value in values))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def average_age(ages: Iterable[int]) -> int:
    ages = list(ages)
    if not ages:
        return 0
    return round_half_up(sum(ages) / len(ages))


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class SummaryService:
    """Read-only statistics over the current collections, recomputed per call"""

    def __init__(self, store: DataStore):
        self.store = store

    def get_stats(self) -> Dict[str, Any]:
        patients = self.store.patients.get_all()
        doctors = self.store.doctors.get_all()
        appointments = self.store.appointments.get_all()
        prescriptions = self.store.prescriptions.get_all()

        return {
            "total_patients": len(patients),
            "total_doctors": len(doctors),
            "total_appointments": len(appointments),
            "total_prescriptions": len(prescriptions),
            "appointments_by_status": count_by(a.status for a in appointments),
            "doctors_by_specialty": count_by(d.specialty for d in doctors),
            "average_patient_age": average_age(p.age for p in patients),
        }

    def get_summary(self) -> Dict[str, Any]:
        summary = self.get_stats()
        summary.update({
            "timestamp": utc_timestamp(),
            "system_status": "operational",
        })
        return summary
