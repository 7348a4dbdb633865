import copy
import logging

from healthcare_api.core.config import settings
from healthcare_api.domain.records.repository import RecordRepository
from healthcare_api.infrastructure import sample_data
from healthcare_api.schemas.appointment import Appointment
from healthcare_api.schemas.doctor import Doctor
from healthcare_api.schemas.patient import Patient
from healthcare_api.schemas.prescription import Prescription

logger = logging.getLogger(__name__)


class DataStore:
    """Process-wide holder of the four resource collections"""

    def __init__(self, seed: bool = True):
        self.patients: RecordRepository[Patient] = RecordRepository("patients", Patient)
        self.doctors: RecordRepository[Doctor] = RecordRepository("doctors", Doctor)
        self.appointments: RecordRepository[Appointment] = RecordRepository("appointments", Appointment)
        self.prescriptions: RecordRepository[Prescription] = RecordRepository("prescriptions", Prescription)
        if seed:
            self.seed()

    def repositories(self):
        return {
            "patients": self.patients,
            "doctors": self.doctors,
            "appointments": self.appointments,
            "prescriptions": self.prescriptions,
        }

    def seed(self) -> None:
        """Load the demo data set, replacing whatever is stored"""
        self.patients.load(copy.deepcopy(sample_data.PATIENTS))
        self.doctors.load(copy.deepcopy(sample_data.DOCTORS))
        self.appointments.load(copy.deepcopy(sample_data.APPOINTMENTS))
        self.prescriptions.load(copy.deepcopy(sample_data.PRESCRIPTIONS))
        logger.info(
            "Seeded store: %d patients, %d doctors, %d appointments, %d prescriptions",
            self.patients.count(),
            self.doctors.count(),
            self.appointments.count(),
            self.prescriptions.count(),
        )

    def clear(self) -> None:
        for repository in self.repositories().values():
            repository.clear()

    def reset(self, seed: bool = None) -> None:
        """Return the store to its startup state"""
        if seed is None:
            seed = settings.SEED_SAMPLE_DATA
        self.clear()
        if seed:
            self.seed()


store = DataStore(seed=settings.SEED_SAMPLE_DATA)


def get_store() -> DataStore:
    """Dependency to get the data store"""
    return store
