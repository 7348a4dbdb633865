"""Healthcare Demo API: patients, doctors, appointments and prescriptions."""

__version__ = "1.0.0"
