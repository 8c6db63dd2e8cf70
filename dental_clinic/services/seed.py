"""
Demo patient directory

Seeds a fresh store so the dashboard has something to show.
"""
from dental_clinic.core.logging import get_logger
from dental_clinic.database.patients import PatientRepository
from dental_clinic.database.schemas import PatientInput

logger = get_logger(__name__)

DEMO_PATIENTS = [
    {
        "name": "Jane Doe",
        "phone": "555-0101",
        "email": "jane.doe@example.com",
        "dateOfBirth": "1985-05-23",
        "medicalHistory": "No known allergies. Non-smoker.",
        "dentalHistory": "Regular check-ups. Previous filling on tooth 14.",
    },
    {
        "name": "John Smith",
        "phone": "555-0102",
        "email": "john.smith@example.com",
        "dateOfBirth": "1978-11-12",
        "medicalHistory": "Allergic to penicillin.",
        "dentalHistory": "Wisdom teeth removed in 2005. Grinds teeth at night.",
    },
    {
        "name": "Emily Johnson",
        "phone": "555-0103",
        "email": "emily.j@example.com",
        "dateOfBirth": "1992-02-29",
        "medicalHistory": "Asthma, uses an inhaler as needed.",
        "dentalHistory": "Orthodontic treatment (braces) from 2008-2010.",
    },
    {
        "name": "Michael Brown",
        "phone": "555-0104",
        "email": "michael.b@example.com",
        "dateOfBirth": "1965-09-15",
        "medicalHistory": "High blood pressure, managed with medication.",
        "dentalHistory": "Crown on tooth 3, bridge from 4-6.",
    },
    {
        "name": "Sarah Wilson",
        "phone": "555-0105",
        "email": "sarah.w@example.com",
        "dateOfBirth": "2001-07-21",
        "medicalHistory": "None.",
        "dentalHistory": "Sealants on molars.",
    },
]


def seed_demo_patients(repo: PatientRepository) -> int:
    """
    Add the demo patients when the store is empty

    Returns:
        Number of patients added (0 if the store already had patients)
    """
    if repo.list():
        return 0
    for data in DEMO_PATIENTS:
        repo.add(PatientInput.model_validate(data))
    logger.info("Seeded %d demo patients", len(DEMO_PATIENTS))
    return len(DEMO_PATIENTS)
