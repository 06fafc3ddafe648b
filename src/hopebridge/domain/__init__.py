"""
领域模型
"""

from .session import Role, Screen, StudentStatus, REGISTRATION_SCREEN
from .student import MarkEntry, MarksUpload, StudentProfile, StudentRegistrationDraft
from .donor import (
    BACKGROUND_OPTIONS,
    BUDGET_PRESETS,
    GENDER_OPTIONS,
    STUDY_LEVEL_OPTIONS,
    DonorPreferences,
)
from .verification import VerificationOutcome
from .fixtures import MOCK_STUDENTS, get_student, list_students

__all__ = [
    "Role",
    "Screen",
    "StudentStatus",
    "REGISTRATION_SCREEN",
    "MarkEntry",
    "MarksUpload",
    "StudentProfile",
    "StudentRegistrationDraft",
    "DonorPreferences",
    "BUDGET_PRESETS",
    "GENDER_OPTIONS",
    "BACKGROUND_OPTIONS",
    "STUDY_LEVEL_OPTIONS",
    "VerificationOutcome",
    "MOCK_STUDENTS",
    "get_student",
    "list_students",
]
