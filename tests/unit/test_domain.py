"""
领域模型与编码工具测试
"""

import pytest

from hopebridge.domain import (
    DonorPreferences,
    StudentProfile,
    StudentRegistrationDraft,
    VerificationOutcome,
    get_student,
    list_students,
)
from hopebridge.verification import encode_document, guess_mime_type


class TestFixtures:

    def test_fixed_order(self):
        assert [s.name for s in list_students()] == ["Harika Krishna", "Rahul Verma"]

    def test_harika(self):
        student = get_student("1")
        assert student.course == "B.Tech 2nd Year"
        assert student.percentage == 86
        assert student.income == 40000
        assert student.category == "Single Parent"
        assert student.is_verified is True
        assert student.documents == ("memo1.jpg",)
        assert [(m.exam, m.score) for m in student.marks_history] == [
            ("10th", 92), ("Inter", 88), ("Sem 1", 85), ("Sem 2", 86),
        ]
        assert student.first_name == "Harika"

    def test_unknown_student(self):
        assert get_student("99") is None

    def test_list_is_a_copy(self):
        students = list_students()
        students.clear()
        assert len(list_students()) == 2


class TestStudentProfile:

    def test_to_dict_uses_camel_case(self):
        data = get_student("2").to_dict()
        assert data["isVerified"] is True
        assert data["marksHistory"][0] == {"exam": "10th", "score": 80}
        assert data["documents"] == ["memo2.jpg"]

    def test_requires_name(self):
        with pytest.raises(ValueError):
            StudentProfile(id="3", name="", course="BA", percentage=70, income=1, category="Orphan")


class TestDrafts:

    def test_student_draft_merge(self):
        draft = StudentRegistrationDraft().merge(name="Asha", income=120000, phone=None)
        assert draft.name == "Asha"
        assert draft.income == "120000"
        assert draft.phone == ""

    def test_donor_labels(self):
        prefs = DonorPreferences()
        assert prefs.budget_label == "2,000"
        assert prefs.study_level_label == "All Levels"
        prefs = prefs.merge(budget="5000", study_level="School")
        assert prefs.budget == 5000
        assert prefs.budget_label == "5,000"
        assert prefs.study_level_label == "School"
        assert prefs.to_dict()["studyLevel"] == "School"


class TestVerificationOutcome:

    def test_from_dict(self):
        outcome = VerificationOutcome.from_dict({"isValid": False, "reason": "blurry"})
        assert outcome.to_dict() == {"isValid": False, "reason": "blurry"}

    @pytest.mark.parametrize("data", [{}, {"isValid": True}, {"isValid": 1, "reason": "x"}, "yes"])
    def test_bad_shapes(self, data):
        with pytest.raises(ValueError):
            VerificationOutcome.from_dict(data)


class TestEncoding:

    def test_encode_document(self):
        assert encode_document(b"hello") == "aGVsbG8="
        assert encode_document(b"") == ""

    def test_guess_mime_type(self):
        assert guess_mime_type("memo.png") == "image/png"
        assert guess_mime_type("memo.JPG") == "image/jpeg"
        assert guess_mime_type("memo") == "image/jpeg"
        assert guess_mime_type("memo", default="application/octet-stream") == "application/octet-stream"
