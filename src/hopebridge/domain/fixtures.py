"""
内置学生样例数据

匹配列表直接使用此列表，没有加载/存储 I/O。
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .student import MarkEntry, StudentProfile

MOCK_STUDENTS: List[StudentProfile] = [
    StudentProfile(
        id="1",
        name="Harika Krishna",
        course="B.Tech 2nd Year",
        percentage=86,
        income=40000,
        category="Single Parent",
        is_verified=True,
        documents=("memo1.jpg",),
        description="Aiming to become a software engineer to support my mother. Need assistance for tuition fees.",
        marks_history=(
            MarkEntry("10th", 92),
            MarkEntry("Inter", 88),
            MarkEntry("Sem 1", 85),
            MarkEntry("Sem 2", 86),
        ),
    ),
    StudentProfile(
        id="2",
        name="Rahul Verma",
        course="B.Sc Computer Science",
        percentage=78,
        income=35000,
        category="Very Poor",
        is_verified=True,
        documents=("memo2.jpg",),
        description="My father is a daily wage laborer. I want to complete my degree.",
        marks_history=(
            MarkEntry("10th", 80),
            MarkEntry("Inter", 75),
            MarkEntry("Year 1", 78),
        ),
    ),
]

_BY_ID: Dict[str, StudentProfile] = {s.id: s for s in MOCK_STUDENTS}


def list_students() -> List[StudentProfile]:
    """匹配列表（固定顺序）"""
    return list(MOCK_STUDENTS)


def get_student(student_id: str) -> Optional[StudentProfile]:
    return _BY_ID.get(str(student_id))
