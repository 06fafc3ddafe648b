"""
Fixture student routes
"""

from fastapi import APIRouter, HTTPException

from hopebridge.domain import get_student, list_students

router = APIRouter()


@router.get("/students")
async def get_students():
    """Matched students list (fixture data, fixed order)"""
    return {"students": [s.to_dict() for s in list_students()]}


@router.get("/students/{student_id}")
async def get_student_profile(student_id: str):
    student = get_student(student_id)
    if student is None:
        raise HTTPException(status_code=404, detail="Student not found")
    return student.to_dict()
