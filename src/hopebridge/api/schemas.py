"""
Request bodies for the session routes.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from hopebridge.domain import Role, Screen


class RoleRequest(BaseModel):
    role: Role


class NavigateRequest(BaseModel):
    screen: Screen


class StudentDraftRequest(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    income: Optional[str] = None
    course: Optional[str] = None
    state: Optional[str] = None
    district: Optional[str] = None
    submit: bool = Field(False, description="Also submit the registration and open the dashboard")

    def changes(self) -> dict:
        return self.model_dump(exclude_none=True, exclude={"submit"})


class DonorPreferencesRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    budget: Optional[int] = Field(None, ge=0)
    gender: Optional[str] = None
    background: Optional[str] = None
    study_level: Optional[str] = Field(None, alias="studyLevel")
    location: Optional[str] = None
    save: bool = Field(False, description="Also save the preferences and open the donor dashboard")

    def changes(self) -> dict:
        return self.model_dump(exclude_none=True, exclude={"save"})


class SelectStudentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    student_id: str = Field(..., alias="studentId")
    open_detail: bool = Field(True, alias="openDetail", description="Navigate to the detail screen")
