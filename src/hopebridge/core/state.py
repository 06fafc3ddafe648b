# hopebridge/core/state.py
"""
会话状态快照

每个控制器动作都会生成新的 AppState，旧快照保持不变。
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from hopebridge.domain import (
    DonorPreferences,
    Role,
    Screen,
    StudentProfile,
    StudentRegistrationDraft,
    StudentStatus,
)


@dataclass(frozen=True)
class AppState:
    """应用状态"""
    screen: Screen = Screen.WELCOME
    role: Role = Role.NONE
    student_draft: StudentRegistrationDraft = field(default_factory=StudentRegistrationDraft)
    donor_preferences: DonorPreferences = field(default_factory=DonorPreferences)
    selected_student: Optional[StudentProfile] = None
    student_status: StudentStatus = StudentStatus.PENDING
    docs_uploaded: bool = False
    scroll_offset: int = 0

    def evolve(self, **changes: Any) -> "AppState":
        """返回修改了指定字段的新快照"""
        return replace(self, **changes)

    @property
    def profile_completion(self) -> int:
        """资料完成度（百分比）"""
        return 80 if self.docs_uploaded else 40

    @property
    def can_upload_marks(self) -> bool:
        return self.student_status != StudentStatus.VERIFIED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "screen": self.screen.value,
            "role": self.role.value,
            "studentRegData": self.student_draft.to_dict(),
            "donorPrefs": self.donor_preferences.to_dict(),
            "selectedStudent": self.selected_student.to_dict() if self.selected_student else None,
            "studentStatus": self.student_status.value,
            "docsUploaded": self.docs_uploaded,
            "profileCompletion": self.profile_completion,
            "scrollOffset": self.scroll_offset,
        }


__all__ = ["AppState"]
