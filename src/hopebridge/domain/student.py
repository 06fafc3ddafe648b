"""
学生数据模型
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class MarkEntry:
    """单次考试成绩"""
    exam: str
    score: float

    def to_dict(self) -> Dict[str, Any]:
        return {"exam": self.exam, "score": self.score}


@dataclass(frozen=True)
class StudentProfile:
    """学生档案（原型中为只读样例数据）"""

    id: str
    name: str
    course: str
    percentage: float
    income: int
    category: str
    is_verified: bool = False
    documents: Tuple[str, ...] = ()
    description: Optional[str] = None
    marks_history: Tuple[MarkEntry, ...] = ()

    def __post_init__(self):
        """数据校验"""
        if not self.id:
            raise ValueError("Student ID cannot be empty")
        if not self.name:
            raise ValueError("Student name cannot be empty")

    @property
    def first_name(self) -> str:
        return self.name.split(" ")[0]

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典（字段名与前端约定一致）"""
        return {
            "id": self.id,
            "name": self.name,
            "course": self.course,
            "percentage": self.percentage,
            "income": self.income,
            "category": self.category,
            "isVerified": self.is_verified,
            "documents": list(self.documents),
            "description": self.description,
            "marksHistory": [m.to_dict() for m in self.marks_history],
        }


@dataclass(frozen=True)
class StudentRegistrationDraft:
    """学生注册表单草稿，只存在于会话内存中"""
    name: str = ""
    phone: str = ""
    email: str = ""
    income: str = ""
    course: str = ""
    state: str = ""
    district: str = ""

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def merge(self, **changes: str) -> "StudentRegistrationDraft":
        """只更新给定字段，其余保持不变"""
        return replace(self, **{k: "" if v is None else str(v) for k, v in changes.items()})

    def to_dict(self) -> Dict[str, str]:
        return {name: getattr(self, name) for name in self.field_names()}


@dataclass
class MarksUpload:
    """上传页面暂存的待校验文件"""
    data: bytes
    mime_type: str
    filename: str = ""

    @property
    def size(self) -> int:
        return len(self.data)
