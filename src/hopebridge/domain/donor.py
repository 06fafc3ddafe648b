"""
捐助者偏好模型
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, List

# 页面上提供的选项
BUDGET_PRESETS = (1000, 2000, 5000)
GENDER_OPTIONS = ("Any Gender", "Girls Only", "Boys Only")
BACKGROUND_OPTIONS = ("Any Background", "Single Parent", "Orphan", "Very Poor Income")
STUDY_LEVEL_OPTIONS = ("Any Level", "School", "Intermediate (11-12th)", "Degree / Engineering")

DEFAULT_BUDGET_LABEL = "2,000"


@dataclass(frozen=True)
class DonorPreferences:
    """捐助者偏好，按字段局部合并更新"""
    budget: int = 0
    gender: str = "Any"
    background: str = "Any"
    study_level: str = "Any"
    location: str = ""

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def merge(self, **changes: Any) -> "DonorPreferences":
        """只更新给定字段，其余保持不变"""
        if "budget" in changes:
            changes["budget"] = int(changes["budget"] or 0)
        return replace(self, **changes)

    @property
    def budget_label(self) -> str:
        """月度预算展示文本，未设置时显示默认值"""
        return f"{self.budget:,}" if self.budget else DEFAULT_BUDGET_LABEL

    @property
    def study_level_label(self) -> str:
        return "All Levels" if self.study_level == "Any" else self.study_level

    def to_dict(self) -> Dict[str, Any]:
        return {
            "budget": self.budget,
            "gender": self.gender,
            "background": self.background,
            "studyLevel": self.study_level,
            "location": self.location,
        }
