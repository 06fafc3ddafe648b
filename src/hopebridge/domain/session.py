"""
会话级枚举：角色、页面、学生审核状态
"""

from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """用户角色，在欢迎页选定"""
    STUDENT = "student"
    DONOR = "donor"
    NONE = "none"


class Screen(str, Enum):
    """页面枚举，任一时刻只有一个处于激活状态"""
    WELCOME = "welcome"
    STUDENT_REGISTER = "student_register"
    STUDENT_DASHBOARD = "student_dashboard"
    UPLOAD_MARKS = "upload_marks"
    DONOR_REGISTER = "donor_register"
    DONOR_DASHBOARD = "donor_dashboard"
    MATCHED_STUDENTS = "matched_students"
    STUDENT_DETAIL = "student_detail"


class StudentStatus(str, Enum):
    """学生审核状态"""
    PENDING = "Pending"
    VERIFIED = "Verified"
    REJECTED = "Rejected"  # 当前没有任何流程会进入此状态


# 选定角色后进入的注册页
REGISTRATION_SCREEN = {
    Role.STUDENT: Screen.STUDENT_REGISTER,
    Role.DONOR: Screen.DONOR_REGISTER,
}
