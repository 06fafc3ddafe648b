# hopebridge/core/controller.py
"""
导航/状态控制器

持有当前会话的 AppState 快照，把用户动作映射为状态转换。
所有操作都在内存中完成，没有持久化。
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from hopebridge.application.events import SessionEvent, new_session_id
from hopebridge.application.ports.event_log_port import EventLogPort
from hopebridge.core.errors import SessionError, ValidationError
from hopebridge.core.navigation import PermissivePolicy, TransitionPolicy
from hopebridge.core.state import AppState
from hopebridge.domain import (
    REGISTRATION_SCREEN,
    DonorPreferences,
    Role,
    Screen,
    StudentProfile,
    StudentRegistrationDraft,
    StudentStatus,
    get_student,
)
from hopebridge.infrastructure.event_log import LoggingEventLog

logger = logging.getLogger(__name__)

NavigationListener = Callable[[AppState], None]


class SessionController:
    """
    单会话控制器

    使用示例:
    ```python
    controller = SessionController()
    controller.choose_role(Role.STUDENT)
    controller.submit_student_registration(name="Asha")
    assert controller.state.screen == Screen.STUDENT_DASHBOARD
    ```
    """

    def __init__(
        self,
        *,
        session_id: Optional[str] = None,
        policy: Optional[TransitionPolicy] = None,
        event_log: Optional[EventLogPort] = None,
        initial_state: Optional[AppState] = None,
    ):
        self.session_id = session_id or new_session_id()
        self.policy = policy or PermissivePolicy()
        self.event_log = event_log or LoggingEventLog()
        self._state = initial_state or AppState()
        self._history: List[AppState] = []
        self._navigation_listeners: List[NavigationListener] = []

    # ==================== 状态访问 ====================

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def history(self) -> List[AppState]:
        """之前的快照（按时间顺序）"""
        return list(self._history)

    def add_navigation_listener(self, listener: NavigationListener) -> None:
        """注册导航回调（例如滚动到顶部）"""
        self._navigation_listeners.append(listener)

    def _commit(self, new_state: AppState, action: str, payload: Optional[Dict[str, Any]] = None) -> AppState:
        self._history.append(self._state)
        self._state = new_state
        self.event_log.append(
            SessionEvent(
                session_id=self.session_id,
                action=action,
                screen=new_state.screen.value,
                payload=payload or {},
            )
        )
        return new_state

    # ==================== 导航 ====================

    def navigate(self, target: Screen | str) -> AppState:
        """
        切换当前页面并把滚动位置重置到顶部

        离开详情页时清空 selected_student。
        """
        target = Screen(target)
        current = self._state.screen
        self.policy.check(current, target)

        changes: Dict[str, Any] = {"screen": target, "scroll_offset": 0}
        if target != Screen.STUDENT_DETAIL:
            changes["selected_student"] = None

        state = self._commit(
            self._state.evolve(**changes),
            "navigate",
            {"from": current.value, "to": target.value},
        )
        logger.debug(f"[{self.session_id}] 导航 {current.value} -> {target.value}")

        for listener in self._navigation_listeners:
            listener(state)
        return state

    def scroll_to(self, offset: int) -> AppState:
        """记录页面滚动位置（由展示层调用）"""
        return self._commit(self._state.evolve(scroll_offset=max(0, int(offset))), "scroll", {"offset": offset})

    # ==================== 角色 ====================

    def set_role(self, role: Role | str) -> AppState:
        """设置角色；同一会话内只能选定一次"""
        role = Role(role)
        current = self._state.role
        if current == role:
            return self._state
        if current != Role.NONE:
            raise SessionError(
                message=f"Role already set to {current.value}; reset the session to switch roles",
                context={"current": current.value, "requested": role.value},
            )
        logger.info(f"[{self.session_id}] 角色: {role.value}")
        return self._commit(self._state.evolve(role=role), "set_role", {"role": role.value})

    def choose_role(self, role: Role | str) -> AppState:
        """欢迎页动作：设置角色并进入对应的注册页"""
        role = Role(role)
        if role not in REGISTRATION_SCREEN:
            raise ValidationError(message=f"Cannot register as role '{role.value}'")
        target = REGISTRATION_SCREEN[role]
        # 先校验跳转，避免角色已写入而页面未切换
        self.policy.check(self._state.screen, target)
        self.set_role(role)
        return self.navigate(target)

    # ==================== 表单草稿 ====================

    def update_student_draft(self, **fields: Any) -> AppState:
        """局部更新学生注册草稿"""
        unknown = set(fields) - set(StudentRegistrationDraft.field_names())
        if unknown:
            raise ValidationError(
                message=f"Unknown registration fields: {', '.join(sorted(unknown))}",
                context={"fields": sorted(unknown)},
            )
        draft = self._state.student_draft.merge(**fields)
        return self._commit(self._state.evolve(student_draft=draft), "update_student_draft", {"fields": sorted(fields)})

    def update_donor_preferences(self, **fields: Any) -> AppState:
        """局部更新捐助者偏好"""
        unknown = set(fields) - set(DonorPreferences.field_names())
        if unknown:
            raise ValidationError(
                message=f"Unknown preference fields: {', '.join(sorted(unknown))}",
                context={"fields": sorted(unknown)},
            )
        try:
            prefs = self._state.donor_preferences.merge(**fields)
        except (TypeError, ValueError) as e:
            raise ValidationError(message=f"Invalid budget: {fields.get('budget')!r}") from e
        return self._commit(self._state.evolve(donor_preferences=prefs), "update_donor_preferences", dict(fields))

    def submit_student_registration(self, **fields: Any) -> AppState:
        """提交学生注册，进入学生主页"""
        if fields:
            self.update_student_draft(**fields)
        return self.navigate(Screen.STUDENT_DASHBOARD)

    def save_donor_preferences(self, **fields: Any) -> AppState:
        """保存偏好，进入捐助者主页"""
        if fields:
            self.update_donor_preferences(**fields)
        return self.navigate(Screen.DONOR_DASHBOARD)

    # ==================== 学生选择 ====================

    def select_student(self, profile: StudentProfile) -> AppState:
        """选中学生，之后应跳转到详情页"""
        return self._commit(self._state.evolve(selected_student=profile), "select_student", {"student_id": profile.id})

    def open_student(self, student_id: str) -> AppState:
        """匹配列表中的“查看资料”：选中并跳转到详情页"""
        profile = get_student(student_id)
        if profile is None:
            raise ValidationError(message=f"Student not found: {student_id}", code="STUDENT_NOT_FOUND")
        self.select_student(profile)
        return self.navigate(Screen.STUDENT_DETAIL)

    # ==================== 审核 ====================

    def complete_verification(self) -> AppState:
        """文档校验通过：状态置为 Verified 并标记已上传"""
        logger.info(f"[{self.session_id}] 文档校验通过")
        return self._commit(
            self._state.evolve(student_status=StudentStatus.VERIFIED, docs_uploaded=True),
            "complete_verification",
        )

    def reset(self) -> AppState:
        """回到全新会话状态"""
        return self._commit(AppState(), "reset")


__all__ = ["SessionController", "NavigationListener"]
