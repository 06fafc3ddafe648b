# hopebridge/core/navigation.py
"""
导航策略

默认允许任意页面之间跳转；严格模式按页面上实际存在的按钮
（前进按钮与返回箭头）构成的有向图校验跳转。
"""

from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Protocol, runtime_checkable

from hopebridge.core.errors import NavigationError
from hopebridge.domain import Screen

logger = logging.getLogger(__name__)


NAVIGATION_GRAPH: Dict[Screen, FrozenSet[Screen]] = {
    Screen.WELCOME: frozenset({Screen.STUDENT_REGISTER, Screen.DONOR_REGISTER}),
    Screen.STUDENT_REGISTER: frozenset({Screen.WELCOME, Screen.STUDENT_DASHBOARD}),
    Screen.STUDENT_DASHBOARD: frozenset({Screen.WELCOME, Screen.UPLOAD_MARKS}),
    Screen.UPLOAD_MARKS: frozenset({Screen.STUDENT_DASHBOARD}),
    Screen.DONOR_REGISTER: frozenset({Screen.WELCOME, Screen.DONOR_DASHBOARD}),
    Screen.DONOR_DASHBOARD: frozenset({Screen.WELCOME, Screen.MATCHED_STUDENTS}),
    Screen.MATCHED_STUDENTS: frozenset({Screen.DONOR_DASHBOARD, Screen.STUDENT_DETAIL}),
    Screen.STUDENT_DETAIL: frozenset({Screen.MATCHED_STUDENTS}),
}


@runtime_checkable
class TransitionPolicy(Protocol):
    """跳转校验策略"""

    def check(self, current: Screen, target: Screen) -> None:
        """不允许时抛出 NavigationError"""


class PermissivePolicy:
    """任意页面可达"""

    def check(self, current: Screen, target: Screen) -> None:
        return None


class StrictPolicy:
    """按导航图校验，停留在当前页面总是允许"""

    def __init__(self, graph: Dict[Screen, FrozenSet[Screen]] | None = None):
        self.graph = graph or NAVIGATION_GRAPH

    def allowed_targets(self, current: Screen) -> FrozenSet[Screen]:
        return self.graph.get(current, frozenset())

    def check(self, current: Screen, target: Screen) -> None:
        if target == current or target in self.allowed_targets(current):
            return
        logger.warning(f"拒绝跳转: {current.value} -> {target.value}")
        raise NavigationError(
            message=f"Cannot navigate from {current.value} to {target.value}",
            context={"from": current.value, "to": target.value},
        )


def policy_for(strict: bool) -> TransitionPolicy:
    return StrictPolicy() if strict else PermissivePolicy()
