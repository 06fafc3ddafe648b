"""
导航策略测试
"""

import pytest

from hopebridge.core.controller import SessionController
from hopebridge.core.errors import NavigationError
from hopebridge.core.navigation import (
    NAVIGATION_GRAPH,
    PermissivePolicy,
    StrictPolicy,
    TransitionPolicy,
    policy_for,
)
from hopebridge.domain import Role, Screen


def test_graph_covers_every_screen():
    assert set(NAVIGATION_GRAPH) == set(Screen)


def test_policy_for():
    assert isinstance(policy_for(True), StrictPolicy)
    assert isinstance(policy_for(False), PermissivePolicy)
    assert isinstance(policy_for(True), TransitionPolicy)


class TestStrictPolicy:

    def test_rejects_welcome_to_detail(self):
        controller = SessionController(policy=StrictPolicy())
        with pytest.raises(NavigationError) as exc_info:
            controller.navigate(Screen.STUDENT_DETAIL)
        assert exc_info.value.context == {"from": "welcome", "to": "student_detail"}
        assert controller.state.screen == Screen.WELCOME
        assert controller.history == []

    def test_rejected_choose_role_leaves_role_unset(self):
        controller = SessionController(policy=StrictPolicy())
        controller.navigate(Screen.STUDENT_REGISTER)
        with pytest.raises(NavigationError):
            controller.choose_role(Role.DONOR)
        assert controller.state.role == Role.NONE
        assert controller.state.screen == Screen.STUDENT_REGISTER

        controller.navigate(Screen.WELCOME)
        assert controller.choose_role(Role.DONOR).role == Role.DONOR

    def test_same_screen_allowed(self):
        StrictPolicy().check(Screen.UPLOAD_MARKS, Screen.UPLOAD_MARKS)

    def test_student_path(self):
        controller = SessionController(policy=StrictPolicy())
        controller.choose_role(Role.STUDENT)
        controller.submit_student_registration(name="Asha")
        controller.navigate(Screen.UPLOAD_MARKS)
        assert controller.navigate(Screen.STUDENT_DASHBOARD).screen == Screen.STUDENT_DASHBOARD

    def test_donor_path(self):
        controller = SessionController(policy=StrictPolicy())
        controller.choose_role(Role.DONOR)
        controller.save_donor_preferences(budget=1000)
        controller.navigate(Screen.MATCHED_STUDENTS)
        controller.open_student("2")
        assert controller.navigate(Screen.MATCHED_STUDENTS).selected_student is None

    def test_custom_graph(self):
        policy = StrictPolicy({Screen.WELCOME: frozenset({Screen.STUDENT_DETAIL})})
        policy.check(Screen.WELCOME, Screen.STUDENT_DETAIL)
        assert policy.allowed_targets(Screen.DONOR_DASHBOARD) == frozenset()


def test_permissive_allows_everything():
    policy = PermissivePolicy()
    for current in Screen:
        for target in Screen:
            policy.check(current, target)
