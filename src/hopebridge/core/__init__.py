"""
核心模块：会话状态、导航策略与控制器
"""

from .state import AppState
from .navigation import NAVIGATION_GRAPH, PermissivePolicy, StrictPolicy, TransitionPolicy, policy_for
from .controller import SessionController

__all__ = [
    "AppState",
    "NAVIGATION_GRAPH",
    "PermissivePolicy",
    "StrictPolicy",
    "TransitionPolicy",
    "policy_for",
    "SessionController",
]
