"""
应用层：会话事件与端口定义
"""

from .events import SessionEvent, new_session_id
from .ports import EventLogPort

__all__ = ["SessionEvent", "new_session_id", "EventLogPort"]
