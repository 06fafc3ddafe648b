from . import sessions, students

__all__ = ["sessions", "students"]
