from .composite_event_log import CompositeEventLog
from .logging_event_log import LoggingEventLog
from .memory_event_log import InMemoryEventLog

__all__ = ["CompositeEventLog", "LoggingEventLog", "InMemoryEventLog"]
