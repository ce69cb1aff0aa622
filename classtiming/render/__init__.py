from .timeline import TimelineEntry, assemble, timeline

__all__ = ["TimelineEntry", "assemble", "timeline"]
