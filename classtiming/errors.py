from __future__ import annotations


class TimingError(ValueError):
    """Base class for every failure raised by the timing core."""


class ValidationError(TimingError):
    pass


class FormatError(TimingError):
    pass


class OrderError(TimingError):
    def __init__(self, start_time: str, end_time: str):
        super().__init__("End time must be after start time")
        self.start_time = start_time
        self.end_time = end_time


class ConflictError(TimingError):
    def __init__(self, label: str, start_time: str, end_time: str):
        super().__init__(f"Overlaps with {label} ({start_time} - {end_time})")
        self.label = label
        self.start_time = start_time
        self.end_time = end_time
