from dataclasses import dataclass

PERIOD_TYPES = {
    "regular": "Regular Class",
    "lab": "Lab/Practical",
    "activity": "Activity",
    "assembly": "Assembly",
    "sports": "Sports/PT",
}

BREAK_TYPES = {
    "short_break": "Short Break",
    "lunch": "Lunch Break",
    "assembly": "Assembly",
    "prayer": "Prayer",
}


@dataclass(frozen=True)
class Period:
    id: str
    period_number: int
    name: str
    short_name: str
    start_time: str
    end_time: str
    period_type: str = "regular"
    order_index: int = 0

    @property
    def label(self) -> str:
        return self.short_name or self.name


@dataclass(frozen=True)
class Break:
    id: str
    name: str
    short_name: str
    start_time: str
    end_time: str
    break_type: str = "short_break"
    after_period: int = 1  # informational only
    order_index: int = 0

    @property
    def label(self) -> str:
        return self.short_name or self.name
