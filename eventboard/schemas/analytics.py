# eventboard/schemas/analytics.py
"""
Read-only report shapes for the dashboard. Monthly lists always have 12
entries, index 0 = January. Daily lists are sparse: days without events are
absent rather than zero.
"""
from pydantic import BaseModel, Field
from typing import List

from eventboard.schemas.event import Event


def _months(kind):
    return Field(default_factory=lambda: [kind() for _ in range(12)])


class MonthlyTotals(BaseModel):
    events: List[int] = _months(int)
    upcoming: List[int] = _months(int)
    canceled: List[int] = _months(int)
    tickets: List[int] = _months(int)
    attendees: List[int] = _months(int)


class TicketTotals(BaseModel):
    # Revenue per month (tickets_sold * price); float sums, not currency-exact.
    tickets: List[float] = _months(float)
    profit: float = 0.0


class CountByDate(BaseModel):
    date: str = Field(..., json_schema_extra={"example": "2025-03-14"})
    count: int


class EventCounts(BaseModel):
    event_counts: List[CountByDate] = []


class AttendeeTotals(BaseModel):
    attendees: List[int] = _months(int)
    total: int = 0


class AttendeeCounts(BaseModel):
    attendee_counts: List[CountByDate] = []


class AttendanceExtremes(BaseModel):
    most: List[Event] = []
    least: List[Event] = []


class NoShowTotals(BaseModel):
    no_show_counts: List[int] = _months(int)
    # 0.0 both for months without events and for months without no-shows.
    no_show_rates: List[float] = _months(float)
    total_count: int = 0
    total_rate: float = 0.0
