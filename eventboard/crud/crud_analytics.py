# eventboard/crud/crud_analytics.py
"""
Yearly dashboard reports for one organizer.

Every report is recomputed from the events table on each call. Monthly
reports make a single pass over the year's events and bucket each one by
``event_date.month - 1``; daily reports are grouped in SQL.
"""
from datetime import date
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from eventboard.crud.crud_event import year_bounds
from eventboard.db.session import storage_errors
from eventboard.models.event import Event
from eventboard.schemas.analytics import (
    AttendanceExtremes,
    AttendeeCounts,
    AttendeeTotals,
    CountByDate,
    EventCounts,
    MonthlyTotals,
    NoShowTotals,
    TicketTotals,
)

EXTREMES_LIMIT = 5


class CRUDAnalytics:
    """
    Aggregations over a single organizer's events in a single year.
    ``today`` defaults to the current date and decides which events count as
    past for the attendance and no-show reports.
    """

    def _events_for_year(
        self,
        db: Session,
        *,
        organizer_id: int,
        year: int,
        before: Optional[date] = None,
    ) -> List[Event]:
        start, end = year_bounds(year)
        query = db.query(Event).filter(
            Event.organizer_id == organizer_id,
            Event.event_date >= start,
            Event.event_date < end,
        )
        if before is not None:
            query = query.filter(Event.event_date < before)
        with storage_errors(db):
            return query.all()

    def _daily(self, db: Session, *, organizer_id: int, year: int, value) -> List[CountByDate]:
        start, end = year_bounds(year)
        with storage_errors(db):
            rows = (
                db.query(Event.event_date.label("day"), value.label("total"))
                .filter(
                    Event.organizer_id == organizer_id,
                    Event.event_date >= start,
                    Event.event_date < end,
                )
                .group_by(Event.event_date)
                .order_by(Event.event_date)
                .all()
            )
        return [
            CountByDate(date=row.day.isoformat(), count=int(row.total or 0))
            for row in rows
            if row.day is not None
        ]

    def get_monthly_totals(self, db: Session, *, organizer_id: int, year: int) -> MonthlyTotals:
        totals = MonthlyTotals()
        for event in self._events_for_year(db, organizer_id=organizer_id, year=year):
            month = event.event_date.month - 1
            totals.events[month] += 1
            totals.tickets[month] += event.tickets_sold
            totals.attendees[month] += event.attendees
            if event.status == "upcoming":
                totals.upcoming[month] += 1
            elif event.status == "canceled":
                totals.canceled[month] += 1
        return totals

    def get_ticket_totals(self, db: Session, *, organizer_id: int, year: int) -> TicketTotals:
        totals = TicketTotals()
        for event in self._events_for_year(db, organizer_id=organizer_id, year=year):
            revenue = event.tickets_sold * event.price
            totals.tickets[event.event_date.month - 1] += revenue
            totals.profit += revenue
        return totals

    def get_daily_event_counts(self, db: Session, *, organizer_id: int, year: int) -> EventCounts:
        return EventCounts(
            event_counts=self._daily(
                db, organizer_id=organizer_id, year=year, value=func.count(Event.id)
            )
        )

    def get_monthly_attendees(self, db: Session, *, organizer_id: int, year: int) -> AttendeeTotals:
        totals = AttendeeTotals()
        for event in self._events_for_year(db, organizer_id=organizer_id, year=year):
            totals.attendees[event.event_date.month - 1] += event.attendees
            totals.total += event.attendees
        return totals

    def get_daily_attendee_counts(
        self, db: Session, *, organizer_id: int, year: int
    ) -> AttendeeCounts:
        return AttendeeCounts(
            attendee_counts=self._daily(
                db, organizer_id=organizer_id, year=year, value=func.sum(Event.attendees)
            )
        )

    def get_attendance_extremes(
        self,
        db: Session,
        *,
        organizer_id: int,
        year: int,
        today: Optional[date] = None,
    ) -> AttendanceExtremes:
        """
        The five most and five least attended completed events held before
        ``today``. Equal attendance is ordered by event id.
        """
        today = today or date.today()
        start, end = year_bounds(year)
        query = db.query(Event).filter(
            Event.organizer_id == organizer_id,
            Event.event_date >= start,
            Event.event_date < end,
            Event.event_date < today,
            Event.status == "complete",
        )
        with storage_errors(db):
            most = (
                query.order_by(Event.attendees.desc(), Event.id.asc())
                .limit(EXTREMES_LIMIT)
                .all()
            )
            least = (
                query.order_by(Event.attendees.asc(), Event.id.asc())
                .limit(EXTREMES_LIMIT)
                .all()
            )
        return AttendanceExtremes.model_validate(
            {"most": most, "least": least}, from_attributes=True
        )

    def get_monthly_no_shows(
        self,
        db: Session,
        *,
        organizer_id: int,
        year: int,
        today: Optional[date] = None,
    ) -> NoShowTotals:
        """
        No-shows (tickets_sold - attendees) of events held before ``today``.

        A month's rate is its no-show count divided by its event count, and is
        only computed when the count is positive. A month with events but no
        no-shows therefore reports 0.0, same as a month with no events.
        """
        today = today or date.today()
        events = self._events_for_year(
            db, organizer_id=organizer_id, year=year, before=today
        )
        totals = NoShowTotals()
        events_by_month = [0] * 12

        for event in events:
            month = event.event_date.month - 1
            no_shows = event.tickets_sold - event.attendees
            totals.no_show_counts[month] += no_shows
            totals.total_count += no_shows
            events_by_month[month] += 1

        for month in range(12):
            if totals.no_show_counts[month] > 0:
                totals.no_show_rates[month] = (
                    totals.no_show_counts[month] / events_by_month[month]
                )

        if totals.total_count > 0:
            totals.total_rate = totals.total_count / len(events)
        return totals


analytics = CRUDAnalytics()
