from datetime import date

import pytest

from eventboard.crud.crud_analytics import analytics
from tests.utils.event import create_event
from tests.utils.user import create_user_with_session

YEAR = 2025
# Fixed "today" so the past/future split does not depend on the calendar
TODAY = date(2025, 7, 1)


@pytest.fixture
def organizer(db_session):
    user, _ = create_user_with_session(db_session, username="alice")
    return user


@pytest.fixture
def march_events(db_session, organizer):
    """Three past March events: 35 tickets sold, 28 attendees."""
    return [
        create_event(db_session, organizer.id, date(YEAR, 3, 1), tickets_sold=10, attendees=8, price=10.0, status="complete"),
        create_event(db_session, organizer.id, date(YEAR, 3, 1), tickets_sold=20, attendees=15, price=5.5, status="complete"),
        create_event(db_session, organizer.id, date(YEAR, 3, 20), tickets_sold=5, attendees=5, price=0.0, status="canceled"),
    ]


def test_monthly_totals_bucket_by_month(db_session, organizer, march_events):
    create_event(db_session, organizer.id, date(YEAR, 12, 31), status="upcoming")
    create_event(db_session, organizer.id, date(YEAR + 1, 1, 1), status="upcoming")

    totals = analytics.get_monthly_totals(db_session, organizer_id=organizer.id, year=YEAR)

    assert totals.events[2] == 3
    assert totals.tickets[2] == 35
    assert totals.attendees[2] == 28
    assert totals.canceled[2] == 1
    assert totals.upcoming[2] == 0
    assert totals.events[11] == 1
    assert totals.upcoming[11] == 1
    assert sum(totals.events) == 4
    assert all(len(series) == 12 for series in (
        totals.events, totals.upcoming, totals.canceled, totals.tickets, totals.attendees
    ))


def test_monthly_totals_exclude_other_organizers(db_session, organizer, march_events):
    other, _ = create_user_with_session(db_session, username="bob")
    create_event(db_session, other.id, date(YEAR, 3, 1), tickets_sold=100)

    totals = analytics.get_monthly_totals(db_session, organizer_id=organizer.id, year=YEAR)
    assert totals.tickets[2] == 35

    other_totals = analytics.get_monthly_totals(db_session, organizer_id=other.id, year=YEAR)
    assert sum(other_totals.events) == 1


def test_empty_year_is_all_zero(db_session, organizer):
    totals = analytics.get_monthly_totals(db_session, organizer_id=organizer.id, year=YEAR)

    assert totals.events == [0] * 12
    assert totals.attendees == [0] * 12


def test_ticket_totals_are_revenue(db_session, organizer, march_events):
    create_event(db_session, organizer.id, date(YEAR, 6, 2), tickets_sold=3, price=2.5)

    totals = analytics.get_ticket_totals(db_session, organizer_id=organizer.id, year=YEAR)

    assert totals.tickets[2] == pytest.approx(10 * 10.0 + 20 * 5.5)
    assert totals.tickets[5] == pytest.approx(7.5)
    assert totals.profit == pytest.approx(sum(totals.tickets))


def test_daily_event_counts_are_sparse(db_session, organizer, march_events):
    counts = analytics.get_daily_event_counts(db_session, organizer_id=organizer.id, year=YEAR)

    assert [(c.date, c.count) for c in counts.event_counts] == [
        ("2025-03-01", 2),
        ("2025-03-20", 1),
    ]


def test_monthly_attendees(db_session, organizer, march_events):
    totals = analytics.get_monthly_attendees(db_session, organizer_id=organizer.id, year=YEAR)

    assert totals.attendees[2] == 28
    assert totals.total == 28


def test_daily_attendee_counts(db_session, organizer, march_events):
    counts = analytics.get_daily_attendee_counts(db_session, organizer_id=organizer.id, year=YEAR)

    assert [(c.date, c.count) for c in counts.attendee_counts] == [
        ("2025-03-01", 23),
        ("2025-03-20", 5),
    ]


def test_extremes_only_past_completed_events(db_session, organizer):
    kept = create_event(db_session, organizer.id, date(YEAR, 2, 1), status="complete", attendees=10)
    create_event(db_session, organizer.id, date(YEAR, 2, 2), status="canceled", attendees=50)
    create_event(db_session, organizer.id, date(YEAR, 2, 3), status="upcoming", attendees=60)
    # Completed but not before today
    create_event(db_session, organizer.id, TODAY, status="complete", attendees=70)

    extremes = analytics.get_attendance_extremes(
        db_session, organizer_id=organizer.id, year=YEAR, today=TODAY
    )

    assert [e.id for e in extremes.most] == [kept.id]
    assert [e.id for e in extremes.least] == [kept.id]


def test_extremes_are_ordered_and_limited_to_five(db_session, organizer):
    events = [
        create_event(db_session, organizer.id, date(YEAR, 1, day), status="complete", attendees=day * 10)
        for day in range(1, 8)
    ]

    extremes = analytics.get_attendance_extremes(
        db_session, organizer_id=organizer.id, year=YEAR, today=TODAY
    )

    assert [e.attendees for e in extremes.most] == [70, 60, 50, 40, 30]
    assert [e.attendees for e in extremes.least] == [10, 20, 30, 40, 50]
    assert extremes.most[0].id == events[-1].id


def test_extremes_ties_are_ordered_by_id(db_session, organizer):
    events = [
        create_event(db_session, organizer.id, date(YEAR, 1, 2), status="complete", attendees=5)
        for _ in range(6)
    ]

    extremes = analytics.get_attendance_extremes(
        db_session, organizer_id=organizer.id, year=YEAR, today=TODAY
    )

    expected = [e.id for e in events[:5]]
    assert [e.id for e in extremes.most] == expected
    assert [e.id for e in extremes.least] == expected


def test_no_shows_for_march(db_session, organizer, march_events):
    totals = analytics.get_monthly_no_shows(
        db_session, organizer_id=organizer.id, year=YEAR, today=TODAY
    )

    assert totals.no_show_counts[2] == 7
    assert totals.no_show_rates[2] == pytest.approx(7 / 3)
    assert totals.total_count == 7
    assert totals.total_rate == pytest.approx(7 / 3)


def test_no_shows_ignore_events_from_today_on(db_session, organizer):
    create_event(db_session, organizer.id, TODAY, tickets_sold=10, attendees=0)
    create_event(db_session, organizer.id, date(YEAR, 8, 1), tickets_sold=10, attendees=0)

    totals = analytics.get_monthly_no_shows(
        db_session, organizer_id=organizer.id, year=YEAR, today=TODAY
    )

    assert totals.no_show_counts == [0] * 12
    assert totals.total_count == 0
    assert totals.total_rate == 0.0


def test_month_without_no_shows_reports_zero_rate(db_session, organizer):
    # A full house in January and no events in February look the same
    create_event(db_session, organizer.id, date(YEAR, 1, 5), tickets_sold=10, attendees=10)
    create_event(db_session, organizer.id, date(YEAR, 4, 5), tickets_sold=10, attendees=6)

    totals = analytics.get_monthly_no_shows(
        db_session, organizer_id=organizer.id, year=YEAR, today=TODAY
    )

    assert totals.no_show_rates[0] == 0.0
    assert totals.no_show_rates[1] == 0.0
    assert totals.no_show_rates[3] == pytest.approx(4.0)
    # The total rate averages over every past event, including the full house
    assert totals.total_rate == pytest.approx(4 / 2)
