"""Unit tests for calendar/form.py - per-change form state."""

from zoneinfo import ZoneInfo

import pytest

from addtocal.calendar import (
    FORM_FIELDS,
    EventDetails,
    FormState,
    GeneratedLinks,
    apply_change,
    generate_links,
)


class TestFormState:
    """Form state starts empty and is replaced on every change."""

    def test_empty_state(self):
        state = FormState.empty()
        assert state.event == EventDetails()
        assert state.links == GeneratedLinks.empty()

    def test_change_recomputes_all_links(self):
        state = apply_change(FormState.empty(), "title", "Launch")

        assert state.event == EventDetails(title="Launch")
        assert state.links == generate_links(EventDetails(title="Launch"))

    def test_changes_accumulate(self):
        state = FormState.empty()
        state = apply_change(state, "title", "Launch")
        state = apply_change(state, "start_date", "2024-01-15T12:00")
        state = apply_change(state, "end_date", "2024-01-15T13:00")

        assert state.event == EventDetails(
            title="Launch", start_date="2024-01-15T12:00", end_date="2024-01-15T13:00"
        )
        assert "dates=20240115T120000Z%2F20240115T130000Z" in state.links.google_calendar_link

    def test_previous_state_is_untouched(self):
        first = apply_change(FormState.empty(), "location", "Room 1")
        second = apply_change(first, "location", "Room 2")

        assert first.event.location == "Room 1"
        assert "location=Room%201" in first.links.google_calendar_link
        assert second.event.location == "Room 2"
        assert "location=Room%202" in second.links.google_calendar_link

    def test_clearing_a_date_drops_its_fragments(self):
        state = apply_change(FormState.empty(), "end_date", "2024-01-15T13:00")
        state = apply_change(state, "end_date", "")

        assert "%2F" not in state.links.google_calendar_link
        assert "et=" not in state.links.yahoo_calendar_link

    def test_local_zone_is_used(self):
        state = apply_change(
            FormState.empty(), "start_date", "2024-07-01T12:00", ZoneInfo("Europe/Stockholm")
        )
        assert "dates=20240701T100000Z" in state.links.google_calendar_link

    def test_unknown_field_raises(self):
        with pytest.raises(ValueError, match="Unknown form field"):
            apply_change(FormState.empty(), "attendees", "everyone")

    def test_form_fields_order(self):
        assert FORM_FIELDS == ("title", "description", "location", "start_date", "end_date")
