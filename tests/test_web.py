"""
Unit tests for the web application components.

Tests the API models and the schedule handler without a running server.
"""

import asyncio

import pytest
from fastapi import HTTPException
from pydantic import ValidationError

from src.web.app import run_schedule, create_schedule, create_schedule_text, list_weekdays, health
from src.web.models import ScheduleRequest, ScheduleResponse, WeekModel
from src.utils.constants import DEFAULT_WEEKS, DEFAULT_WEEKDAY, THURSDAY


class TestModels:
    """Tests for request and response models."""

    def test_request_defaults(self):
        """Unset fields take the form defaults."""
        request = ScheduleRequest(names=['a', 'b'])
        assert request.weeks == DEFAULT_WEEKS
        assert request.weekday == DEFAULT_WEEKDAY
        assert request.start_date is None
        assert request.avoid_repeats is False

    def test_weekday_range(self):
        """Weekday must be 0..6."""
        with pytest.raises(ValidationError):
            ScheduleRequest(names=['a', 'b'], weekday=7)
        with pytest.raises(ValidationError):
            ScheduleRequest(names=['a', 'b'], weekday=-1)

    def test_to_config_merges_names(self):
        """Listed names and the names block are combined, blanks dropped."""
        request = ScheduleRequest(names=['Ana', ' '], names_text="Bruno\r\n\nCarla ")
        assert request.to_config().participants == ['Ana', 'Bruno', 'Carla']

    def test_to_config_week_fallback(self):
        """Missing or non-positive weeks fall back to the default."""
        assert ScheduleRequest(names=['a', 'b'], weeks=None).to_config().weeks == DEFAULT_WEEKS
        assert ScheduleRequest(names=['a', 'b'], weeks=0).to_config().weeks == DEFAULT_WEEKS

    @pytest.mark.parametrize("weeks", ["abc", ""])
    def test_non_numeric_weeks_fall_back(self, weeks):
        """Text that is not a number is accepted and falls back to the default."""
        request = ScheduleRequest(names=["a", "b"], weeks=weeks)
        assert request.to_config().weeks == DEFAULT_WEEKS

    def test_numeric_text_weeks(self):
        """A form posting the count as text still gets that many weeks."""
        request = ScheduleRequest(names=["a", "b"], weeks="3", start_date="2025-08-14")
        assert request.to_config().weeks == 3
        assert len(run_schedule(request).weeks) == 3

    def test_week_model(self):
        """Pairs are lists of two names."""
        week = WeekModel(week_number=1, label='14/08 - 20/08', pairs=[['a', 'b']],
                         start='2025-08-14', end='2025-08-20')
        assert week.pairs == [['a', 'b']]


class TestScheduleHandlers:
    """Tests for the schedule endpoints."""

    @pytest.fixture
    def request_body(self):
        return ScheduleRequest(
            names=['Ana', 'Bruno', 'Carla'],
            weeks=2,
            start_date='2025-08-14',
            weekday=THURSDAY
        )

    def test_run_schedule(self, request_body):
        """The handler builds week records."""
        result = run_schedule(request_body)
        assert len(result.weeks) == 2
        assert result.weeks[1].label == '21/08 - 27/08'

    def test_too_few_names_is_400(self):
        """Input errors become HTTP 400 with the message."""
        with pytest.raises(HTTPException) as exc_info:
            run_schedule(ScheduleRequest(names=['Ana'], start_date='2025-08-14'))
        assert exc_info.value.status_code == 400
        assert 'at least two names' in exc_info.value.detail

    def test_malformed_date_is_400(self):
        """Bad date text becomes HTTP 400."""
        with pytest.raises(HTTPException) as exc_info:
            run_schedule(ScheduleRequest(names=['a', 'b'], start_date='soon'))
        assert exc_info.value.status_code == 400

    def test_create_schedule(self, request_body):
        """The JSON endpoint returns a response model."""
        response = asyncio.run(create_schedule(request_body))
        assert isinstance(response, ScheduleResponse)
        assert response.start_date == '2025-08-14'
        assert response.weeks[0].week_number == 1
        assert response.weeks[0].pairs == [['Bruno', 'Carla'], ['Ana', 'Bruno']]

    def test_create_schedule_text(self, request_body):
        """The text endpoint returns one copy message per week."""
        response = asyncio.run(create_schedule_text(request_body))
        assert len(response.weeks) == 2
        assert response.weeks[0].startswith('*14/08 - 20/08*')

    def test_weekdays(self):
        """Seven weekdays starting from Sunday."""
        data = asyncio.run(list_weekdays())
        assert len(data['weekdays']) == 7
        assert data['weekdays'][0].name == 'Sunday'

    def test_health(self):
        """Liveness check."""
        assert asyncio.run(health()) == {'status': 'ok'}
