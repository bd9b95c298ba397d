"""
Pydantic models for the weekly pairs web API.

Defines request/response schemas for the REST endpoints.
"""
from pydantic import BaseModel, Field
from typing import List, Optional, Union

from src.pairing.form import ScheduleConfig, ScheduleResult, parse_names, parse_weeks
from src.utils.constants import DEFAULT_WEEKS, DEFAULT_WEEKDAY


class ScheduleRequest(BaseModel):
    """Form fields for generating a schedule."""
    names: List[str] = Field(default_factory=list, description="Participant names")
    names_text: Optional[str] = Field(default=None, description="Names block, one per line")
    weeks: Optional[Union[int, str]] = Field(default=DEFAULT_WEEKS, description="Weeks to schedule; missing, non-numeric or < 1 uses 10")
    start_date: Optional[str] = Field(default=None, description="YYYY-MM-DD or DD/MM/YYYY; empty means next weekday after today")
    weekday: int = Field(default=DEFAULT_WEEKDAY, ge=0, le=6, description="0=Sunday .. 6=Saturday")
    avoid_repeats: bool = Field(default=False, description="Prefer pairs not used in earlier weeks")

    def to_config(self) -> ScheduleConfig:
        """Merge listed and block names into a schedule configuration."""
        names = [n.strip() for n in self.names if n.strip()]
        names.extend(parse_names(self.names_text))
        return ScheduleConfig(
            participants=names,
            weeks=parse_weeks(self.weeks),
            start_date=self.start_date,
            weekday=self.weekday,
            avoid_repeats=self.avoid_repeats
        )


class WeekModel(BaseModel):
    """One labeled week."""
    week_number: int
    label: str
    pairs: List[List[str]]  # [[a, b], ...]
    start: str
    end: str


class ScheduleResponse(BaseModel):
    """Generated schedule."""
    start_date: str
    weeks: List[WeekModel]

    @classmethod
    def from_result(cls, result: ScheduleResult) -> "ScheduleResponse":
        return cls(**result.to_dict())


class ScheduleTextResponse(BaseModel):
    """Copy text, one entry per week."""
    weeks: List[str]


class WeekdayInfo(BaseModel):
    """Weekday reference entry."""
    id: int
    name: str
