"""
FastAPI application for the weekly pairs web interface.
"""
from fastapi import FastAPI, HTTPException

from src.web.models import (
    ScheduleRequest, ScheduleResponse, ScheduleTextResponse, WeekdayInfo
)
from src.pairing.errors import SchedulingError
from src.pairing.form import ScheduleResult, build_schedule
from src.pairing.display import format_week_text
from src.utils.constants import WEEKDAY_NAMES

# Create FastAPI app
app = FastAPI(
    title="Weekly Pairs",
    description="Rotating weekly pair schedules",
    version="1.0.0"
)


def run_schedule(request: ScheduleRequest) -> ScheduleResult:
    """Build a schedule, turning input errors into HTTP 400."""
    try:
        return build_schedule(request.to_config())
    except SchedulingError as e:
        raise HTTPException(status_code=400, detail=str(e))


# =============================================================================
# REST API Endpoints
# =============================================================================

@app.post("/api/schedule", response_model=ScheduleResponse)
async def create_schedule(request: ScheduleRequest):
    """Generate a labeled pair schedule."""
    result = run_schedule(request)
    return ScheduleResponse.from_result(result)


@app.post("/api/schedule/text", response_model=ScheduleTextResponse)
async def create_schedule_text(request: ScheduleRequest):
    """Generate a schedule as copy text, one message per week."""
    result = run_schedule(request)
    return ScheduleTextResponse(weeks=[format_week_text(w) for w in result.weeks])


# =============================================================================
# Reference Data Endpoints
# =============================================================================

@app.get("/api/weekdays")
async def list_weekdays():
    """List weekday numbers accepted by the schedule endpoints."""
    return {
        "weekdays": [WeekdayInfo(id=i, name=name) for i, name in enumerate(WEEKDAY_NAMES)]
    }


@app.get("/api/health")
async def health():
    """Liveness check."""
    return {"status": "ok"}
