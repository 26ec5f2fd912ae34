"""
Input validation schemas using Pydantic: raw plan documents and API request bodies.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import date


# --- Raw plan documents (extra keys are ignored) ---

class DayEntry(BaseModel):
    """One day of the NT90 schedule or of an OT365 month."""
    day: int = Field(..., ge=1)
    reading: str
    theme: Optional[str] = None
    chapters: Optional[int] = None

    @field_validator('chapters')
    @classmethod
    def positive_or_none(cls, v):
        """Non-positive chapter counts are treated as missing."""
        if v is not None and v < 1:
            return None
        return v


class NT90Document(BaseModel):
    schedule: List[DayEntry]


class OT365Month(BaseModel):
    month: str
    focus: Optional[str] = None
    days: List[DayEntry]


class OT365Document(BaseModel):
    monthlyPlans: List[OT365Month]


class EthiopianReading(DayEntry):
    """A reading whose `day` is relative to the start of its month."""
    feast: Optional[str] = None


class EthiopianMonth(BaseModel):
    name: str
    feast: Optional[str] = None
    readings: List[EthiopianReading]


class EthiopianDocument(BaseModel):
    months: List[EthiopianMonth]


# --- API request bodies ---

class CurrentPlanInput(BaseModel):
    """Schema for switching the active plan."""
    plan: str = Field(..., min_length=1)


class CompleteReadingInput(BaseModel):
    """Schema for marking a plan day as read."""
    plan: str = Field(..., min_length=1)
    day: int = Field(..., ge=1, le=365)
    completed_on: Optional[date] = None


class StartDateInput(BaseModel):
    """Schema for setting a plan start date; today when omitted."""
    plan: str = Field(..., min_length=1)
    start_date: Optional[date] = None

    @field_validator('plan')
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip()
