"""Event helper utilities.

Quick import:
    from reading.events.event_helpers import (
        publish_plan_loaded, publish_plan_load_failed, publish_start_adopted,
        PLAN_LOADED, PLAN_LOAD_FAILED, PLAN_START_ADOPTED
    )
"""
from __future__ import annotations
from datetime import date
from typing import Any
from .Event_Bus import (
    create_event,
    PLAN_LOADED, PLAN_LOAD_FAILED, PLAN_START_ADOPTED,
    GLOBAL_EVENT_BUS
)

__all__ = [
    'publish_plan_loaded', 'publish_plan_load_failed', 'publish_start_adopted',
    'PLAN_LOADED', 'PLAN_LOAD_FAILED', 'PLAN_START_ADOPTED',
    'GLOBAL_EVENT_BUS', 'create_event'
]


def publish_plan_loaded(plan_type: Any, days: int):
    """Publish a plan.loaded event."""
    create_event(PLAN_LOADED, {
        'plan_type': plan_type,
        'days': days
    })


def publish_plan_load_failed(plan_type: Any, error: str):
    """Publish a plan.load_failed event."""
    create_event(PLAN_LOAD_FAILED, {
        'plan_type': plan_type,
        'error': error
    })


def publish_start_adopted(plan_type: Any, start_date: date):
    """Publish a plan.start_adopted event (a start date must be persisted)."""
    create_event(PLAN_START_ADOPTED, {
        'plan_type': plan_type,
        'start_date': start_date
    })
