"""Simple Event Bus / Observer implementation for reading plan lifecycle events.

Event names used so far:
  plan.loaded        -> payload {"plan_type": PlanType, "days": int}
  plan.load_failed   -> payload {"plan_type": PlanType, "error": str}
  plan.start_adopted -> payload {"plan_type": PlanType, "start_date": date}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
from collections import defaultdict
from typing import Callable, Any, Dict, List
import logging

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
PLAN_LOADED = "plan.loaded"
PLAN_LOAD_FAILED = "plan.load_failed"
PLAN_START_ADOPTED = "plan.start_adopted"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %s", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


def create_event(event_name: str, payload: Any = None) -> None:
	"""Publish an event on the global bus."""
	GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'create_event',
	'PLAN_LOADED', 'PLAN_LOAD_FAILED', 'PLAN_START_ADOPTED'
]
