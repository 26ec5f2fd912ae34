"""Errors raised by the reading plan core.

IngestError is recoverable (the plan falls back); UnknownPlanType is a caller bug.
"""


class IngestError(Exception):
    def __init__(self, plan_type, message: str):
        super().__init__(f"{plan_type}: {message}")
        self.plan_type = plan_type
        self.message = message


class UnknownPlanType(ValueError):
    def __init__(self, value):
        super().__init__(f"Unknown plan type: {value!r}")
        self.value = value
