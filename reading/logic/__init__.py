"""Core business logic layer.

Subpackages:
- plans: plan normalization, day-of-cycle arithmetic, reading resolution and the service facade
- reporting: progress statistics and suggested reading time
"""
__all__ = ["plans", "reporting"]
