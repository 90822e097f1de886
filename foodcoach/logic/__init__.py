"""Core business logic layer.

Subpackages:
- planning: distributing recipes over the weekly calendar
- reporting: lab result summaries for the dashboard
- shopping: building shopping lists from a week plan
"""
__all__ = ["planning", "reporting", "shopping"]
