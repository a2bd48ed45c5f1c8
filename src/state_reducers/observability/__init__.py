"""
state_reducers.observability

Observability package.

Responsibilities:
- Structured logging configuration.
"""

# Package marker.
