"""
student_assignment.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Request context propagation so every store/service log line carries the request id.
"""

# Package marker.
