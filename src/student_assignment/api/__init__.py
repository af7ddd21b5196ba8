"""
student_assignment.api

API package for the Student / Project assignment service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring, transfer schemas, and error mapping.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: parse request, call a service, convert the result.
