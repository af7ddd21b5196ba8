"""
student_assignment.api.routers

HTTP routers: health probes, students, projects.
"""
