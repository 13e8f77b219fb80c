"""Staff scheduling package.

This package is organized by feature modules (staff, attendance, schedules,
timeline, ...) with a thin Flask controller layer and service/repository layers.
"""
