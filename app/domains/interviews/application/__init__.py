"""
Interviews Application Layer

Use cases, ports, DTOs and services for interview scheduling and reminders.
"""
