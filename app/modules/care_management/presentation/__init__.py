"""
Care Management Presentation Layer

REST endpoints for care logs and reminders.
"""
