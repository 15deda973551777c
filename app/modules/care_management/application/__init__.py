"""
Care Management Application Layer

Use cases for care logging and its effect on plants and reminders.
"""
