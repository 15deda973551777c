"""
Plant Management Application Layer

Use cases that coordinate plants with reminders, care logs and recommendations.
"""
