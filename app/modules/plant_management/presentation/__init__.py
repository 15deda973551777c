"""
Plant Management Presentation Layer

REST endpoints for plants and their watering information.
"""
