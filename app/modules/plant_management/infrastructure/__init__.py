"""
Plant Management Infrastructure Layer

- Database: SQLAlchemy model and repository implementation
"""
