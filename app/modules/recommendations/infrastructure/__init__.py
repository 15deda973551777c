"""
Recommendations Infrastructure Layer

- Database: recommendation model and repository implementation
"""
