"""
Care Management Infrastructure Layer

- Database: care log and reminder models and repository implementations
"""
