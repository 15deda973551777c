"""
User Management API

- Version 1 (/api/v1)
  - Users (/users): current user information
"""
