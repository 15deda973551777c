# 📄 File: app/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the api folder as a package: the front door of the plant tracker, where requests
# arrive and get routed to the right feature.
# 🧪 Purpose (Technical Summary):
# Package initialization for the API layer (versioned routers, health endpoints, middleware).
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# app.main

"""
Plant Tracker API Package

Structure:
    api/
    ├── middleware/          # Request logging and error handling
    └── v1/                  # API version 1 (router aggregation, health checks)
"""
