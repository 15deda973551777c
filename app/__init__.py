# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The main entry point that tells Python this 'app' folder contains the plant tracker code
# and records the basic version and package information.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version metadata for the
# Plant Care Tracker FastAPI application.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)
# - pyproject.toml (dynamic version)

"""
Plant Care Tracker - personal plant collection, care log and reminder API.

Users add plants with watering and light needs, log care activities, get
watering reminders, and receive care tips picked from a curated guide library.
"""

__version__ = "1.0.0"
__title__ = "Plant Care Tracker API"
__description__ = "Personal plant care tracker: plants, care logs, reminders and care tips"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__license__",
]
