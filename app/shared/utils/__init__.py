# 📄 File: app/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# Sets up the toolbox of small helpers (logging, time, masking) that every other
# part of the plant tracker can borrow.

# 🧪 Purpose (Technical Summary):
# Re-exports the most used logging and helper functions so modules can import
# them from one place.

# 🔗 Dependencies:
# - app.shared.utils.logging
# - app.shared.utils.helpers

# 🔄 Connected Modules / Calls From:
# Used by: app.main, middleware, domain services

from .helpers import ensure_utc, generate_random_string, mask_sensitive_data, utcnow
from .logging import get_logger, log_context, setup_logging

__all__ = [
    "ensure_utc",
    "generate_random_string",
    "get_logger",
    "log_context",
    "mask_sensitive_data",
    "setup_logging",
    "utcnow",
]
