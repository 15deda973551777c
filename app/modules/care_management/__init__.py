# 📄 File: app/modules/care_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# The plant care diary and the reminders that tell users when to care for their plants.
# 🧪 Purpose (Technical Summary):
# Care management module: append-only care logs, reminder scheduling, completion and calendar view.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, app.shared
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

from typing import Dict

__version__ = "1.0.0"
__module_name__ = "care_management"
__description__ = "Care logs and reminders"


def get_module_info() -> Dict[str, str]:
    return {
        "name": __module_name__,
        "version": __version__,
        "description": __description__
    }
