# 📄 File: app/modules/plant_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything about the plants in a user's collection and when they need water.
# 🧪 Purpose (Technical Summary):
# Plant management module: plant CRUD, watering status derivation and watering frequency suggestions.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, app.shared
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

from typing import Dict

__version__ = "1.0.0"
__module_name__ = "plant_management"
__description__ = "Plants and watering status"


def get_module_info() -> Dict[str, str]:
    return {
        "name": __module_name__,
        "version": __version__,
        "description": __description__
    }
