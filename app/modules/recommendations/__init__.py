# 📄 File: app/modules/recommendations/__init__.py
# 🧭 Purpose (Layman Explanation):
# The care tips part of the tracker: a built-in handbook of houseplant care that is
# personalised with the user's plant name, problem and home description.
# 🧪 Purpose (Technical Summary):
# Recommendations module (template lookup only, no model inference).
# 🔗 Dependencies:
# plant_management (ownership checks), app.shared
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, plant deletion handler

from typing import Dict

__version__ = "1.0.0"
__module_name__ = "recommendations"
__description__ = "Template-based plant care recommendations"


def get_module_info() -> Dict[str, str]:
    return {
        "name": __module_name__,
        "version": __version__,
        "description": __description__
    }
