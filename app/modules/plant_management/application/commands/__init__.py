# 📄 File: app/modules/plant_management/application/commands/__init__.py
# 🧭 Purpose (Layman Explanation):
# Lists the actions that change a user's plant collection.
# 🧪 Purpose (Technical Summary):
# Commands package for plant management write operations (CQRS).
# 🔗 Dependencies:
# pydantic command models
# 🔄 Connected Modules / Calls From:
# plant command handlers, plants API

from .create_plant import CreatePlantCommand
from .delete_plant import DeletePlantCommand

__all__ = ["CreatePlantCommand", "DeletePlantCommand"]
