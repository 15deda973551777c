# 📄 File: app/modules/plant_management/application/commands/delete_plant.py
# 🧭 Purpose (Layman Explanation):
# The "remove a plant" request.
# 🧪 Purpose (Technical Summary):
# CQRS command for plant deletion with dependent-record cleanup.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# DeletePlantCommandHandler, plants API

from pydantic import BaseModel


class DeletePlantCommand(BaseModel):
    plant_id: int
    user_id: int
