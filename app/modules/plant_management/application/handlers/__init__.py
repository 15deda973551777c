from .command_handlers import CreatePlantCommandHandler, DeletePlantCommandHandler

__all__ = ["CreatePlantCommandHandler", "DeletePlantCommandHandler"]
