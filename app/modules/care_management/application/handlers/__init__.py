from .command_handlers import LogCareActivityCommandHandler

__all__ = ["LogCareActivityCommandHandler"]
