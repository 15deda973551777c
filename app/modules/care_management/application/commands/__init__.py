from .log_care_activity import LogCareActivityCommand

__all__ = ["LogCareActivityCommand"]
