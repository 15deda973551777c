from .user import AuthIdentity, User

__all__ = ["AuthIdentity", "User"]
