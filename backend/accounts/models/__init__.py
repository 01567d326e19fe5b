from accounts.models.user import PublicUser, Role, User, UserProfile

__all__ = [
    "PublicUser",
    "Role",
    "User",
    "UserProfile",
]
