from pantry.domain.user.entities.user import CreateUserPayload, PubUserInfo, User

__all__ = [
    "CreateUserPayload",
    "PubUserInfo",
    "User",
]
