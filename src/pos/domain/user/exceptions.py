"""User domain exceptions."""

from pos.domain.shared.exceptions import ConflictError, ErrorCode


class UsernameAlreadyExistsError(ConflictError):
    """Username already registered."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(
            f"Username already registered: {username}",
            code=ErrorCode.DUPLICATE_USERNAME,
            details={"username": username},
        )
