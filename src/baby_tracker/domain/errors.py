"""Domain errors raised by the storage layer."""


class ParentNotFoundError(LookupError):
    """Raised when a record references a parent that does not exist."""

    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class UsernameTakenError(ValueError):
    """Raised when creating a user with a username already in use."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Username already taken: {username}")
        self.username = username
