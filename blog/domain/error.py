"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class AuthenticationError(DomainError):
    """Raised for a wrong password or a missing, invalid or expired token."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a resource with the same identifier already exists."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} already exists: {identifier}")


class ProtectedCategoryError(DomainError):
    """Raised when attempting to delete a default sub-category."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Default sub-category cannot be deleted: {value}")


class CategoryNotEmptyError(DomainError):
    """Raised when a sub-category still holds posts."""

    def __init__(self, value: str, count: int):
        self.value = value
        self.count = count
        super().__init__(
            f"Sub-category {value} still contains {count} post(s); "
            "move or delete them first"
        )


class ContentPathError(DomainError):
    """Raised when a category or slug would resolve outside the content root."""

    pass


class PostRelocationError(DomainError):
    """Raised when a moved post was written but its old file could not be removed."""

    def __init__(self, slug: str, old_path: str, new_path: str):
        self.slug = slug
        self.old_path = old_path
        self.new_path = new_path
        super().__init__(
            f"Post {slug} was written to {new_path} but {old_path} could not be removed"
        )
