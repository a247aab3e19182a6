"""Domain exceptions for the blog service.

Each exception carries the HTTP status and machine-readable ``error_code``
the API renders it with.
"""


class BlogServiceError(Exception):
    """Base exception for blog service errors."""

    status_code = 500
    error_code = "internal_error"

    def __init__(self, message: str, status_code: int | None = None):
        """Initialize blog service error.

        Args:
            message: Human-readable error message
            status_code: HTTP status code override
        """
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class UserNotFoundError(BlogServiceError):
    """User does not exist (404)."""

    status_code = 404
    error_code = "user_not_found"

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(message=f"User with ID {user_id} not found")


class BlogNotFoundError(BlogServiceError):
    """Blog does not exist (404)."""

    status_code = 404
    error_code = "blog_not_found"

    def __init__(self, blog_id: str):
        self.blog_id = blog_id
        super().__init__(message=f"Blog with ID {blog_id} not found")


class BlogOwnershipError(BlogServiceError):
    """Acting user does not own the blog being changed (403)."""

    status_code = 403
    error_code = "not_blog_owner"

    def __init__(self, blog_id: str, user_id: str):
        """Initialize ownership error.

        Args:
            blog_id: ID of the blog
            user_id: ID of the user attempting the change
        """
        self.blog_id = blog_id
        self.user_id = user_id
        super().__init__(message="You can only change blogs you wrote")


class StoreError(BlogServiceError):
    """Database operation failed (500).

    Wraps ``DatabaseError`` so raw store exceptions never reach callers.
    """

    error_code = "store_error"

    def __init__(self, operation: str, message: str | None = None):
        """Initialize store error.

        Args:
            operation: Short description of the failed operation, e.g. "create blog"
            message: Optional custom error message
        """
        self.operation = operation
        super().__init__(message or f"Failed to {operation}")


class ApiClientError(BlogServiceError):
    """Blog API responded with an error to a client request."""

    error_code = "api_client_error"

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message, status_code=status_code)
