class SocialGraphException(Exception):
    """Base exception for the application"""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ValidationError(SocialGraphException):
    """Validation related errors"""
    pass


class NotFoundError(SocialGraphException):
    """Resource not found errors"""
    pass


class ConflictError(SocialGraphException):
    """Resource conflict errors"""
    pass
