"""Service-level errors"""


class HttpLogError(Exception):
    """Base class for HTTP log service errors"""
    pass


class EndpointNotFoundError(HttpLogError):
    """Raised when a key has no registered endpoint"""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"No entry: {key}")


class StorageError(HttpLogError):
    """Raised when the underlying database operation fails"""

    def __init__(self, message: str, operation: str):
        self.operation = operation
        super().__init__(message)


class TransportReadError(HttpLogError):
    """Raised when the request body could not be read completely"""
    pass
