# src/chainlens/exceptions.py


class ExplorerError(Exception):
    """Base exception class for query errors surfaced to clients"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ExplorerError):
    """Raised when a required query parameter is missing or malformed"""
    status_code = 400


class InvalidRequestError(ExplorerError):
    """Raised when the query type discriminator is not recognized"""
    status_code = 400


class InternalError(ExplorerError):
    """Raised for unexpected faults; the message never carries the cause"""
    status_code = 500
