"""fittrack exceptions."""


class FitTrackError(Exception):
    """Base exception for fittrack errors."""
    pass


class ValidationError(FitTrackError):
    """Raised when a record is missing a required field."""
    pass


class RecordNotFoundError(FitTrackError):
    """Raised when an id-addressed operation targets an absent record."""

    def __init__(self, collection: str, record_id: int | str):
        super().__init__(f"{collection} record {record_id} not found")
        self.collection = collection
        self.record_id = record_id


class StoreError(FitTrackError):
    """Raised when a collection file cannot be written."""
    pass


class APIError(FitTrackError):
    """Raised when an API call fails."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
