from fastapi import HTTPException, status


class StoreUnavailable(RuntimeError):
    """
    The store is not configured or cannot be reached at startup.
    Fatal: the process must not serve requests.
    """


class NotFound(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class QueryFailed(HTTPException):
    """Any other store-reported error. The store message is passed through."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


class ValidationError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(
            status_code=422, detail=detail)
