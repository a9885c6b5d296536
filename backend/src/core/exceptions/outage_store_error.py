class OutageStoreError(Exception):
    """Raised by outage repositories when the backing store fails.

    ``message`` is safe to return to API clients; the underlying driver error is
    kept as ``__cause__`` for operators.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
