"""
Storage failures raised by AgentStore.

Driver and pool errors (refused connections, pool checkout timeouts, failing
statements) are wrapped in StorageError; the API layer logs the cause and
answers with a fixed 500 message.
"""


class StorageError(Exception):
    """A database round trip failed; message holds the driver detail for logs only."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
