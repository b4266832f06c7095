"""
Exceptions raised by the persistence layer.
"""


class StoreError(Exception):
    """
    The key-value backend was unreachable or rejected a command.

    Wraps the underlying client exception (available as ``__cause__``) and
    keeps its message text, which is what the API reports back to callers.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message
