"""Error type raised for invalid input and impossible operations."""

ERROR_MESSAGE = "Error"


class PushSwapError(Exception):
    """Raised for any input or operation the program rejects."""

    def __init__(self, message: str = ERROR_MESSAGE) -> None:
        super().__init__(message)