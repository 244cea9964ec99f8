"""Domain errors for InstallHelper."""


class HelperError(RuntimeError):
    """Raised when the install workflow cannot continue."""


class EmptyCompletionError(HelperError):
    """Raised when the model reply carries no usable completion text."""

    def __init__(self, message: str, raw_response: str = ""):
        super().__init__(message)
        self.raw_response = raw_response
