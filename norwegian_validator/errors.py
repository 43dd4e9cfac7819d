class NotValidatedError(RuntimeError):
    """Raised when the outcome of a Validator is queried before validate() ran."""

    def __init__(self, message: str = "Not validated"):
        super().__init__(message)
