class ValidationError(ValueError):
    """Raised for any invalid input to the grid engine."""

    def __init__(self, message="A validation error occurred"):
        super().__init__(message)
        self.message = message
