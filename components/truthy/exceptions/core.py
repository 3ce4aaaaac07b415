class TruthyException(Exception):
    """Base class for exceptions raised by the truthy components."""

    def __init__(self, message: str = "An error occurred in the truthy library"):
        self.message = message
        super().__init__(self.message)
