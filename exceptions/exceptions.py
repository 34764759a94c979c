class StepPreconditionError(Exception):
    def __init__(self, code: str, message: str, context: str = ""):
        super().__init__(message)
        self.code = code
        self.context = context


class InvalidFrame(StepPreconditionError):
    """Reference frame cannot be used for plane/angle math."""

    def __init__(self, message: str, code: str = "INVALID_FRAME", context: str = ""):
        super().__init__(code, message, context=context)
