class InvalidArgumentError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class CallInitiationFailure(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class CallNotReadyError(Exception):
    def __init__(self, status: str):
        self.status = status
        self.message = f"Call analysis not available: call status is {status}"
        super().__init__(self.message)


class AnalysisFetchFailure(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)
