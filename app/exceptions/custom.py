from enum import StrEnum


class ErrorKind(StrEnum):
    configuration = "configuration"
    fetch = "fetch"
    parse = "parse"


class EventDataError(Exception):
    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        status_code: int | None = None,
    ):
        self.kind = kind
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class CompletionError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)
