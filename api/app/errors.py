class RunError(Exception):
    status_code = 400
    message = "Bad request"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingField(RunError):
    status_code = 400
    message = "Missing required fields"


class InvalidField(RunError):
    status_code = 400
    message = "Invalid numeric field"


class NotFound(RunError):
    status_code = 404
    message = "Run not found"
