class TaskListError(Exception):
    pass


class TaskValidationError(TaskListError):
    """User input rejected; `message` is meant to be shown as-is."""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidFilterError(TaskListError, ValueError):
    pass
