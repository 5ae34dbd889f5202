"""Exceptions raised by the generator's sampling calls."""


class PRNGError(ValueError):
    """Base class for generator argument errors."""


class InvalidRange(PRNGError):
    def __init__(self, min_value: int, max_value: int):
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(
            f"Empty range: max_value ({max_value}) is below min_value ({min_value})."
        )


class InvalidLength(PRNGError):
    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Length must be non-negative, received {length}.")


class InvalidBound(PRNGError):
    def __init__(self, name: str, value: int, limit: int):
        self.name = name
        self.value = value
        self.limit = limit
        super().__init__(f"{name} ({value}) is outside the supported bounds [-{limit}, {limit}].")
