"""Domain errors."""


class ConfigurationError(RuntimeError):
    """A required setting is missing or still holds its placeholder value."""

    def __init__(self, setting: str, message: str):
        super().__init__(message)
        self.setting = setting
        self.message = message
