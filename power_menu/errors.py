class PowerMenuError(Exception):
    """Base error for the power menu."""


class CommandNotFoundError(PowerMenuError):
    def __init__(self, command: str):
        super().__init__(f"command not found: {command}")
        self.command = command


class ConfigError(PowerMenuError):
    pass
