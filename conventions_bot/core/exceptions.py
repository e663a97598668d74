"""Core module exceptions"""

class CoreError(Exception):
    """Base class for core module errors"""
    pass

class ConfigurationError(CoreError):
    """Raised when a required configuration value is missing or malformed"""
    def __init__(self, variable: str, reason: str):
        self.variable = variable
        self.reason = reason
        super().__init__(f"{variable}: {reason}")

class ServiceConnectionError(CoreError):
    """Raised when there are issues with service connections"""
    pass
