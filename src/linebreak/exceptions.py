"""Exception hierarchy for Linebreak."""


class LineBreakError(Exception):
    """Base exception for all Linebreak errors."""

    pass


class ConfigurationError(LineBreakError):
    """Errors related to breaking configuration."""

    pass


class UnknownAlgorithmError(ConfigurationError):
    """Requested line-breaking algorithm does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown line-breaking algorithm '{name}'")


class InvalidDirectionError(ConfigurationError):
    """Text direction could not be parsed."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid text direction '{value}' (expected 'ltr' or 'rtl')")


class TextError(LineBreakError):
    """Errors related to reading source text."""

    pass


class TextLoadError(TextError):
    """Error loading a text file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load text '{path}': {reason}")
