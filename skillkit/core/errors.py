"""Custom exceptions for the toolkit."""


class SkillkitError(Exception):
    """Base toolkit exception."""
    pass


class UsageError(SkillkitError):
    """Nothing to work on: bad explicit path, nothing discovered, bad arguments."""
    pass


class DescriptorParseError(SkillkitError):
    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class ConfigError(SkillkitError):
    pass


class InstallError(SkillkitError):
    pass
