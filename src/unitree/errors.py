"""Exceptions raised while building a test tree."""


class UnitreeError(Exception):
    """Base class for unitree errors."""


class ConstructionError(UnitreeError):
    """A named test type could not be instantiated.

    Attributes:
    ----------
    identifier : str
        Type identifier that was being constructed
    message : str
        Diagnostic describing the failure
    """

    def __init__(self, identifier: str, message: str) -> None:
        self.identifier = identifier
        self.message = message
        super().__init__(f"{identifier}: {message}")


class ReloadError(UnitreeError):
    """A fresh definition of a test type could not be loaded."""

    def __init__(self, identifier: str, message: str) -> None:
        self.identifier = identifier
        self.message = message
        super().__init__(f"{identifier}: {message}")
