"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a combatant or lineup cannot be created."""


class NamePoolExhaustedError(FactoryError):
    """Raised when a name is requested from an empty name pool."""


class ScenarioError(Exception):
    """Raised when a scenario cannot be assembled or found."""
