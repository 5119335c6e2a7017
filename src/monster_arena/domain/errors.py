"""Domain-level exceptions for rosters and combatants."""


class RosterError(Exception):
    """Base exception for roster misuse."""


class EmptyRosterError(RosterError):
    """Raised when a roster is built without any combatants."""


class RosterDefeatedError(RosterError):
    """Raised when the active member of a defeated roster is requested."""


class TeamAssignmentError(RosterError):
    """Raised when a combatant that already belongs to a roster is added to another."""
