"""
Exceptions raised by the season simulator.
"""


class SimulatorError(Exception):
    """Base exception for simulator errors."""
    pass


class ConfigurationError(SimulatorError):
    """Raised when the league configuration cannot be simulated."""
    pass


class NoWinnerFoundError(SimulatorError):
    """Raised when a ranking has no candidate that beats every other candidate.

    The criteria sets end on a unique declaration index, so this signals a
    broken criteria list rather than bad league data.
    """
    pass
