"""Game error types.

Only two conditions are faults: a malformed symbol multiset at deck build
time and a caller that selects a card without checking it first. Everything
else (clicking a matched card, restarting an idle game) is routine input and
is ignored by the controller.
"""


class GameError(Exception):
    """Base class for game errors."""


class InvalidConfig(GameError, ValueError):
    """Symbol multiset cannot form a deck of pairs."""


class PreconditionViolation(GameError, RuntimeError):
    """Operation called without its precondition holding."""
