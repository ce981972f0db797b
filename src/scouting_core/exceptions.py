"""
Exceptions raised by the scouting career engine.

Only caller misuse raises. Expected, user-facing validation failures
(such as course enrollment) return result objects instead.
"""


class CareerEngineError(Exception):
    """Base class for all career engine errors."""


class SpecializationError(CareerEngineError):
    """Raised when a secondary specialization cannot be unlocked."""


class CareerPathError(CareerEngineError):
    """Raised on an invalid career path or independent tier transition."""


class CatalogError(CareerEngineError):
    """Raised when a static config catalog is malformed."""
