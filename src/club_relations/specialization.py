"""Secondary specialization unlock."""

from dataclasses import replace

from scouting_core.enums import Specialization
from scouting_core.exceptions import SpecializationError
from scouting_core.models import Scout

SECONDARY_SPEC_MIN_TIER = 3
SECONDARY_SPEC_MIN_LEVEL = 8


def can_unlock_secondary_spec(scout: Scout) -> bool:
    """Tier 3+, specialization level 8+, and no secondary yet."""
    return (
        scout.career_tier >= SECONDARY_SPEC_MIN_TIER
        and scout.specialization_level >= SECONDARY_SPEC_MIN_LEVEL
        and scout.secondary_specialization is None
    )


def unlock_secondary_specialization(scout: Scout, specialization: Specialization) -> Scout:
    """
    Unlock a secondary specialization.

    Raises:
        SpecializationError: If the scout is ineligible or the choice
            matches the primary specialization
    """
    if not can_unlock_secondary_spec(scout):
        raise SpecializationError(
            f"Scout {scout.id} is not eligible to unlock a secondary specialization. "
            f"Requires tier >= {SECONDARY_SPEC_MIN_TIER}, specialization level >= "
            f"{SECONDARY_SPEC_MIN_LEVEL}, and no existing secondary specialization."
        )
    if specialization == scout.primary_specialization:
        raise SpecializationError(
            f"Secondary specialization must differ from primary "
            f"({scout.primary_specialization.value})."
        )
    return replace(scout, secondary_specialization=specialization)
