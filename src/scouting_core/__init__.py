"""
Scouting Core.

Shared records, enums, exceptions and the deterministic random source
used by every other engine package.

Usage:
    from scouting_core import (
        Scout,
        ScoutReport,
        Specialization,
        SeededRandomSource,
    )
"""

from scouting_core.enums import (
    BoardDirectiveType,
    CareerPath,
    ClubResponse,
    ConvictionLevel,
    MeetingTone,
    NPCRecommendation,
    ReportQualityTier,
    RetainerStatus,
    ReviewOutcome,
    ScoutingPhilosophy,
    ScoutingPreference,
    ScoutingPriority,
    SeasonRating,
    Specialization,
    WonderkidTier,
)
from scouting_core.exceptions import (
    CareerEngineError,
    CareerPathError,
    CatalogError,
    SpecializationError,
)
from scouting_core.models import (
    Club,
    CourseEnrollment,
    FinancialRecord,
    InboxMessage,
    League,
    Player,
    RetainerContract,
    Scout,
    ScoutReport,
    Transaction,
)
from scouting_core.random_source import RandomSource, SeededRandomSource

__all__ = [
    'BoardDirectiveType',
    'CareerPath',
    'ClubResponse',
    'ConvictionLevel',
    'MeetingTone',
    'NPCRecommendation',
    'ReportQualityTier',
    'RetainerStatus',
    'ReviewOutcome',
    'ScoutingPhilosophy',
    'ScoutingPreference',
    'ScoutingPriority',
    'SeasonRating',
    'Specialization',
    'WonderkidTier',
    'CareerEngineError',
    'CareerPathError',
    'CatalogError',
    'SpecializationError',
    'Club',
    'CourseEnrollment',
    'FinancialRecord',
    'InboxMessage',
    'League',
    'Player',
    'RetainerContract',
    'Scout',
    'ScoutReport',
    'Transaction',
    'RandomSource',
    'SeededRandomSource',
]
