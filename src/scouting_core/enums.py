"""
Shared enumerations for the scouting career engine.

Every closed taxonomy used across the career, NPC network and club
relations packages lives here so that matching logic can switch on a
single enum type instead of raw strings.
"""

from enum import Enum


class Specialization(Enum):
    """
    Scouting focus of a scout (player-controlled or NPC).

    Specializations drive club affinity in the job market, NPC report
    quality bonuses and board directive weighting.
    """

    YOUTH = "youth"
    FIRST_TEAM = "first_team"
    REGIONAL = "regional"
    DATA = "data"

    def get_description(self) -> str:
        """Get a human-readable description of this specialization."""
        descriptions = {
            Specialization.YOUTH: "Finds high-ceiling academy and teenage prospects.",
            Specialization.FIRST_TEAM: "Evaluates ready-now players for the senior squad.",
            Specialization.REGIONAL: "Covers a fixed geographic area in depth.",
            Specialization.DATA: "Leads with statistical models and measurables.",
        }
        return descriptions.get(self, "Unknown specialization")

    @classmethod
    def from_string(cls, value: str) -> "Specialization":
        """
        Parse a specialization from its string value.

        Accepts both snake_case ("first_team") and camelCase ("firstTeam").

        Raises:
            ValueError: If value does not name a specialization
        """
        normalized = value.strip()
        aliases = {"firstTeam": "first_team"}
        normalized = aliases.get(normalized, normalized).lower()
        for spec in cls:
            if spec.value == normalized:
                return spec
        valid = ", ".join(s.value for s in cls)
        raise ValueError(f"Unknown specialization '{value}'. Valid: {valid}")


class CareerPath(Enum):
    """Career path of the player scout."""

    UNDECIDED = "undecided"
    CLUB = "club"
    INDEPENDENT = "independent"


class ConvictionLevel(Enum):
    """
    Confidence grade attached to a scout report.

    TABLE_POUND is the maximum conviction: the scout stakes reputation
    on the recommendation.
    """

    NOTE = "note"
    RECOMMEND = "recommend"
    STRONG_RECOMMEND = "strong_recommend"
    TABLE_POUND = "table_pound"

    @property
    def is_bold(self) -> bool:
        """True for strong-recommend and table-pound reports."""
        return self in (ConvictionLevel.STRONG_RECOMMEND, ConvictionLevel.TABLE_POUND)


class ClubResponse(Enum):
    """How the club acted on a submitted report."""

    IGNORED = "ignored"
    SHORTLISTED = "shortlisted"
    TRIAL = "trial"
    SIGNED = "signed"

    @property
    def is_actioned(self) -> bool:
        """True when the club shortlisted or signed the player."""
        return self in (ClubResponse.SIGNED, ClubResponse.SHORTLISTED)


class ScoutingPhilosophy(Enum):
    """Recruitment philosophy of a club."""

    ACADEMY_FIRST = "academy_first"
    WIN_NOW = "win_now"
    MARKET_SMART = "market_smart"
    GLOBAL_RECRUITER = "global_recruiter"

    def get_affinity(self) -> tuple:
        """
        Get the scout specializations this philosophy prefers to hire.

        Returns:
            Tuple of Specialization values in preference order
        """
        affinity = {
            ScoutingPhilosophy.ACADEMY_FIRST: (
                Specialization.YOUTH, Specialization.REGIONAL,
            ),
            ScoutingPhilosophy.WIN_NOW: (
                Specialization.FIRST_TEAM, Specialization.DATA,
            ),
            ScoutingPhilosophy.MARKET_SMART: (
                Specialization.DATA, Specialization.REGIONAL, Specialization.FIRST_TEAM,
            ),
            ScoutingPhilosophy.GLOBAL_RECRUITER: (
                Specialization.REGIONAL, Specialization.DATA, Specialization.FIRST_TEAM,
            ),
        }
        return affinity[self]


class ScoutingPreference(Enum):
    """
    Fixed scouting-style preference of a club manager.

    Styles:
    - DATA_FIRST: rewards thorough, high-quality reports
    - EYE_TEST: rewards bold conviction
    - BALANCED: neutral
    - RESULTS_BASED: rewards reports the club acted on
    """

    DATA_FIRST = "data_first"
    EYE_TEST = "eye_test"
    BALANCED = "balanced"
    RESULTS_BASED = "results_based"


class ScoutingPriority(Enum):
    """Type of a scouting directive issued by a manager."""

    FIRST_TEAM_READY = "first_team_ready"
    YOUTH_PROSPECT = "youth_prospect"
    SPECIFIC_POSITION = "specific_position"
    LOAN_TARGET = "loan_target"
    BUDGET_OPTION = "budget_option"
    WORLD_CLASS = "world_class"


class BoardDirectiveType(Enum):
    """Type of a season-scoped board mandate (tier 5)."""

    EXPAND_TERRITORY = "expand_territory"
    CUT_COSTS = "cut_costs"
    FIND_WONDERKID = "find_wonderkid"
    BUILD_PIPELINE = "build_pipeline"
    IMPROVE_ACCURACY = "improve_accuracy"


class ReviewOutcome(Enum):
    """Four-way outcome of the end-of-season performance review."""

    PROMOTED = "promoted"
    RETAINED = "retained"
    WARNING = "warning"
    FIRED = "fired"

    def to_season_rating(self) -> "SeasonRating":
        """Map the review outcome onto the reputation season rating."""
        mapping = {
            ReviewOutcome.PROMOTED: SeasonRating.EXCELLENT,
            ReviewOutcome.RETAINED: SeasonRating.GOOD,
            ReviewOutcome.WARNING: SeasonRating.ACCEPTABLE,
            ReviewOutcome.FIRED: SeasonRating.POOR,
        }
        return mapping[self]


class SeasonRating(Enum):
    """Season rating fed into the reputation ledger."""

    EXCELLENT = "excellent"
    GOOD = "good"
    ACCEPTABLE = "acceptable"
    POOR = "poor"


class WonderkidTier(Enum):
    """Calibre of a discovered player for discovery credit."""

    JOURNEYMAN = "journeyman"
    QUALITY_PRO = "quality_pro"
    WORLD_CLASS = "world_class"
    GENERATIONAL = "generational"


class NPCRecommendation(Enum):
    """Recommendation attached to an NPC scout report."""

    PURSUE = "pursue"
    SHORTLIST = "shortlist"
    MONITOR = "monitor"


class ReportQualityTier(Enum):
    """Classification of an NPC report by its quality score."""

    POOR = "poor"
    DECENT = "decent"
    GOOD = "good"
    EXCELLENT = "excellent"


class MeetingTone(Enum):
    """Tone of a manager meeting."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class RetainerStatus(Enum):
    """Status of an independent scout's retainer contract."""

    ACTIVE = "active"
    PAUSED = "paused"
    CANCELLED = "cancelled"
