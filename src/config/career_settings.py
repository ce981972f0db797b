"""
Centralized Career Engine Settings

Class-level tunables for the season loop and the ambient stack.
Change these to alter pacing without touching engine code.
"""


class CareerSettings:
    """
    Career engine tunables.

    Scoring formulas keep their constants local; these settings control
    pacing, NPC fatigue and how the service layer is wired.
    """

    # ================================================================
    # SEASON PACING
    # ================================================================

    WEEKS_PER_SEASON = 38
    # Job offers expire in the final four weeks

    PULSE_INTERVAL_WEEKS = 4
    # Performance pulse runs every N weeks (week 4, 8, 12, ...)

    SNAPSHOT_INTERVAL_WEEKS = 4
    # Analytics snapshots run on weeks 1, 5, 9, ...

    MANAGER_MEETING_INTERVAL_WEEKS = 6
    # Tier 4+ scouts meet their manager every N weeks

    # ================================================================
    # NPC NETWORK
    # ================================================================

    NPC_NETWORK_MIN_TIER = 4
    # Below this tier the NPC pass is skipped entirely

    BOARD_DIRECTIVES_MIN_TIER = 5
    # Board directives apply from this tier

    NPC_WEEKLY_FATIGUE_GAIN = 8
    NPC_REST_FATIGUE_RECOVERY = 25
    NPC_FATIGUE_PENALTY_THRESHOLD = 70
    # Base report quality drops by 15 above this fatigue
    NPC_FATIGUE_QUALITY_THRESHOLD = 60
    # Reading noise widens above this fatigue
    NPC_EXHAUSTION_THRESHOLD = 80
    # Morale drops once when fatigue first crosses this line

    # ================================================================
    # LOGGING
    # ================================================================

    LOG_LEVEL = "INFO"
    LOG_DIR = "logs"
    LOG_TO_FILE = False
    # Engine code never configures logging; entry points call
    # logging_config.setup_logging() with these values.
