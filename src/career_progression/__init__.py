"""
Career Progression.

Reputation ledger, end-of-season performance review, job market,
career path state machine and course catalog for the player scout.

Usage:
    from career_progression import (
        update_reputation,
        ReportSubmitted,
        calculate_performance_review,
        generate_job_offers,
        accept_job_offer,
    )

Example:
    scout = update_reputation(scout, ReportSubmitted(quality=72))
    review = calculate_performance_review(scout, reports, season=2025)
    offers = generate_job_offers(rng, scout, clubs, season=2025)
"""

from career_progression.models import (
    Course,
    CourseEffect,
    EnrollmentResult,
    IndependentTierRequirement,
    JobOffer,
    PerformanceReview,
)
from career_progression.reputation import (
    DiscoveryCredit,
    FailedSigning,
    ReportSubmitted,
    ReputationEvent,
    SeasonEnd,
    SuccessfulSigning,
    TablePoundFailure,
    TablePoundSuccess,
    apply_reputation_events,
    calculate_reputation_delta,
    update_reputation,
)
from career_progression.performance_review import (
    calculate_performance_review,
    determine_review_outcome,
)
from career_progression.job_market import (
    accept_job_offer,
    generate_job_offers,
)
from career_progression.career_path import (
    advance_independent_tier,
    can_choose_independent_path,
    check_independent_tier_advancement,
    choose_career_path,
    get_independent_tier_requirements,
)
from career_progression.courses import (
    CourseCatalog,
    enroll_in_course,
    get_available_courses,
    get_course_effects,
    has_required_courses_for_tier,
    process_weekly_course_progress,
)

__all__ = [
    # Models
    'Course',
    'CourseEffect',
    'EnrollmentResult',
    'IndependentTierRequirement',
    'JobOffer',
    'PerformanceReview',
    # Reputation
    'DiscoveryCredit',
    'FailedSigning',
    'ReportSubmitted',
    'ReputationEvent',
    'SeasonEnd',
    'SuccessfulSigning',
    'TablePoundFailure',
    'TablePoundSuccess',
    'apply_reputation_events',
    'calculate_reputation_delta',
    'update_reputation',
    # Review
    'calculate_performance_review',
    'determine_review_outcome',
    # Job market
    'accept_job_offer',
    'generate_job_offers',
    # Career path
    'advance_independent_tier',
    'can_choose_independent_path',
    'check_independent_tier_advancement',
    'choose_career_path',
    'get_independent_tier_requirements',
    # Courses
    'CourseCatalog',
    'enroll_in_course',
    'get_available_courses',
    'get_course_effects',
    'has_required_courses_for_tier',
    'process_weekly_course_progress',
]
