"""
Courses and certifications.

Courses cost money up front, take several weeks to complete, and grant
reputation, skill or attribute bonuses. Some gate career tiers.

The catalog is static JSON under src/config/career/course_catalog.json,
loaded and cached by CourseCatalog.
"""

import json
import logging
import math
from dataclasses import replace
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from career_progression.models import Course, CourseEffect, EnrollmentResult
from scouting_core.exceptions import CatalogError
from scouting_core.models import CourseEnrollment, FinancialRecord, Scout, Transaction

logger = logging.getLogger(__name__)

TIER_COURSE_GATES = {4: "fa_level_3", 5: "uefa_a"}


class CourseCatalog:
    """
    Loader for the course catalog.

    Loads course definitions from JSON once and caches them.
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize catalog with config directory path.

        Args:
            config_path: Path to config directory (defaults to src/config)
        """
        if config_path is None:
            src_dir = Path(__file__).parent.parent
            config_path = src_dir / "config"

        self.config_path = config_path
        self.catalog_path = config_path / "career" / "course_catalog.json"

        self._courses: Dict[str, Course] = {}
        self._load_courses()

    def _load_courses(self):
        """Load all course definitions from JSON"""
        if not self.catalog_path.exists():
            raise FileNotFoundError(f"Course catalog not found: {self.catalog_path}")

        with open(self.catalog_path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        for course_id, course_data in data.items():
            try:
                self._courses[course_id] = Course.from_dict(course_id, course_data)
            except (KeyError, ValueError) as e:
                raise CatalogError(f"Invalid course '{course_id}': {e}") from e

        for course in self._courses.values():
            for prereq in course.prerequisites:
                if prereq not in self._courses:
                    raise CatalogError(
                        f"Course '{course.id}' has unknown prerequisite '{prereq}'"
                    )

        logger.debug(f"Loaded {len(self._courses)} courses from {self.catalog_path}")

    def get(self, course_id: str) -> Optional[Course]:
        return self._courses.get(course_id)

    def all_courses(self) -> List[Course]:
        """All courses in catalog order."""
        return list(self._courses.values())

    def __contains__(self, course_id: str) -> bool:
        return course_id in self._courses

    def __len__(self) -> int:
        return len(self._courses)


_default_catalog: Optional[CourseCatalog] = None


def get_default_catalog() -> CourseCatalog:
    """Get the shared catalog loaded from the packaged config."""
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = CourseCatalog()
    return _default_catalog


def get_available_courses(
    scout: Scout,
    completed_courses: Iterable[str],
    catalog: Optional[CourseCatalog] = None
) -> List[Course]:
    """
    Get courses the scout can enroll in now.

    Excludes completed courses, courses above the scout's tier and
    courses with an uncompleted prerequisite.
    """
    catalog = catalog or get_default_catalog()
    completed = set(completed_courses)
    return [
        course for course in catalog.all_courses()
        if course.id not in completed
        and scout.career_tier >= course.min_tier
        and all(prereq in completed for prereq in course.prerequisites)
    ]


def enroll_in_course(
    finances: FinancialRecord,
    course_id: str,
    week: int,
    season: int,
    scout_tier: Optional[int] = None,
    catalog: Optional[CourseCatalog] = None
) -> EnrollmentResult:
    """
    Enroll in a course, deducting its cost.

    Checks, in order: an enrollment already in progress, unknown course,
    already completed, missing prerequisite, tier too low, insufficient
    funds. Failures are returned, not raised.

    Args:
        finances: Current financial record
        course_id: Course to enroll in
        week: Current week
        season: Current season
        scout_tier: Scout's career tier; tier check is skipped when None
        catalog: Course catalog (defaults to the packaged one)
    """
    catalog = catalog or get_default_catalog()

    if finances.active_enrollment is not None:
        return EnrollmentResult.failed("Already enrolled in a course.")

    course = catalog.get(course_id)
    if course is None:
        return EnrollmentResult.failed("Course not found.")

    if course_id in finances.completed_courses:
        return EnrollmentResult.failed("Course already completed.")

    for prereq_id in course.prerequisites:
        if prereq_id not in finances.completed_courses:
            prereq = catalog.get(prereq_id)
            prereq_name = prereq.name if prereq else prereq_id
            return EnrollmentResult.failed(f"Missing prerequisite: {prereq_name}.")

    if scout_tier is not None and scout_tier < course.min_tier:
        return EnrollmentResult.failed(
            f"Requires career tier {course.min_tier}. Current tier: {scout_tier}."
        )

    if finances.balance < course.cost:
        return EnrollmentResult.failed(
            f"Insufficient funds. Need £{course.cost}, have £{math.floor(finances.balance)}."
        )

    # Enrollments are assumed not to cross a season boundary
    enrollment = CourseEnrollment(
        course_id=course_id,
        start_week=week,
        start_season=season,
        completion_week=week + course.duration_weeks,
        completion_season=season,
    )
    transaction = Transaction(
        week=week,
        season=season,
        amount=-course.cost,
        description=f"Enrolled in {course.name}",
    )

    logger.info(f"Enrolled in {course.name} (week {week}, season {season})")
    return EnrollmentResult.succeeded(replace(
        finances,
        balance=finances.balance - course.cost,
        active_enrollment=enrollment,
        transactions=finances.transactions + (transaction,),
    ))


def process_weekly_course_progress(
    finances: FinancialRecord,
    week: int,
    season: int
) -> FinancialRecord:
    """Complete the active course once its completion week is reached."""
    enrollment = finances.active_enrollment
    if enrollment is None or week < enrollment.completion_week:
        return finances

    logger.info(f"Completed course {enrollment.course_id} in week {week}")
    return replace(
        finances,
        completed_courses=finances.completed_courses + (enrollment.course_id,),
        active_enrollment=None,
    )


def get_course_effects(
    completed_courses: Iterable[str],
    catalog: Optional[CourseCatalog] = None
) -> List[CourseEffect]:
    """Collect the effects of every completed course, skipping unknown ids."""
    catalog = catalog or get_default_catalog()
    effects: List[CourseEffect] = []
    for course_id in completed_courses:
        course = catalog.get(course_id)
        if course is not None:
            effects.extend(course.effects)
    return effects


def has_required_courses_for_tier(completed_courses: Iterable[str], target_tier: int) -> bool:
    """FA Level 3 gates tier 4; UEFA A gates tier 5."""
    required = TIER_COURSE_GATES.get(target_tier)
    return required is None or required in set(completed_courses)
