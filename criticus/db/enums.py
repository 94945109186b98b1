"""Enum definitions for application constants."""

from enum import Enum


class FormKind(str, Enum):
    """The four submission forms on the landing page."""
    WAITLIST = "waitlist"
    DEMO = "demo"
    NEWSLETTER = "newsletter"
    COLLABORATOR = "collaborator"


class WaitlistRole(str, Enum):
    STUDENT = "student"
    PROFESSOR = "professor"
    ADMINISTRATOR = "administrator"
    OTHER = "other"

    @classmethod
    def has_value(cls, value: str) -> bool:
        return value in cls._value2member_map_


class ReferralSource(str, Enum):
    """
    How a waitlist signup heard about us.

    Stored with spaces. The landing page posts hyphenated values
    (social-media, word-of-mouth, ...), which normalize to these.
    """
    SOCIAL_MEDIA = "social media"
    WORD_OF_MOUTH = "word of mouth"
    ACADEMIC_CONFERENCE = "academic conference"
    OTHER = "other"

    @classmethod
    def has_value(cls, value: str) -> bool:
        return value in cls._value2member_map_


class InstitutionType(str, Enum):
    HIGH_SCHOOL = "high-school"
    COMMUNITY_COLLEGE = "community-college"
    UNIVERSITY = "university"

    @classmethod
    def has_value(cls, value: str) -> bool:
        return value in cls._value2member_map_


class DemoRole(str, Enum):
    """Demo request roles, each tied to one institution type."""
    HIGH_SCHOOL_TEACHER = "high-school-teacher"
    HIGH_SCHOOL_ADMINISTRATOR = "high-school-administrator"
    COMMUNITY_COLLEGE_PROFESSOR = "community-college-professor"
    COMMUNITY_COLLEGE_ADMINISTRATOR = "community-college-administrator"
    UNIVERSITY_PROFESSOR = "university-professor"
    UNIVERSITY_ADMINISTRATOR = "university-administrator"


DEMO_ROLES_BY_INSTITUTION: dict[InstitutionType, tuple[DemoRole, ...]] = {
    InstitutionType.HIGH_SCHOOL: (
        DemoRole.HIGH_SCHOOL_TEACHER,
        DemoRole.HIGH_SCHOOL_ADMINISTRATOR,
    ),
    InstitutionType.COMMUNITY_COLLEGE: (
        DemoRole.COMMUNITY_COLLEGE_PROFESSOR,
        DemoRole.COMMUNITY_COLLEGE_ADMINISTRATOR,
    ),
    InstitutionType.UNIVERSITY: (
        DemoRole.UNIVERSITY_PROFESSOR,
        DemoRole.UNIVERSITY_ADMINISTRATOR,
    ),
}


def sql_in_list(enum_cls: type[Enum]) -> str:
    """Render enum values as a quoted SQL IN-list for CHECK constraints."""
    return ", ".join(f"'{member.value}'" for member in enum_cls)
