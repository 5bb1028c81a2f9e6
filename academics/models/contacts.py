"""
Contact data models.

Flat records with no derived fields: the student's faculty advisor and the
people credited for the project.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FacultyAdvisor:
    """Faculty advisor assigned to the student."""
    name: str
    school: str
    designation: str
    division: str
    phone: str
    email: str
    cabin: str
    intercom: str


@dataclass(frozen=True)
class Contributor:
    """A project contributor listed in the system metadata payload."""
    name: str
    role: str
    github_profile: str
