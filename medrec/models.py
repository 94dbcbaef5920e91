"""Records kept in the student medical register."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field


@dataclass
class Visit:
    """One visit of a student to the doctor."""

    date: str = ""
    time: str = ""
    diagnosis: str = ""
    recommendations: str = ""
    doctor_lastname: str = ""
    doctor_initials: str = ""


@dataclass
class Student:
    """A student together with the history of visits."""

    lastname: str = ""
    initials: str = ""
    date_born: int = 0
    phone_number: str = ""
    join_date: int = 0
    group_name: str = ""
    university: str = ""
    department: str = ""
    visits: list[Visit] = field(default_factory=list)

    def clone(self) -> Student:
        """Return an independent copy, visits included."""
        return copy.deepcopy(self)