"""An ordered register of students with search and edit operations."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator
from typing import Protocol, TextIO

from .models import Student, Visit

_LINES_PER_RECORD = 9
_VISIT_FIELDS = (
    "date",
    "time",
    "diagnosis",
    "recommendations",
    "doctor_lastname",
)
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class _Reader(Protocol):
    def next_token(self) -> str: ...

    def next_int(self) -> int: ...


def _parse_int(text: str) -> int:
    """Parse a leading integer the way the file format expects."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _parse_visits(line: str) -> list[Visit]:
    words = line.split()
    visits: list[Visit] = []
    fields: dict[str, str] = {}
    last = len(words) - 1
    for position, word in enumerate(words[:-1], start=1):
        slot = position % 6
        if slot == 0:
            fields["doctor_initials"] = word
            visits.append(Visit(**fields))
        else:
            fields[_VISIT_FIELDS[slot - 1]] = word
        if position == last:
            fields["doctor_initials"] = words[-1]
            visits.append(Visit(**fields))
    return visits


def _parse_record(lines: list[str]) -> Student:
    return Student(
        lastname=lines[0],
        initials=lines[1],
        date_born=_parse_int(lines[2]),
        phone_number=lines[3],
        join_date=_parse_int(lines[4]),
        group_name=lines[5],
        university=lines[6],
        department=lines[7],
        visits=_parse_visits(lines[8]),
    )


def _format_student(student: Student) -> str:
    parts = [
        f"Фамилия: {student.lastname}\n",
        f"Инициалы: {student.initials}\n",
        f"Дата рождения: {student.date_born}\n",
        f"Телефон: {student.phone_number}\n",
        f"Дата зачисления: {student.join_date}\n",
        f"Группа: {student.group_name}\n",
        f"Университет: {student.university}\n",
        f"Кафедра: {student.department}\n",
        "Посещения:\n",
    ]
    parts.extend(
        f"Дата посещения: {v.date} "
        f"Время посещения: {v.time} "
        f"Диагноз: {v.diagnosis} "
        f"Рекомендации: {v.recommendations} "
        f"Врач: {v.doctor_lastname} {v.doctor_initials}\n"
        for v in student.visits
    )
    parts.append("\n=====================\n")
    return "".join(parts)


class StudentList:
    """Students in insertion order."""

    def __init__(self, students: Iterable[Student] | None = None) -> None:
        self._students: list[Student] = list(students) if students is not None else []

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)

    def __len__(self) -> int:
        return len(self._students)

    def __str__(self) -> str:
        if not self._students:
            return "Список пуст!\n"
        return "".join(_format_student(s) for s in self._students)

    def push_back(self, student: Student) -> None:
        self._students.append(student)

    def push_front(self, student: Student) -> None:
        self._students.insert(0, student)

    def pop_front(self) -> Student | None:
        """Remove and return the first student; None when empty."""
        return self._students.pop(0) if self._students else None

    def pop_back(self) -> Student | None:
        """Remove and return the last student; None when empty."""
        return self._students.pop() if self._students else None

    def load_file(self, filename: str) -> None:
        """Append every complete nine-line record found in the file."""
        with open(filename, encoding="utf-8") as handle:
            lines = [line.rstrip("\n") for line in handle]
        complete = len(lines) - len(lines) % _LINES_PER_RECORD
        for start in range(0, complete, _LINES_PER_RECORD):
            self.push_back(_parse_record(lines[start:start + _LINES_PER_RECORD]))

    def save_file(self, filename: str) -> None:
        """Write the register in the format that load_file reads."""
        with open(filename, "w", encoding="utf-8") as handle:
            for s in self._students:
                handle.write(
                    f"{s.lastname}\n{s.initials}\n{s.date_born}\n{s.phone_number}\n"
                    f"{s.join_date}\n{s.group_name}\n{s.university}\n{s.department}\n"
                )
                for v in s.visits:
                    handle.write(
                        f"{v.date} {v.time} {v.diagnosis} {v.recommendations} "
                        f"{v.doctor_lastname} {v.doctor_initials} "
                    )
                handle.write("\n")

    def read_students(self, count: int, reader: _Reader, out: TextIO) -> None:
        """Prompt for and append ``count`` students with their visits."""
        for _ in range(count):
            student = Student()
            out.write("Введите фамилию студента: ")
            student.lastname = reader.next_token()
            out.write("Введите инициалы студента: ")
            student.initials = reader.next_token()
            out.write("Введите дату рождения (число): ")
            student.date_born = reader.next_int()
            out.write("Введите номер телефона: ")
            student.phone_number = reader.next_token()
            out.write("Введите дату зачисления (число): ")
            student.join_date = reader.next_int()
            out.write("Введите название группы: ")
            student.group_name = reader.next_token()
            out.write("Введите университет: ")
            student.university = reader.next_token()
            out.write("Введите кафедру: ")
            student.department = reader.next_token()
            out.write("Введите количество посещений, которые необходимо ввести: ")
            visit_count = reader.next_int()
            for _ in range(visit_count):
                visit = Visit()
                out.write("Введите дату посещения(формат YYYY.MM.DD): ")
                visit.date = reader.next_token()
                out.write("Введите время посещения(формат HH.MM): ")
                visit.time = reader.next_token()
                out.write("Введите диагноз: ")
                visit.diagnosis = reader.next_token()
                out.write("Введите рекомендации: ")
                visit.recommendations = reader.next_token()
                out.write("Введите фамилию врача: ")
                visit.doctor_lastname = reader.next_token()
                out.write("Введите инициалы врача: ")
                visit.doctor_initials = reader.next_token()
                student.visits.append(visit)
            self.push_back(student)

    def _filter_visits(self, keep: Callable[[Visit], bool]) -> StudentList:
        result = StudentList()
        for student in self._students:
            copy_ = student.clone()
            copy_.visits = [v for v in copy_.visits if keep(v)]
            if copy_.visits:
                result.push_back(copy_)
        return result

    def search_by_date(self, date: str) -> StudentList:
        """Students with their visits on ``date`` only."""
        return self._filter_visits(lambda v: v.date == date)

    def search_between_dates(
        self, start_date: str, end_date: str, start_time: str, end_time: str, diagnosis: str
    ) -> StudentList:
        """Students with visits in the interval carrying the given diagnosis."""

        def keep(v: Visit) -> bool:
            if v.diagnosis != diagnosis:
                return False
            if start_date < v.date < end_date:
                return True
            return v.date in (start_date, end_date) and start_time < v.time < end_time

        return self._filter_visits(keep)

    def count_exempt(
        self, start_date: str, end_date: str, start_time: str, end_time: str, recommendation: str
    ) -> int:
        """Number of students given the recommendation within the interval."""

        def keep(v: Visit) -> bool:
            if start_date < v.date < end_date and v.recommendations == recommendation:
                return True
            return (
                v.date in (start_date, end_date)
                and start_time < v.time < end_time
                and v.diagnosis == recommendation
            )

        return sum(1 for s in self._students if any(keep(v) for v in s.visits))

    def find(self, phone_number: str) -> Student | None:
        """The first student with this phone number, or None."""
        return next((s for s in self._students if s.phone_number == phone_number), None)

    def update_student(self, phone_number: str, new_data: Student) -> bool:
        for index, student in enumerate(self._students):
            if student.phone_number == phone_number:
                self._students[index] = new_data
                return True
        return False

    def add_visit(self, phone_number: str, visit: Visit) -> bool:
        student = self.find(phone_number)
        if student is None:
            return False
        student.visits.append(visit)
        return True

    def _find_visit(self, phone_number: str, visit_date: str, visit_time: str) -> Visit | None:
        student = self.find(phone_number)
        if student is None:
            return None
        return next(
            (v for v in student.visits if v.date == visit_date and v.time == visit_time),
            None,
        )

    def remove_visit(self, phone_number: str, visit_date: str, visit_time: str) -> bool:
        student = self.find(phone_number)
        if student is None:
            return False
        for index, visit in enumerate(student.visits):
            if visit.date == visit_date and visit.time == visit_time:
                del student.visits[index]
                return True
        return False

    def update_diagnosis(
        self, phone_number: str, visit_date: str, visit_time: str, new_diagnosis: str
    ) -> bool:
        visit = self._find_visit(phone_number, visit_date, visit_time)
        if visit is None:
            return False
        visit.diagnosis = new_diagnosis
        return True

    def update_recommendations(
        self, phone_number: str, visit_date: str, visit_time: str, new_recommendations: str
    ) -> bool:
        visit = self._find_visit(phone_number, visit_date, visit_time)
        if visit is None:
            return False
        visit.recommendations = new_recommendations
        return True