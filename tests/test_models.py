from medrec.models import Student, Visit


def _student():
    return Student(
        lastname="Ivanov",
        initials="I.I.",
        date_born=2003,
        phone_number="phone-a",
        join_date=2021,
        group_name="G1",
        university="Uni",
        department="Dept",
        visits=[Visit("2024.01.10", "10.00", "flu", "rest", "Petrov", "P.P.")],
    )


def test_clone_equal():
    original = _student()
    assert original.clone() == original


def test_clone_is_independent():
    original = _student()
    copy_ = original.clone()
    copy_.visits[0].diagnosis = "cold"
    copy_.visits.append(Visit())
    copy_.lastname = "Other"
    assert original.visits[0].diagnosis == "flu"
    assert len(original.visits) == 1
    assert original.lastname == "Ivanov"


def test_defaults_are_separate_lists():
    first = Student()
    second = Student()
    first.visits.append(Visit(date="2024.01.01"))
    assert second.visits == []
    assert first.date_born == 0