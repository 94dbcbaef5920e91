"""Console front-end for the student medical register."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Protocol, TextIO

from .desmenu import des_menu
from .fileutil import TokenReader
from .models import Student, Visit
from .registry import StudentList

_MAIN_MENU = (
    "\nГлавное меню:\n"
    "1. Загрузить БД\n"
    "2. Сохранить БД\n"
    "3. Показать БД\n"
    "4. Добавить студента\n"
    "5. Найти посещения в определенную дату\n"
    "6. Найти посещение по интервалу даты по определенному диагнозу\n"
    "7. Найти количество студентов которые получили освобождение за некоторое время\n"
    "8. Редактировать данные\n"
    "9. Меню шифрования\n"
    "0. Выход\n"
    "Выбор: "
)
_EDIT_MENU = (
    "\nМеню редактирования:\n"
    "1. Изменить данные студента\n"
    "2. Добавить посещение\n"
    "3. Удалить посещение\n"
    "4. Изменить диагноз\n"
    "5. Изменить рекомендации\n"
    "Выбор: "
)
_INVALID = "Неверный выбор!\n"


class _Reader(Protocol):
    def next_token(self) -> str: ...

    def next_int(self) -> int: ...


def _read_int(reader: _Reader) -> int | None:
    try:
        return reader.next_int()
    except ValueError:
        return None


def _ask(reader: _Reader, out: TextIO, prompt: str) -> str:
    out.write(prompt)
    return reader.next_token()


def _load(students: StudentList, reader: _Reader, out: TextIO) -> None:
    filename = _ask(reader, out, "Введите название файла: ")
    try:
        students.load_file(filename)
    except OSError:
        out.write(f"Невозможно открыть файл{filename}\n")
        return
    except ValueError as exc:
        out.write(f"Ошибка чтения файла: {exc}\n")
        return
    out.write("БД загружена\n")


def _save(students: StudentList, reader: _Reader, out: TextIO) -> None:
    filename = _ask(reader, out, "Введите название файла: ")
    try:
        students.save_file(filename)
    except OSError:
        out.write(f"Невозможно открыть файл{filename}\n")
        return
    out.write("БД сохранена\n")


def _show(students: StudentList, reader: _Reader, out: TextIO) -> None:
    out.write(str(students))


def _add(students: StudentList, reader: _Reader, out: TextIO) -> None:
    out.write("Введите количество студентов: ")
    count = _read_int(reader)
    if not count:
        return
    try:
        students.read_students(count, reader, out)
    except ValueError as exc:
        out.write(f"Ошибка ввода: {exc}\n")
        return
    out.write("Студенты добавлены\n")


def _search_date(students: StudentList, reader: _Reader, out: TextIO) -> None:
    date = _ask(reader, out, "Введите дату посещения (ГГГГ.ММ.ДД): ")
    out.write(str(students.search_by_date(date)))


def _read_interval(reader: _Reader, out: TextIO) -> tuple[str, str, str, str]:
    start_date = _ask(reader, out, "Введите начальную дату (ГГГГ.ММ.ДД): ")
    start_time = _ask(reader, out, "Введите начальное время (ЧЧ.ММ): ")
    end_date = _ask(reader, out, "Введите конечную дату (ГГГГ.ММ.ДД): ")
    end_time = _ask(reader, out, "Введите конечное время (ЧЧ.ММ): ")
    return start_date, end_date, start_time, end_time


def _search_interval(students: StudentList, reader: _Reader, out: TextIO) -> None:
    start_date, end_date, start_time, end_time = _read_interval(reader, out)
    diagnosis = _ask(reader, out, "Введите диагноз: ")
    result = students.search_between_dates(start_date, end_date, start_time, end_time, diagnosis)
    out.write(str(result))


def _count_exempt(students: StudentList, reader: _Reader, out: TextIO) -> None:
    start_date, end_date, start_time, end_time = _read_interval(reader, out)
    recommendation = _ask(reader, out, "Введите рекомендацию для поиска: ")
    count = students.count_exempt(start_date, end_date, start_time, end_time, recommendation)
    out.write(f"Количество студентов: {count}\n")


def _edit_student(students: StudentList, phone: str, reader: _Reader, out: TextIO) -> None:
    out.write("Введите новые данные студента:\n")
    student = Student()
    student.lastname = _ask(reader, out, "Фамилия: ")
    student.initials = _ask(reader, out, "Инициалы: ")
    out.write("Дата рождения: ")
    student.date_born = reader.next_int()
    student.phone_number = _ask(reader, out, "Номер телефона: ")
    out.write("Дата зачисления: ")
    student.join_date = reader.next_int()
    student.group_name = _ask(reader, out, "Группа: ")
    student.university = _ask(reader, out, "Университет: ")
    student.department = _ask(reader, out, "Кафедра: ")
    if students.update_student(phone, student):
        out.write("Данные студента обновлены!\n")
    else:
        out.write("Студент не найден!\n")


def _edit_add_visit(students: StudentList, phone: str, reader: _Reader, out: TextIO) -> None:
    out.write("Введите данные посещения:\n")
    visit = Visit(
        date=_ask(reader, out, "Дата посещения (ГГГГ.ММ.ДД): "),
        time=_ask(reader, out, "Время посещения (ЧЧ.ММ): "),
        diagnosis=_ask(reader, out, "Диагноз: "),
        recommendations=_ask(reader, out, "Рекомендации: "),
        doctor_lastname=_ask(reader, out, "Фамилия врача: "),
        doctor_initials=_ask(reader, out, "Инициалы врача: "),
    )
    if students.add_visit(phone, visit):
        out.write("Посещение добавлено!\n")
    else:
        out.write("Студент не найден!\n")


def _edit_remove_visit(students: StudentList, phone: str, reader: _Reader, out: TextIO) -> None:
    visit_date = _ask(reader, out, "Введите дату посещения для удаления (ГГГГ.ММ.ДД): ")
    visit_time = _ask(reader, out, "Введите время посещения для удаления (ЧЧ.ММ): ")
    if students.remove_visit(phone, visit_date, visit_time):
        out.write("Посещение удалено!\n")
    else:
        out.write("Студент или посещение не найдены!\n")


def _edit_diagnosis(students: StudentList, phone: str, reader: _Reader, out: TextIO) -> None:
    visit_date = _ask(reader, out, "Введите дату посещения (ГГГГ.ММ.ДД): ")
    visit_time = _ask(reader, out, "Введите время посещения (ЧЧ.ММ): ")
    value = _ask(reader, out, "Введите новый диагноз: ")
    if students.update_diagnosis(phone, visit_date, visit_time, value):
        out.write("Диагноз обновлен!\n")
    else:
        out.write("Запись не найдена!\n")


def _edit_recommendations(
    students: StudentList, phone: str, reader: _Reader, out: TextIO
) -> None:
    visit_date = _ask(reader, out, "Введите дату посещения (ГГГГ.ММ.ДД): ")
    visit_time = _ask(reader, out, "Введите время посещения (ЧЧ.ММ): ")
    value = _ask(reader, out, "Введите новые рекомендации: ")
    if students.update_recommendations(phone, visit_date, visit_time, value):
        out.write("Рекомендации обновлены!\n")
    else:
        out.write("Запись не найдена!\n")


_EDIT_ACTIONS: dict[int, Callable[[StudentList, str, _Reader, TextIO], None]] = {
    1: _edit_student,
    2: _edit_add_visit,
    3: _edit_remove_visit,
    4: _edit_diagnosis,
    5: _edit_recommendations,
}


def _edit(students: StudentList, reader: _Reader, out: TextIO) -> None:
    phone = _ask(reader, out, "Введите номер телефона студента (ID): ")
    if students.find(phone) is None:
        out.write("Студента с таким номером не существует")
        return
    out.write(_EDIT_MENU)
    action = _EDIT_ACTIONS.get(_read_int(reader))
    if action is None:
        out.write(_INVALID)
        return
    try:
        action(students, phone, reader, out)
    except ValueError as exc:
        out.write(f"Ошибка ввода: {exc}\n")


def _encryption(students: StudentList, reader: _Reader, out: TextIO) -> None:
    des_menu(reader, out)


_ACTIONS: dict[int, Callable[[StudentList, _Reader, TextIO], None]] = {
    1: _load,
    2: _save,
    3: _show,
    4: _add,
    5: _search_date,
    6: _search_interval,
    7: _count_exempt,
    8: _edit,
    9: _encryption,
}


def run(reader: _Reader, out: TextIO) -> StudentList:
    """Serve the main menu until exit or end of input; return the register."""
    students = StudentList()
    try:
        while True:
            out.write(_MAIN_MENU)
            choice = _read_int(reader)
            if choice == 0:
                break
            action = _ACTIONS.get(choice)
            if action is None:
                out.write(_INVALID)
            else:
                action(students, reader, out)
    except EOFError:
        pass
    return students


def main(argv: list[str] | None = None) -> int:
    """Start the interactive register on standard input and output."""
    run(TokenReader(sys.stdin), sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())