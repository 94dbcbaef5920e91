# medrec

A console program that keeps a register of students and their visits to a
clinic, with a menu for encrypting and decrypting files with DES.

Each student (`medrec.models.Student`) has a last name, initials, birth date,
phone number (used as the student's identifier), enrolment date, group,
university, department and a list of visits. A visit (`medrec.models.Visit`)
has a date (`YYYY.MM.DD`), a time (`HH.MM`), a diagnosis, recommendations and
the doctor's last name and initials.

## Installing

```
pip install .
```

## Running

```
medrec
```

The program reads whitespace-separated answers from standard input and shows
a menu in Russian. The main menu offers:

1. load the register from a file (records are appended to those in memory);
2. save the register to a file;
3. show every student and visit;
4. add students from the keyboard;
5. list the visits on a given date;
6. list the visits with a given diagnosis between two date-and-time points;
7. count the students who received a given recommendation between two
   date-and-time points;
8. edit a student found by phone number: replace their details, add or
   remove a visit, change a diagnosis or recommendations;
9. open the DES menu.

Enter `0` to leave a menu. The program also stops at the end of input.

Dates and times are compared as text, so they must be written with leading
zeros in the formats above for the interval searches to work.

## Register file format

A register file stores each student as nine lines:

```
Ivanov
I.I.
2003
student-01
2021
GROUP-01
University
Department
2024.03.01 10.30 flu exemption Petrov P.P. 2024.03.05 09.00 healthy none Sidorov S.S.
```

The birth and enrolment lines must be integers. The ninth line holds the
visits, six space-separated fields per visit, so no field may contain a space.
A trailing group of fewer than nine lines is ignored.

## DES menu

In the DES menu you can enter an 8-byte key as 16 hexadecimal digits or have
one generated. The key must have odd parity in every byte and must not be one
of the DES weak or semi-weak keys; generated keys always have odd parity.
Encrypted files hold the DES-ECB ciphertext, padded with PKCS#7, written as
Base64 on a single line. The menu forgets the key after each successful
encryption or decryption, so note it down before you continue.

## Using it as a library

```python
from medrec.models import Student, Visit
from medrec.registry import StudentList

students = StudentList()
students.load_file("students.txt")
students.add_visit(
    "student-01",
    Visit("2024.04.02", "11.15", "cold", "rest", "Petrov", "P.P."),
)
for student in students.search_by_date("2024.03.01"):
    print(student.lastname, len(student.visits))
print(students.count_exempt("2024.01.01", "2024.12.31", "00.00", "23.59", "exemption"))
students.save_file("students.txt")
```

`str(students)` gives the same listing the menu shows. The edit methods
(`update_student`, `add_visit`, `remove_visit`, `update_diagnosis`,
`update_recommendations`) return `True` when the student and visit were found.

```python
from medrec.desutil import des_decrypt, des_encrypt, generate_random_key

key = generate_random_key()
assert des_decrypt(des_encrypt(b"report", key), key) == b"report"
```

`medrec.desutil` also has `encrypt_file`, `decrypt_file`, `base64_encode`,
`base64_decode`, `is_weak_key` and `has_odd_parity`. Bad keys, malformed
ciphertext and malformed Base64 raise `medrec.desutil.DESError`.

## What it does not do

The register lives in memory only: nothing is saved unless you choose to save
it, and there is no locking or sharing between several running programs.