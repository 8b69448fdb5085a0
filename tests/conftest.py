"""
Pytest configuration and shared fixtures.
"""

import pytest

from records import Program, Resident


@pytest.fixture
def eviction_chain():
    """
    Resident 2 evicts resident 1 from A, resident 1 then evicts resident 3 from B.
    """
    residents = [
        Resident(1, "John", "Smith", ["A", "B"]),
        Resident(2, "Jane", "Doe", ["A"]),
        Resident(3, "Ann", "Lee", ["B"]),
    ]
    programs = [
        Program("A", "Anesthesiology", 1, [2, 1]),
        Program("B", "Biology", 1, [1, 3]),
    ]
    return residents, programs


@pytest.fixture
def residents_csv(tmp_path):
    path = tmp_path / "residents.csv"
    path.write_text(
        "residentID,firstname,lastname,rol\n"
        '1,John,Smith,"[A,B]"\n'
        '2,Jane,Doe,"[A]"\n'
        '3,Ann,Lee,"[B]"\n'
    )
    return path


@pytest.fixture
def programs_csv(tmp_path):
    path = tmp_path / "programs.csv"
    path.write_text(
        "programID,name,quota,rol\n"
        'A,Anesthesiology,1,"[2,1]"\n'
        'B,Biology,1,"[1,3]"\n'
    )
    return path


EXPECTED_OUTPUT = (
    "lastname,firstname,residentID,programID,name\n"
    "Smith,John,1,B,Biology\n"
    "Doe,Jane,2,A,Anesthesiology\n"
    "Lee,Ann,3,XXX,NOT_MATCHED\n"
    "\n"
    "Number of unmatched residents: 1\n"
    "Number of positions available: 0\n"
)


@pytest.fixture
def expected_output() -> str:
    """Result file for residents_csv and programs_csv."""
    return EXPECTED_OUTPUT
