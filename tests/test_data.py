"""
Tests for loading the input files and writing the result.
"""

import io

import pytest

import data
from da import deferred_acceptance
from records import MalformedInput


class TestParseRol:
    def test_bracket_list(self):
        assert data.parse_rol("[NRS,BBB]") == ["NRS", "BBB"]

    def test_spaces(self):
        assert data.parse_rol(" [1, 2 ,3] ") == ["1", "2", "3"]

    def test_empty_list(self):
        assert data.parse_rol("[]") == []


class TestLoadResidents:
    def test_load(self, residents_csv):
        residents = data.load_residents(residents_csv)
        assert [r.id for r in residents] == [1, 2, 3]
        assert residents[0].first_name == "John"
        assert residents[0].last_name == "Smith"
        assert residents[0].rol == ["A", "B"]
        assert residents[2].rol == ["B"]

    def test_empty_rol(self, tmp_path):
        path = tmp_path / "residents.csv"
        path.write_text('residentID,firstname,lastname,rol\n7,Ann,Lee,"[]"\n')
        assert data.load_residents(path)[0].rol == []

    def test_header_only(self, tmp_path):
        path = tmp_path / "residents.csv"
        path.write_text("residentID,firstname,lastname,rol\n")
        assert data.load_residents(path) == []

    def test_invalid_id(self, tmp_path):
        path = tmp_path / "residents.csv"
        path.write_text('residentID,firstname,lastname,rol\nx1,Ann,Lee,"[A]"\n')
        with pytest.raises(MalformedInput, match="resident id"):
            data.load_residents(path)

    def test_wrong_column_count(self, tmp_path):
        path = tmp_path / "residents.csv"
        path.write_text('residentID,firstname,rol\n1,Ann,"[A]"\n')
        with pytest.raises(MalformedInput, match="columns"):
            data.load_residents(path)

    def test_too_many_fields(self, tmp_path):
        path = tmp_path / "residents.csv"
        path.write_text(
            "residentID,firstname,lastname,rol\n"
            '1,Ann,Lee,"[A]"\n'
            '2,Bob,Ray,"[A]",extra,fields\n'
        )
        with pytest.raises(MalformedInput):
            data.load_residents(path)

    def test_too_few_fields(self, tmp_path):
        """A row missing its rank order list is rejected, not read as an empty list."""
        path = tmp_path / "residents.csv"
        path.write_text(
            "residentID,firstname,lastname,rol\n"
            '1,Ann,Lee,"[A]"\n'
            "2,Bob,Ray\n"
        )
        with pytest.raises(MalformedInput, match="invalid line format at line 3"):
            data.load_residents(path)

    def test_unquoted_rol(self, tmp_path):
        path = tmp_path / "residents.csv"
        path.write_text(
            "residentID,firstname,lastname,rol\n"
            "1,Ann,Lee,[A,B]\n"
            "2,Bob,Ray,[B,A]\n"
        )
        with pytest.raises(MalformedInput, match="must be quoted"):
            data.load_residents(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            data.load_residents(tmp_path / "nope.csv")


class TestLoadPrograms:
    def test_load(self, programs_csv):
        programs = data.load_programs(programs_csv)
        assert [p.id for p in programs] == ["A", "B"]
        assert programs[0].name == "Anesthesiology"
        assert programs[0].quota == 1
        assert programs[0].rol == [2, 1]
        assert programs[0].matched_residents == []

    def test_too_few_fields(self, tmp_path):
        path = tmp_path / "programs.csv"
        path.write_text(
            "programID,name,quota,rol\n"
            'A,Anesthesiology,1,"[1]"\n'
            "B,Biology,2\n"
        )
        with pytest.raises(MalformedInput, match="invalid line format at line 3"):
            data.load_programs(path)

    def test_invalid_quota(self, tmp_path):
        path = tmp_path / "programs.csv"
        path.write_text('programID,name,quota,rol\nA,Anesthesiology,two,"[1]"\n')
        with pytest.raises(MalformedInput, match="quota"):
            data.load_programs(path)

    def test_invalid_resident_id_in_rol(self, tmp_path):
        path = tmp_path / "programs.csv"
        path.write_text('programID,name,quota,rol\nA,Anesthesiology,1,"[1,b]"\n')
        with pytest.raises(MalformedInput, match="resident id"):
            data.load_programs(path)


class TestWriteResult:
    def test_result_frame(self, residents_csv, programs_csv):
        result = deferred_acceptance(
            data.load_residents(residents_csv), data.load_programs(programs_csv)
        )
        df = data.result_frame(result)
        assert list(df.columns) == data.RESULT_COLUMNS
        assert df["residentID"].tolist() == [1, 2, 3]
        assert df["programID"].tolist() == ["B", "A", "XXX"]
        assert df["name"].tolist()[-1] == "NOT_MATCHED"

    def test_write_result(self, residents_csv, programs_csv, expected_output):
        result = deferred_acceptance(
            data.load_residents(residents_csv), data.load_programs(programs_csv)
        )
        out = io.StringIO()
        data.write_result(result, out)
        assert out.getvalue() == expected_output
