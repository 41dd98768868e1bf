import pytest

from studentpath.csv_reading import encode_field, read_csv


def _write_generated(path, count=4424):
    lines = ["Age;Grade;Target"]
    outcomes = ["Dropout", "Enrolled", "Graduate"]
    for i in range(count):
        lines.append(f"{i % 40};{(i % 7) * 1.5};{outcomes[i % 3]}")
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_encode_field_categories():
    assert encode_field("Dropout") == 1.0
    assert encode_field("Enrolled") == 2.0
    assert encode_field("Graduate") == 3.0


def test_encode_field_numbers():
    assert encode_field("12") == 12.0
    assert encode_field("-0.5") == -0.5


@pytest.mark.parametrize("text", ["abc", "", " 1", "1_0", "graduate"])
def test_encode_field_rejects(text):
    with pytest.raises(ValueError):
        encode_field(text)


def test_read_csv_one_row(tmp_path):
    path = tmp_path / "data.csv"
    rows = ["a;b;Target"] + [f"{i};{i};Dropout" for i in range(5)] + ["5;5;Graduate"]
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    _names, students = read_csv(path)
    assert students[5].label == 3.0
    assert students[5].features == [5.0, 5.0]


def test_student_vec_length(tmp_path):
    _names, students = read_csv(_write_generated(tmp_path / "data.csv"))
    assert len(students) == 4424


def test_feature_names_exclude_target(tmp_path):
    names, students = read_csv(_write_generated(tmp_path / "data.csv", 3))
    assert names == ["Age", "Grade"]
    assert [s.label for s in students] == [1.0, 2.0, 3.0]
    assert students[1].features == [1.0, 1.5]


def test_blank_lines_are_skipped(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("x;Target\n1;Dropout\n\n2;Graduate\n", encoding="utf-8")
    _names, students = read_csv(path)
    assert [s.label for s in students] == [1.0, 3.0]


def test_ragged_row_raises(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("x;y;Target\n1;Dropout\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_csv(path)


def test_bad_value_raises(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("x;Target\nabc;Dropout\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_csv(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_csv(tmp_path / "absent.csv")