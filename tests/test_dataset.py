import pytest

from trendfit.dataset import DataSet, read_csv_data


def _write(tmp_path, rows, header="Year,Percentage_Internet_User,Population"):
    path = tmp_path / "data.csv"
    path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
    return path


def test_reads_all_columns(tmp_path):
    path = _write(tmp_path, ["2000,0.9,211540000", "2001,1.1,214880000"])
    data = read_csv_data(path)
    assert data.year == [2000.0, 2001.0]
    assert data.percentage == [0.9, 1.1]
    assert data.population == [211540000.0, 214880000.0]
    assert len(data) == 2


def test_skip_and_limit(tmp_path):
    rows = [f"{2000 + i},{i},{1000 + i}" for i in range(10)]
    data = read_csv_data(_write(tmp_path, rows), skip=3, limit=4)
    assert data.year == [float(2000 + i) for i in range(3, 7)]
    assert data.population == [float(1000 + i) for i in range(3, 7)]


def test_rows_with_missing_fields_are_ignored(tmp_path):
    path = _write(tmp_path, ["2000,0.9", "", "2001,1.1,214880000"])
    data = read_csv_data(path)
    assert data.year == [2001.0]


def test_non_numeric_field_reads_as_zero(tmp_path):
    path = _write(tmp_path, ["2000,n/a,5"])
    data = read_csv_data(path)
    assert data.percentage == [0.0]
    assert data.population == [5.0]


def test_no_rows_raises(tmp_path):
    with pytest.raises(ValueError):
        read_csv_data(_write(tmp_path, []))


def test_skipping_everything_raises(tmp_path):
    with pytest.raises(ValueError):
        read_csv_data(_write(tmp_path, ["2000,1,2"]), skip=5)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_csv_data(tmp_path / "absent.csv")


def test_dataset_length_follows_years():
    data = DataSet(year=[1.0, 2.0, 3.0], percentage=[0.0] * 3, population=[0.0] * 3)
    assert len(data) == 3