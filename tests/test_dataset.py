"""Unit tests for CSV ingestion and the session store."""

import io

import numpy as np
import pandas as pd
import pytest

from titanic_eda.analysis import group_by_feature
from titanic_eda.dataset import Session, dynamic_value, filter_survived, load_csv, records
from titanic_eda.errors import DatasetNotLoadedError, DatasetParseError


class TestLoadCsv:
    def test_drops_rows_without_survived(self, train_csv):
        df = load_csv(io.BytesIO(train_csv))
        assert df["PassengerId"].tolist() == [1, 2, 3, 5]
        assert df.index.tolist() == [0, 1, 2, 3]

    def test_numeric_columns_are_typed(self, train_csv):
        df = load_csv(io.BytesIO(train_csv))
        assert pd.api.types.is_numeric_dtype(df["Survived"])
        assert pd.api.types.is_numeric_dtype(df["Age"])
        assert np.isnan(df.loc[2, "Age"])

    def test_only_empty_fields_are_missing(self, train_csv):
        df = load_csv(io.BytesIO(train_csv))
        assert df.loc[3, "Embarked"] == "NA"

    def test_reads_from_path(self, tmp_path, train_csv):
        path = tmp_path / "train.csv"
        path.write_bytes(train_csv)
        assert len(load_csv(str(path))) == 4

    def test_no_survived_column_yields_no_rows(self):
        df = load_csv(io.BytesIO(b"Name,Age\nA,1\nB,2\n"))
        assert len(df) == 0

    def test_empty_file(self):
        with pytest.raises(DatasetParseError):
            load_csv(io.BytesIO(b""))

    def test_malformed_rows(self):
        with pytest.raises(DatasetParseError):
            load_csv(io.BytesIO(b"a,b\n1,2\n3,4,5,6\n"))

    def test_text_cell_does_not_untype_column(self):
        df = load_csv(io.BytesIO(b"Survived,Sex\n1,female\n0,male\n1,female\nNA,male\n"))
        assert df["Survived"].tolist() == [1, 0, 1, "NA"]
        assert group_by_feature(df, "Sex") == {"female": 100.0, "male": 0.0}

    def test_mixed_column_keeps_text_rows(self):
        df = load_csv(io.BytesIO(b"Survived,Fare\n1,7.25\nNA,n/a\n0,\n"))
        assert len(df) == 3
        assert df["Fare"].tolist()[:2] == [7.25, "n/a"]


class TestFilterSurvived:
    def test_drops_empty_text(self):
        df = pd.DataFrame({"Survived": [1, "", None, 0]}, dtype=object)
        assert filter_survived(df)["Survived"].tolist() == [1, 0]


class TestRecords:
    def test_json_safe_values(self):
        df = pd.DataFrame({"Age": [22.0, np.nan], "Pclass": [3, 1], "Sex": ["male", None]})
        rows = records(df)
        assert rows == [
            {"Age": 22.0, "Pclass": 3, "Sex": "male"},
            {"Age": None, "Pclass": 1, "Sex": None},
        ]
        assert type(rows[0]["Pclass"]) is int

    def test_limit(self, passengers):
        assert len(records(passengers, 5)) == 5
        assert len(records(passengers, 50)) == len(passengers)


class TestSession:
    def test_empty_session(self):
        session = Session()
        assert not session.is_loaded
        with pytest.raises(DatasetNotLoadedError):
            session.get_dataset()
        with pytest.raises(DatasetNotLoadedError):
            session.columns

    def test_set_and_get(self, passengers):
        session = Session()
        session.set_dataset(passengers)
        assert session.is_loaded
        assert session.get_dataset() is passengers
        assert session.columns == list(passengers.columns)

    def test_columns_fixed_at_load(self, passengers):
        session = Session()
        session.set_dataset(passengers, ["Survived", "Sex"])
        passengers["AgeGroup"] = 0
        assert session.columns == ["Survived", "Sex"]

    def test_last_load_wins(self, passengers):
        session = Session()
        session.set_dataset(passengers)
        other = passengers.head(2)
        session.set_dataset(other)
        assert session.get_dataset() is other


class TestDynamicValue:
    @pytest.mark.parametrize("text,expected", [
        ("1", 1),
        ("-3", -3),
        ("7.25", 7.25),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("true", True),
        ("FALSE", False),
    ])
    def test_converted(self, text, expected):
        value = dynamic_value(text)
        assert value == expected
        assert type(value) is type(expected)

    @pytest.mark.parametrize("text", ["NA", "male", "True", "1a", "A/5 21171", ""])
    def test_left_as_text(self, text):
        assert dynamic_value(text) == text

    def test_non_text_untouched(self):
        assert dynamic_value(3) == 3
        assert dynamic_value(None) is None
