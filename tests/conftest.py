"""Shared fixtures for the EDA tests."""

import numpy as np
import pandas as pd
import pytest
from fastapi.testclient import TestClient

from app import app
from titanic_eda.dataset import Session

# Row 4 has no Survived value and is dropped on load; "NA" is a real port code here.
TRAIN_CSV = (
    b"PassengerId,Survived,Pclass,Sex,Age,Embarked\n"
    b"1,0,3,male,22,S\n"
    b"2,1,1,female,38,C\n"
    b"3,1,3,female,,S\n"
    b"4,,1,female,35,\n"
    b"5,0,3,male,35,NA\n"
)


@pytest.fixture
def train_csv():
    return TRAIN_CSV


@pytest.fixture
def passengers():
    """Small passenger frame shaped like a loaded Titanic CSV."""
    return pd.DataFrame({
        "PassengerId": [1, 2, 3, 4, 5, 6],
        "Survived": [0, 1, 1, 1, 0, 0],
        "Pclass": [3, 1, 3, 1, 3, 2],
        "Sex": ["male", "female", "female", "female", "male", "male"],
        "Age": [22.0, 38.0, 26.0, 35.0, np.nan, 54.0],
        "Embarked": ["S", "C", "S", "S", "Q", np.nan],
    })


@pytest.fixture
def client():
    """Test client with a fresh, empty session."""
    app.state.session = Session()
    with TestClient(app) as c:
        yield c
