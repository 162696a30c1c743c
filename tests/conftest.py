"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pandas as pd
import pytest

from pyinfer import InferDataset, hypothesize


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def numeric_df():
    """Single numeric column, x = 1..5."""
    return pd.DataFrame({'x': [1.0, 2.0, 3.0, 4.0, 5.0]})


@pytest.fixture
def two_group_df(rng):
    """Numeric response with a two-level factor group (mtcars mpg ~ am shape)."""
    n = 20
    group = pd.Categorical(np.repeat(['auto', 'manual'], n // 2),
                           categories=['auto', 'manual'])
    mpg = np.concatenate([rng.normal(15, 3, n // 2), rng.normal(25, 3, n // 2)])
    return pd.DataFrame({'mpg': mpg, 'am': group})


@pytest.fixture
def two_factor_df():
    """Factor response (a, b) and factor group (x, y)."""
    return pd.DataFrame({
        'response': pd.Categorical(
            ['a', 'a', 'b', 'a', 'b', 'b', 'a', 'b', 'b', 'a'],
            categories=['a', 'b'],
        ),
        'group': pd.Categorical(
            ['x', 'x', 'x', 'x', 'x', 'y', 'y', 'y', 'y', 'y'],
            categories=['x', 'y'],
        ),
    })


@pytest.fixture
def factor_df():
    """Single three-level factor column."""
    return pd.DataFrame({
        'cyl': pd.Categorical(
            ['4', '6', '8', '4', '4', '8', '6', '8', '8', '4', '8', '6'],
            categories=['4', '6', '8'],
        ),
    })


@pytest.fixture
def independence_ds(two_factor_df):
    return hypothesize(InferDataset.from_dataframe(two_factor_df), null='independence')


@pytest.fixture
def equal_means_ds(two_group_df):
    return hypothesize(InferDataset.from_dataframe(two_group_df), null='equal means')
