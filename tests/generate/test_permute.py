"""
Tests for permutation generation and the per-null permutation rule.
"""

import numpy as np
import pandas as pd
import pytest

from pyinfer import InferDataset, generate, hypothesize, permute_once
from pyinfer.core.exceptions import (
    InputError, MissingMetadataError, UnsupportedOperationError, ValidationError,
)
from pyinfer.hypothesize._common import NullHypothesis, NullType


class TestPermuteGenerate:
    """generate(type='permute')."""

    def test_layout(self, independence_ds):
        """Blocks of n rows tagged 1..reps, columns in input order."""
        out = generate(independence_ds, reps=4, type="permute", seed=42)
        n = independence_ds.n_observations

        assert len(out.data) == 4 * n
        assert list(out.data.columns) == ['replicate', 'response', 'group']
        np.testing.assert_array_equal(
            out.data['replicate'].to_numpy(), np.repeat(np.arange(1, 5), n),
        )

    @pytest.mark.parametrize("reps", [1, 3, 25])
    def test_multiset_preserved(self, independence_ds, reps):
        """Each block is a permutation of the original column."""
        out = generate(independence_ds, reps=reps, type="permute", seed=7)
        original = sorted(independence_ds.data['response'].astype(str))
        for _, block in out.data.groupby('replicate'):
            assert sorted(block['response'].astype(str)) == original

    def test_independence_shuffles_first_column_only(self, independence_ds):
        """Under independence only the response moves."""
        out = generate(independence_ds, reps=5, type="permute", seed=42)
        group = independence_ds.data['group'].astype(str).tolist()
        for _, block in out.data.groupby('replicate'):
            assert block['group'].astype(str).tolist() == group
        assert out.info['permuted_column'] == 'response'

    def test_equal_means_shuffles_numeric_column(self, equal_means_ds):
        """Under equal means only the numeric response moves."""
        out = generate(equal_means_ds, reps=5, type="permute", seed=42)
        am = equal_means_ds.data['am'].astype(str).tolist()
        mpg = np.sort(equal_means_ds.data['mpg'].to_numpy())
        for _, block in out.data.groupby('replicate'):
            assert block['am'].astype(str).tolist() == am
            np.testing.assert_array_equal(np.sort(block['mpg'].to_numpy()), mpg)
        assert out.info['permuted_column'] == 'mpg'

    def test_equal_means_numeric_column_second(self, two_group_df):
        """The numeric column is permuted wherever it sits."""
        ds = hypothesize(two_group_df[['am', 'mpg']], null='equal means')
        out = generate(ds, reps=2, type="permute", seed=42)
        assert out.info['permuted_column'] == 'mpg'

    def test_actually_shuffles(self):
        """Permutation reorders the permuted column."""
        df = pd.DataFrame({
            'y': np.arange(30.0),
            'g': pd.Categorical(np.repeat(['a', 'b'], 15)),
        })
        ds = hypothesize(df, null='equal means')
        out = generate(ds, reps=3, type="permute", seed=42)
        assert not (out.data['y'].to_numpy() == np.tile(np.arange(30.0), 3)).all()

    def test_hypothesis_unchanged(self, independence_ds):
        """The hypothesis is carried over unchanged."""
        out = generate(independence_ds, reps=3, type="permute", seed=42)
        assert out.hypothesis == independence_ds.hypothesis
        assert out.dataset.hypothesis.null is NullType.INDEPENDENCE

    def test_categorical_dtype_preserved(self, independence_ds):
        """Categorical columns keep their dtype after shuffling."""
        out = generate(independence_ds, reps=3, type="permute", seed=42)
        assert isinstance(out.data['response'].dtype, pd.CategoricalDtype)
        assert isinstance(out.data['group'].dtype, pd.CategoricalDtype)

    def test_seed_reproducibility(self, equal_means_ds):
        """Same seed gives same permutations."""
        r1 = generate(equal_means_ds, reps=10, type="permute", seed=42)
        r2 = generate(equal_means_ds, reps=10, type="permute", seed=42)
        pd.testing.assert_frame_equal(r1.data, r2.data)

    def test_summary(self, independence_ds):
        """Summary names the generation type and the null."""
        out = generate(independence_ds, reps=3, type="permute", seed=42)
        s = out.summary()
        assert "PERMUTATION REPLICATES" in s
        assert "H0: independence" in s


class TestPermuteValidation:
    """Permutation preconditions."""

    def test_missing_hypothesis(self, two_factor_df):
        """Permuting needs a hypothesis."""
        with pytest.raises(MissingMetadataError, match="hypothesize"):
            generate(two_factor_df, reps=2, type="permute")

    def test_missing_hypothesis_operation(self, two_factor_df):
        """The error names the permute operation."""
        with pytest.raises(MissingMetadataError) as exc_info:
            generate(two_factor_df, reps=2, type="permute")
        assert exc_info.value.operation == 'permute'

    def test_point_null_has_no_rule(self, factor_df):
        """A point null cannot be permuted."""
        ds = hypothesize(factor_df, null='point', p=[0.25, 0.25, 0.5])
        with pytest.raises(UnsupportedOperationError, match="no permutation rule"):
            generate(ds, reps=2, type="permute")

    def test_equal_means_needs_numeric_response(self, two_factor_df):
        """Equal means needs a numeric response."""
        ds = hypothesize(two_factor_df, null='equal means')
        with pytest.raises(InputError, match="numeric"):
            generate(ds, reps=2, type="permute")


class TestPermuteOnce:
    """permute_once(): one permutation of a dataset."""

    def test_single_permutation(self, independence_ds):
        """One shuffle of the response with the group left in place."""
        out = permute_once(independence_ds, seed=42)
        assert out.n_observations == independence_ds.n_observations
        assert out.hypothesis is independence_ds.hypothesis
        assert sorted(out.data['response'].astype(str)) == \
            sorted(independence_ds.data['response'].astype(str))
        pd.testing.assert_series_equal(out.data['group'], independence_ds.data['group'])

    def test_input_not_mutated(self, equal_means_ds):
        """The input dataset is left untouched."""
        before = equal_means_ds.data.copy()
        permute_once(equal_means_ds, seed=1)
        pd.testing.assert_frame_equal(equal_means_ds.data, before)

    def test_missing_hypothesis(self, two_factor_df):
        """Permuting needs a hypothesis."""
        ds = InferDataset.from_dataframe(two_factor_df)
        with pytest.raises(MissingMetadataError):
            permute_once(ds)

    def test_unhandled_null(self, two_factor_df):
        """A null without a rule raises with the null named."""
        ds = InferDataset.from_dataframe(two_factor_df).with_hypothesis(
            NullHypothesis(null=NullType.POINT, p=(0.5, 0.5), levels=('a', 'b'))
        )
        with pytest.raises(UnsupportedOperationError) as exc_info:
            permute_once(ds)
        assert exc_info.value.value == 'point'

    def test_requires_dataset(self, two_factor_df):
        """Plain DataFrames are rejected."""
        with pytest.raises(ValidationError, match="InferDataset"):
            permute_once(two_factor_df)
