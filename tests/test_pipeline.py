"""
End-to-end tests: hypothesize -> generate -> calculate.
"""

import numpy as np
import pandas as pd
import pytest

from pyinfer import calculate, generate, hypothesize


class TestPipelines:
    """Full hypothesize, generate, calculate runs."""

    def test_bootstrap_mean(self, rng):
        """Bootstrap means centre on the sample mean with the usual spread."""
        df = pd.DataFrame({'mpg': rng.normal(20, 6, 32)})
        result = calculate(generate(df, reps=500, type="bootstrap", seed=42), stat="mean")

        assert len(result) == 500
        # bootstrap means centre on the sample mean
        assert result.values.mean() == pytest.approx(df['mpg'].mean(), abs=0.5)
        # SE of the mean is about sd / sqrt(n)
        assert result.values.std(ddof=1) == pytest.approx(
            df['mpg'].std(ddof=1) / np.sqrt(32), rel=0.25,
        )

    def test_permutation_null_centred_at_zero(self, equal_means_ds):
        """The permutation null centres on zero and the observed difference sits in its tail."""
        perms = generate(equal_means_ds, reps=1000, type="permute", seed=42)
        null_dist = calculate(perms, stat="diff in means").values
        observed = calculate(equal_means_ds, stat="diff in means").values[0]

        assert abs(null_dist.mean()) < 1.0
        # groups differ by construction; observed sits in the tail
        assert np.mean(np.abs(null_dist) >= abs(observed)) < 0.05

    def test_independence_diff_in_props(self, independence_ds):
        """Permuted independence data reduces to float differences in proportions."""
        result = calculate(
            generate(independence_ds, reps=2, type="permute", seed=42),
            stat="diff in props",
        )
        assert len(result) == 2
        assert result.values.dtype == np.float64

    def test_simulate_prop(self):
        """Simulated proportions centre on the hypothesized probability."""
        df = pd.DataFrame({'am': pd.Categorical(['0', '1'] * 16, categories=['0', '1'])})
        ds = hypothesize(df, null='point', p1=0.25, p2=0.75)
        props = calculate(generate(ds, reps=300, type="simulate", seed=42), stat="prop")
        assert props.values.mean() == pytest.approx(0.25, abs=0.03)

    def test_hypothesis_survives_generation(self, independence_ds):
        """Generation keeps the attached hypothesis."""
        perms = generate(independence_ds, reps=3, type="permute", seed=1)
        boots = generate(independence_ds, reps=3, type="bootstrap", seed=1)
        assert perms.dataset.hypothesis == independence_ds.hypothesis
        assert boots.dataset.hypothesis == independence_ds.hypothesis
