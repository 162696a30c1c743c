"""
Tests for the Result[P] envelope and the Timer.
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pyinfer.core.compute.timing import Timer, timed
from pyinfer.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResult:
    """Result envelope."""

    def test_basic_creation(self):
        """Fields are stored and warnings default to empty."""
        result = Result(
            params=FakeParams(value=1.5),
            info={'type': 'bootstrap'},
            timing=None,
            backend_name='cpu_generate',
        )
        assert result.params.value == 1.5
        assert result.info['type'] == 'bootstrap'
        assert result.warnings == ()

    def test_frozen(self):
        """Results cannot be modified."""
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name='x')
        with pytest.raises(FrozenInstanceError):
            result.backend_name = 'y'

    def test_has_warning(self):
        """has_warning matches substrings."""
        result = Result(
            params=FakeParams(1.0), info={}, timing=None, backend_name='x',
            warnings=("2 replicate(s) gave an undefined diffmean",),
        )
        assert result.has_warning("undefined")
        assert not result.has_warning("converged")


class TestTimer:
    """Timer sections and lifecycle."""

    def test_sections_accumulate(self):
        """Repeated sections accumulate under one key."""
        timer = Timer()
        timer.start()
        with timer.section('a'):
            pass
        with timer.section('a'):
            pass
        timer.stop()
        out = timer.result()
        assert set(out) == {'total_seconds', 'a'}
        assert out['a'] >= 0.0

    def test_result_before_stop(self):
        """Results need a stopped timer."""
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()

    def test_stop_before_start(self):
        """Stopping needs a started timer."""
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_timed(self):
        """timed() yields a stopped timer."""
        with timed() as timer:
            pass
        assert timer.result()['total_seconds'] >= 0.0
