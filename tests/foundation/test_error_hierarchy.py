"""Tests for the moostats exception hierarchy."""

from __future__ import annotations

from moostats.foundation.exceptions import (
    ConfigurationError,
    InvalidParameterError,
    InvalidProblemError,
    MissingConfigError,
    MoostatsError,
    ProblemDimensionError,
    ProblemError,
    SinkOpenError,
)


def test_basic_error():
    err = MoostatsError("Something went wrong")
    assert "Something went wrong" in str(err)
    assert err.message == "Something went wrong"
    assert err.suggestion is None
    assert err.details == {}


def test_error_with_suggestion():
    err = MoostatsError("Something went wrong", suggestion="Try this instead")
    assert "Suggestion: Try this instead" in str(err)


def test_missing_config_error():
    err = MissingConfigError("modulus", config_class="StatisticsConfig")
    assert "modulus" in str(err)
    assert "StatisticsConfig()" in str(err)
    assert isinstance(err, ConfigurationError)


def test_invalid_parameter_error_reports_expectation():
    err = InvalidParameterError("statistics.modulus", 0, "an integer >= 1")
    assert err.details == {"field": "statistics.modulus", "value": 0}
    assert "an integer >= 1" in str(err)


def test_problem_dimension_error_is_setup_failure():
    err = ProblemDimensionError("bad", n_var=1, n_obj=2)
    assert isinstance(err, ProblemError)
    assert isinstance(err, ConfigurationError)
    assert err.details == {"n_var": 1, "n_obj": 2}


def test_invalid_problem_lists_available():
    err = InvalidProblemError("foo", ["zdt1", "zdt3"])
    assert "zdt1, zdt3" in str(err)


def test_sink_open_error():
    err = SinkOpenError("/nowhere/stats.log", "No such file or directory")
    assert isinstance(err, ConfigurationError)
    assert "/nowhere/stats.log" in str(err)
