"""Tests for start-up configuration."""

from __future__ import annotations

import pytest

from wifi_survey.config import ENV_LOG_LEVEL, ENV_POLICY, SurveyConfig


def test_defaults():
    cfg = SurveyConfig.from_env({})
    assert cfg.required_policy == "dual_band"
    assert cfg.log_level == "INFO"


def test_from_env_reads_policy_and_level():
    cfg = SurveyConfig.from_env({ENV_POLICY: " Strict ", ENV_LOG_LEVEL: "debug"})
    assert cfg.required_policy == "strict"
    assert cfg.log_level == "DEBUG"


def test_unknown_policy_is_rejected():
    with pytest.raises(ValueError):
        SurveyConfig.from_env({ENV_POLICY: "everything-optional"})


@pytest.mark.parametrize("level", ["root", "VERBOSE", "basicConfig"])
def test_unknown_log_level_is_rejected(level):
    with pytest.raises(ValueError):
        SurveyConfig.from_env({ENV_LOG_LEVEL: level})


def test_lowercase_level_is_accepted():
    assert SurveyConfig.from_env({ENV_LOG_LEVEL: "warning"}).log_level == "WARNING"
