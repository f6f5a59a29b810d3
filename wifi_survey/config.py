# wifi_survey/config.py

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from wifi_survey.fields import DEFAULT_POLICY, POLICIES

ENV_POLICY = "WIFI_SURVEY_POLICY"
ENV_LOG_LEVEL = "WIFI_SURVEY_LOG_LEVEL"


@dataclass(frozen=True)
class SurveyConfig:
    """
    Settings handed to MainWindow / AppState at start-up.

    required_policy:
        "dual_band" (5GHz readings optional) or "strict" (only
        interference optional). See wifi_survey.fields.POLICIES.
    """

    window_title: str = "Wi-Fi Survey"
    required_policy: str = DEFAULT_POLICY
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.required_policy not in POLICIES:
            raise ValueError(
                f"Unknown required-field policy {self.required_policy!r} "
                f"(expected one of: {', '.join(sorted(POLICIES))})"
            )
        if self.log_level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SurveyConfig":
        env = os.environ if environ is None else environ
        return cls(
            required_policy=(env.get(ENV_POLICY) or DEFAULT_POLICY).strip().lower(),
            log_level=(env.get(ENV_LOG_LEVEL) or "INFO").strip().upper(),
        )
