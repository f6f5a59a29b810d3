"""
wifi_survey/fields.py

Static description of the room form:
- The ordered list of user-entered fields and their labels
- Which fields may be left blank, per required-field policy

Everything that iterates form fields (validation, dialog, table, charts)
walks FIELDS instead of whatever names happen to be submitted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, List


@dataclass(frozen=True)
class FieldSpec:
    key: str
    label: str
    numeric: bool = False
    placeholder: str = ""


FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("room", "Cômodo", placeholder="Ex: sala de estar"),
    FieldSpec("signal_level_24", "Nível de sinal (dbm) 2,4GHz", numeric=True, placeholder="2,4GHz"),
    FieldSpec("signal_level_5", "Nível de sinal (dbm) 5GHz", numeric=True, placeholder="5GHz"),
    FieldSpec("speed_24", "Velocidade (Mbps) 2,4GHz", numeric=True, placeholder="2,4GHz"),
    FieldSpec("speed_5", "Velocidade (Mbps) 5GHz", numeric=True, placeholder="5GHz"),
    FieldSpec("interference", "Interferência"),
)

FIELD_KEYS: tuple[str, ...] = tuple(f.key for f in FIELDS)

FIELD_LABELS: Dict[str, str] = {"id": "ID", **{f.key: f.label for f in FIELDS}}

# ---------------------------------------------------------------------- Policies

# Rooms page: 5GHz readings are optional (not every room sees the 5GHz radio).
NOT_REQUIRED_DUAL_BAND: FrozenSet[str] = frozenset({"interference", "signal_level_5", "speed_5"})

# Single-page form: everything but interference must be filled in.
NOT_REQUIRED_STRICT: FrozenSet[str] = frozenset({"interference"})

POLICIES: Dict[str, FrozenSet[str]] = {
    "dual_band": NOT_REQUIRED_DUAL_BAND,
    "strict": NOT_REQUIRED_STRICT,
}

DEFAULT_POLICY = "dual_band"

for _name, _keys in POLICIES.items():
    _unknown = _keys.difference(FIELD_KEYS)
    if _unknown:
        raise RuntimeError(f"policy {_name!r} exempts unknown fields: {sorted(_unknown)}")


def not_required_fields(policy: str = DEFAULT_POLICY) -> FrozenSet[str]:
    """Field keys that may be blank under ``policy`` (KeyError if unknown)."""
    return POLICIES[policy]


def required_fields(policy: str = DEFAULT_POLICY) -> List[str]:
    exempt = not_required_fields(policy)
    return [f.key for f in FIELDS if f.key not in exempt]
