"""
wifi_survey/submission.py

Room form submission:
    1. Check required fields (collect every missing label, not just the first)
    2. Build a normalized RoomRecord (fresh id, or the id being edited)
    3. Append or replace it in a RoomList snapshot

A failed check is returned as a ValidationFailure value. Nothing is
raised and the snapshot handed in comes back untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from wifi_survey.fields import FIELDS, FIELD_KEYS, not_required_fields
from wifi_survey.models import RoomRecord, new_room_id

if TYPE_CHECKING:
    from wifi_survey.state import RoomList

_LOG = logging.getLogger(__name__)

FormData = Union[Mapping[str, Optional[str]], Iterable[Tuple[str, Optional[str]]]]

MISSING_TITLE = "Preencha todos os campos"
MISSING_PREFIX = "Campos faltando: "


@dataclass(frozen=True)
class ValidationFailure:
    title: str
    description: str
    missing: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SubmitOutcome:
    rooms: "RoomList"
    record: Optional[RoomRecord] = None
    created: bool = False
    failure: Optional[ValidationFailure] = field(default=None)

    @property
    def ok(self) -> bool:
        return self.failure is None


# ---------------------------------------------------------------------- Helpers


def normalize_form(form: FormData) -> Dict[str, str]:
    """
    Collapse a mapping or a sequence of (name, value) pairs into a dict
    of declared field keys -> stripped text.

    Repeated names: last one wins. Undeclared names are dropped.
    Absent fields come back as "".
    """
    items = form.items() if isinstance(form, Mapping) else form
    values: Dict[str, str] = {key: "" for key in FIELD_KEYS}
    for name, value in items:
        if name not in values:
            continue
        values[name] = "" if value is None else str(value).strip()
    return values


def missing_fields(form: FormData, not_required: Iterable[str] = ()) -> List[str]:
    """Labels of every empty field that is not in ``not_required``, in form order."""
    values = normalize_form(form)
    exempt = frozenset(not_required)
    return [
        spec.label
        for spec in FIELDS
        if not values[spec.key] and spec.key not in exempt
    ]


def build_record(form: FormData, editing_id: Optional[str] = None) -> RoomRecord:
    values = normalize_form(form)
    return RoomRecord(id=editing_id or new_room_id(), **values)


# ---------------------------------------------------------------------- Public API


def submit(
    rooms: "RoomList",
    form: FormData,
    editing_id: Optional[str] = None,
    not_required: Optional[Iterable[str]] = None,
) -> SubmitOutcome:
    """
    Validate ``form`` and apply it to ``rooms``.

    With ``editing_id`` the matching room is replaced in place (a missing
    id leaves the snapshot as it is); without one a new room is appended.
    """
    if not_required is None:
        not_required = not_required_fields()

    missing = missing_fields(form, not_required)
    if missing:
        _LOG.info("room form rejected, missing: %s", ", ".join(missing))
        failure = ValidationFailure(
            title=MISSING_TITLE,
            description=MISSING_PREFIX + ", ".join(missing),
            missing=tuple(missing),
        )
        return SubmitOutcome(rooms=rooms, failure=failure)

    record = build_record(form, editing_id)
    if editing_id:
        return SubmitOutcome(rooms=rooms.replace(editing_id, record), record=record, created=False)
    return SubmitOutcome(rooms=rooms.append(record), record=record, created=True)
