"""
wifi_survey/state.py

RoomList is an immutable, ordered snapshot of the surveyed rooms.
AppState owns the current snapshot and announces every new one through
``rooms_changed`` so the table and charts can redraw.

Nothing outside AppState swaps the snapshot; views only read it.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from PySide6.QtCore import QObject, Signal

from wifi_survey.config import SurveyConfig
from wifi_survey.fields import not_required_fields
from wifi_survey.models import RoomRecord
from wifi_survey.submission import FormData, SubmitOutcome, submit

_LOG = logging.getLogger(__name__)


class RoomList:
    """
    Ordered rooms. Every "mutator" returns a new RoomList.

    replace() and remove() with an id that is not present return an
    equal snapshot; callers are not told.
    """

    __slots__ = ("_rooms",)

    def __init__(self, rooms: Iterable[RoomRecord] = ()) -> None:
        self._rooms = tuple(rooms)

    def __iter__(self) -> Iterator[RoomRecord]:
        return iter(self._rooms)

    def __len__(self) -> int:
        return len(self._rooms)

    def __getitem__(self, index: int) -> RoomRecord:
        return self._rooms[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RoomList):
            return NotImplemented
        return self._rooms == other._rooms

    def __hash__(self) -> int:
        return hash(self._rooms)

    def __repr__(self) -> str:
        return f"RoomList({list(self._rooms)!r})"

    # ------------------------------------------------------------------ Lookup

    def ids(self) -> List[str]:
        return [r.id for r in self._rooms]

    def index_of(self, room_id: str) -> int:
        for idx, room in enumerate(self._rooms):
            if room.id == room_id:
                return idx
        return -1

    def get(self, room_id: str) -> Optional[RoomRecord]:
        idx = self.index_of(room_id)
        return self._rooms[idx] if idx != -1 else None

    # ------------------------------------------------------------------ Snapshots

    def append(self, record: RoomRecord) -> "RoomList":
        assert self.index_of(record.id) == -1, f"duplicate room id {record.id!r}"
        return RoomList(self._rooms + (record,))

    def replace(self, room_id: str, record: RoomRecord) -> "RoomList":
        idx = self.index_of(room_id)
        if idx == -1:
            _LOG.debug("replace: no room with id %s, nothing changed", room_id)
            return self
        rooms = list(self._rooms)
        rooms[idx] = record.with_id(room_id)
        return RoomList(rooms)

    def remove(self, room_id: str) -> "RoomList":
        kept = [r for r in self._rooms if r.id != room_id]
        if len(kept) == len(self._rooms):
            _LOG.debug("remove: no room with id %s, nothing changed", room_id)
            return self
        return RoomList(kept)


class AppState(QObject):
    """
    Session state for the survey window.

    Structure:
        rooms = RoomList([
            RoomRecord(id="…", room="Sala", signal_level_24="-40", ...),
            ...
        ])
    """

    rooms_changed = Signal(object)

    def __init__(self, config: Optional[SurveyConfig] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.config = config or SurveyConfig()
        self.rooms = RoomList()

    # ------------------------------------------------------------------ Commit

    def commit(self, rooms: RoomList) -> None:
        """Install ``rooms`` as the current snapshot and notify views."""
        if rooms is self.rooms:
            return
        _LOG.info("rooms updated: %d -> %d", len(self.rooms), len(rooms))
        self.rooms = rooms
        self.rooms_changed.emit(rooms)

    # ------------------------------------------------------------------ Operations

    def remove_room(self, room_id: str) -> None:
        self.commit(self.rooms.remove(room_id))

    def submit(self, form: FormData, editing_id: Optional[str] = None) -> SubmitOutcome:
        """Run the room form through validation and commit it when it passes."""
        outcome = submit(
            self.rooms,
            form,
            editing_id=editing_id,
            not_required=not_required_fields(self.config.required_policy),
        )
        if outcome.ok:
            self.commit(outcome.rooms)
        return outcome
