"""Tests for room form validation and create/edit handling."""

from __future__ import annotations

from wifi_survey.fields import NOT_REQUIRED_DUAL_BAND, NOT_REQUIRED_STRICT
from wifi_survey.models import RoomRecord
from wifi_survey.state import RoomList
from wifi_survey.submission import (
    MISSING_TITLE,
    build_record,
    missing_fields,
    normalize_form,
    submit,
)


def test_empty_interference_is_accepted(sala_form):
    assert missing_fields(sala_form, NOT_REQUIRED_STRICT) == []


def test_every_missing_label_is_reported():
    form = {"room": "", "signal_level_24": "", "signal_level_5": "-50", "speed_24": "", "speed_5": "1"}
    assert missing_fields(form, NOT_REQUIRED_STRICT) == [
        "Cômodo",
        "Nível de sinal (dbm) 2,4GHz",
        "Velocidade (Mbps) 2,4GHz",
    ]


def test_absent_and_blank_fields_count_the_same():
    absent = missing_fields({"room": "Sala"}, NOT_REQUIRED_STRICT)
    blank = missing_fields(
        {"room": "Sala", "signal_level_24": "", "signal_level_5": "  ", "speed_24": None, "speed_5": ""},
        NOT_REQUIRED_STRICT,
    )
    assert absent == blank
    assert len(absent) == 4


def test_dual_band_policy_allows_missing_5ghz(sala_form):
    form = dict(sala_form, signal_level_5="", speed_5="")
    assert missing_fields(form, NOT_REQUIRED_DUAL_BAND) == []
    assert missing_fields(form, NOT_REQUIRED_STRICT) == [
        "Nível de sinal (dbm) 5GHz",
        "Velocidade (Mbps) 5GHz",
    ]


def test_pairs_last_value_wins_and_unknown_names_dropped():
    values = normalize_form([("room", "Quarto"), ("room", "Sala"), ("bogus", "x")])
    assert values["room"] == "Sala"
    assert "bogus" not in values
    assert values["speed_24"] == ""


def test_non_numeric_measurement_is_kept_as_text(sala_form):
    record = build_record(dict(sala_form, speed_24="rápido"))
    assert record.speed_24 == "rápido"


def test_build_record_uses_editing_id(sala_form):
    assert build_record(sala_form, "abc").id == "abc"
    fresh_a = build_record(sala_form)
    fresh_b = build_record(sala_form)
    assert fresh_a.id and fresh_b.id and fresh_a.id != fresh_b.id


def test_submit_failure_leaves_snapshot_untouched():
    rooms = RoomList([RoomRecord(id="1", room="Cozinha", signal_level_24="-60", speed_24="20")])
    outcome = submit(rooms, {"room": ""})
    assert not outcome.ok
    assert outcome.rooms is rooms
    assert outcome.record is None
    assert outcome.failure.title == MISSING_TITLE
    assert outcome.failure.description == (
        "Campos faltando: Cômodo, Nível de sinal (dbm) 2,4GHz, Velocidade (Mbps) 2,4GHz"
    )


def test_submit_create_appends_one_room(sala_form):
    first = RoomRecord(id="1", room="Cozinha", signal_level_24="-60", speed_24="20")
    rooms = RoomList([first])

    outcome = submit(rooms, sala_form)

    assert outcome.ok and outcome.created
    assert len(outcome.rooms) == 2
    assert outcome.rooms[0] == first
    assert outcome.rooms[1].room == "Sala"
    assert outcome.rooms[1].id not in ("", "1")
    assert len(rooms) == 1


def test_submit_edit_replaces_in_place(sala_form):
    rooms = RoomList(
        [
            RoomRecord(id="1", room="Cozinha", signal_level_24="-60", speed_24="20"),
            RoomRecord(id="2", room="Quarto", signal_level_24="-70", speed_24="10"),
            RoomRecord(id="3", room="Escritório", signal_level_24="-50", speed_24="80"),
        ]
    )

    outcome = submit(rooms, sala_form, editing_id="2")

    assert outcome.ok and not outcome.created
    assert outcome.rooms.ids() == ["1", "2", "3"]
    assert outcome.rooms[1].room == "Sala"
    assert outcome.rooms[1].speed_5 == "50"


def test_submit_edit_of_missing_id_is_a_no_op(sala_form):
    rooms = RoomList([RoomRecord(id="1", room="Cozinha", signal_level_24="-60", speed_24="20")])
    outcome = submit(rooms, sala_form, editing_id="gone")
    assert outcome.ok
    assert outcome.rooms == rooms
