"""Tests for queue ordering, wait estimation and snapshots."""

import random

import pytest

from triage import (
    DISCHARGED,
    IN_PROGRESS,
    InvalidInput,
    NotFound,
    QueueConfig,
    build_snapshot,
    classify,
    estimate,
    find_entry,
    order_waiting,
)


class TestOrderWaiting:
    """Test cases for the ordering policy."""

    def test_priority_class_first(self, make_patient):
        patients = [
            make_patient(1, priority_class=3, minute=0),
            make_patient(2, priority_class=1, minute=5),
            make_patient(3, priority_class=2, minute=2),
        ]
        assert [p.id for p in order_waiting(patients)] == [2, 3, 1]

    def test_arrival_breaks_priority_ties(self, make_patient):
        patients = [
            make_patient(1, priority_class=2, minute=10),
            make_patient(2, priority_class=2, minute=1),
        ]
        assert [p.id for p in order_waiting(patients)] == [2, 1]

    def test_id_breaks_same_instant_ties(self, make_patient):
        patients = [
            make_patient(7, priority_class=1, minute=3),
            make_patient(4, priority_class=1, minute=3),
            make_patient(5, priority_class=1, minute=3),
        ]
        assert [p.id for p in order_waiting(patients)] == [4, 5, 7]

    def test_override_classes_sort_after_triage_classes(self, make_patient):
        patients = [
            make_patient(1, priority_class=5, minute=0),
            make_patient(2, priority_class=3, minute=9),
        ]
        assert [p.id for p in order_waiting(patients)] == [2, 1]

    def test_non_waiting_patients_ignored(self, make_patient):
        patients = [
            make_patient(1, priority_class=1, status=IN_PROGRESS),
            make_patient(2, priority_class=2),
            make_patient(3, priority_class=1, status=DISCHARGED),
        ]
        assert [p.id for p in order_waiting(patients)] == [2]

    def test_independent_of_input_order(self, make_patient):
        patients = [make_patient(i, priority_class=(i % 3) + 1, minute=i % 4) for i in range(1, 13)]
        expected = [p.id for p in order_waiting(patients)]
        shuffled = patients[:]
        random.Random(7).shuffle(shuffled)
        assert [p.id for p in order_waiting(shuffled)] == expected


class TestEstimate:
    """Test cases for the wait estimator."""

    def test_next_patient_waits_zero(self):
        assert estimate(1, 20) == 0
        assert estimate(1, 45) == 0

    def test_linear_steps(self):
        waits = [estimate(position, 15) for position in range(1, 8)]
        assert all(b - a == 15 for a, b in zip(waits, waits[1:]))

    def test_twenty_minute_average(self):
        assert [estimate(p, 20) for p in (1, 2, 3)] == [0, 20, 40]

    @pytest.mark.parametrize("position", [0, -1, 1.5])
    def test_invalid_position(self, position):
        with pytest.raises(InvalidInput):
            estimate(position, 20)


class TestBuildSnapshot:
    """Test cases for the snapshot builder."""

    def test_triage_scenario(self, make_patient, queue_config):
        """Equal classes are served by arrival; lower pain waits longest."""
        a = make_patient(1, priority_class=classify(9), minute=0, pain_level=9)
        b = make_patient(2, priority_class=classify(6), minute=1, pain_level=6)
        c = make_patient(3, priority_class=classify(9), minute=2, pain_level=9)

        snapshot = build_snapshot([b, c, a], queue_config)

        assert [(e.id, e.position, e.estimated_wait_min) for e in snapshot] == [
            (1, 1, 0),
            (3, 2, 20),
            (2, 3, 40),
        ]

    def test_waits_follow_configuration(self, make_patient):
        patients = [make_patient(i, minute=i) for i in range(1, 4)]
        snapshot = build_snapshot(patients, QueueConfig(avg_service_minutes=10))
        assert [e.estimated_wait_min for e in snapshot] == [0, 10, 20]

    def test_positions_are_contiguous(self, make_patient, queue_config):
        patients = [make_patient(i, priority_class=(i * 7) % 3 + 1, minute=(i * 5) % 6) for i in range(1, 21)]
        snapshot = build_snapshot(patients, queue_config)

        assert len(snapshot) == len(patients)
        assert [e.position for e in snapshot] == list(range(1, 21))
        for current, following in zip(snapshot, snapshot[1:]):
            assert current.patient.priority_class <= following.patient.priority_class
            if current.patient.priority_class == following.patient.priority_class:
                assert current.patient.created_at <= following.patient.created_at

    def test_empty_queue(self, queue_config):
        assert build_snapshot([], queue_config) == []

    def test_repeatable(self, make_patient, queue_config):
        patients = [make_patient(i, priority_class=2, minute=10 - i) for i in range(1, 6)]
        assert build_snapshot(patients, queue_config) == build_snapshot(patients, queue_config)

    def test_entry_serializes_patient_fields(self, make_patient, queue_config):
        entry = build_snapshot([make_patient(9, priority_class=1)], queue_config)[0]
        data = entry.to_dict()

        assert data["id"] == 9
        assert data["name"] == "Patient 9"
        assert data["priority_class"] == 1
        assert data["position"] == 1
        assert data["estimated_wait_min"] == 0


class TestFindEntry:
    """Test cases for looking up one patient in a snapshot."""

    def test_found(self, make_patient, queue_config):
        snapshot = build_snapshot(
            [make_patient(1, priority_class=2), make_patient(2, priority_class=1)],
            queue_config,
        )
        entry = find_entry(snapshot, 1)
        assert entry.position == 2
        assert entry.estimated_wait_min == 20

    def test_missing(self, make_patient, queue_config):
        snapshot = build_snapshot([make_patient(1)], queue_config)
        with pytest.raises(NotFound) as exc_info:
            find_entry(snapshot, 2)
        assert exc_info.value.patient_id == 2

    def test_string_ids_do_not_match(self, make_patient, queue_config):
        """Callers must pass canonical integer ids."""
        snapshot = build_snapshot([make_patient(1)], queue_config)
        with pytest.raises(NotFound):
            find_entry(snapshot, "1")
