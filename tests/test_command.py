"""Tests for the spindle command model and its derived timeline."""

import pytest

from spindlewarmup.core.command import CommandSequence, SpindleCommand


def _warmup() -> CommandSequence:
    return CommandSequence.from_pairs([(0, 5000), (12000, 10000)])


class TestAppend:
    def test_starts_empty(self):
        seq = CommandSequence()
        assert len(seq) == 0
        assert seq.total_duration() == 0

    def test_append_defaults_to_spindle_off_zero_duration(self):
        seq = CommandSequence()
        cmd = seq.append()
        assert cmd == SpindleCommand(id=0, rpm=0, duration_ms=0)

    def test_ids_are_monotonic(self):
        seq = CommandSequence()
        ids = [seq.append().id for _ in range(3)]
        assert ids == [0, 1, 2]

    def test_ids_not_reused_after_remove(self):
        seq = CommandSequence()
        seq.append()
        last = seq.append()
        seq.remove(last.id)
        assert seq.append().id == 2

    def test_insertion_order_is_execution_order(self):
        seq = _warmup()
        assert [c.rpm for c in seq] == [0, 12000]


class TestUpdate:
    def test_update_replaces_field_keeps_position_and_id(self):
        seq = _warmup()
        assert seq.update(1, rpm=18000)
        assert seq[1] == SpindleCommand(id=1, rpm=18000, duration_ms=10000)
        assert seq[0].id == 0

    def test_update_unknown_id_is_noop(self):
        seq = _warmup()
        before = seq.commands
        version = seq.version
        assert not seq.update(99, rpm=1)
        assert seq.commands == before
        assert seq.version == version

    def test_update_unknown_field_raises(self):
        seq = _warmup()
        with pytest.raises(ValueError):
            seq.update(0, speed=10)

    def test_update_cannot_change_id(self):
        seq = _warmup()
        with pytest.raises(ValueError):
            seq.update(0, id=5)

    def test_nan_input_is_stored(self):
        seq = _warmup()
        seq.update(0, duration_ms=float("nan"))
        assert seq[0].duration_ms != seq[0].duration_ms


class TestRemove:
    def test_remove_unknown_id_is_noop(self):
        seq = _warmup()
        assert not seq.remove(42)
        assert len(seq) == 2

    def test_remove_first_rederives_start_times(self):
        seq = _warmup()
        assert seq.start_time_of(1) == 5000
        seq.remove(0)
        assert seq.start_time_of(0) == 0
        assert seq[0].rpm == 12000
        assert seq.total_duration() == 10000


class TestDerivedTimeline:
    def test_warmup_scenario(self):
        seq = _warmup()
        assert seq.start_time_of(0) == 0
        assert seq.start_time_of(1) == 5000
        assert seq.total_duration() == 15000

    def test_total_is_sum_of_durations(self):
        pairs = [(100, 1), (0, 20), (300, 300), (400, 4000)]
        seq = CommandSequence.from_pairs(pairs)
        assert seq.total_duration() == sum(d for _, d in pairs)

    def test_start_time_past_end_counts_missing_as_zero(self):
        seq = _warmup()
        assert seq.start_time_of(2) == 15000
        assert seq.start_time_of(50) == 15000

    def test_start_time_negative_index(self):
        seq = _warmup()
        assert seq.start_time_of(-1) == 0

    def test_start_time_empty_sequence(self):
        assert CommandSequence().start_time_of(3) == 0

    def test_start_times_are_monotonic(self):
        seq = CommandSequence.from_pairs([(1, 10), (2, 0), (3, 5), (4, 0), (5, 7)])
        starts = [seq.start_time_of(i) for i in range(len(seq) + 1)]
        assert starts == sorted(starts)
        # equal only across zero-duration commands
        assert starts[1] == starts[2]
        assert starts[3] == starts[4]
        assert starts[2] < starts[3]


class TestVersion:
    def test_every_effective_mutation_bumps_version(self):
        seq = CommandSequence()
        v0 = seq.version
        cmd = seq.append()
        seq.update(cmd.id, rpm=10)
        seq.remove(cmd.id)
        assert seq.version == v0 + 3

    def test_empty_patch_changes_nothing(self):
        seq = _warmup()
        version = seq.version
        assert not seq.update(0)
        assert seq.version == version
        assert seq[0] == SpindleCommand(id=0, rpm=0, duration_ms=5000)

    def test_get_and_index_of(self):
        seq = _warmup()
        assert seq.get(1).rpm == 12000
        assert seq.get(7) is None
        assert seq.index_of(1) == 1
        assert seq.index_of(7) is None
