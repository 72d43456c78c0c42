"""Tests for TrackedRecord and the Record/ChangeTracker protocols."""

from canhas.domain.record import ChangeTracker, Record, TrackedRecord


class TestTrackedRecord:
    def test_satisfies_protocols(self) -> None:
        record = TrackedRecord()
        assert isinstance(record, Record)
        assert isinstance(record.changes, ChangeTracker)

    def test_new_by_default(self) -> None:
        assert TrackedRecord().persisted is False

    def test_missing_attribute_reads_none(self) -> None:
        assert TrackedRecord().read_attribute("website") is None

    def test_write_marks_changed(self) -> None:
        record = TrackedRecord({"owner_id": 7}, persisted=True)
        assert not record.was_changed("owner_id")
        record["owner_id"] = 8
        assert record.was_changed("owner_id")
        assert record["owner_id"] == 8
        assert record.prior_value("owner_id") == 7

    def test_identical_write_still_marks_changed(self) -> None:
        record = TrackedRecord({"owner_id": 7}, persisted=True)
        record.write_attribute("owner_id", 7)
        assert record.was_changed("owner_id")
        assert record.changed_attributes() == ["owner_id"]

    def test_prior_value_survives_repeated_writes(self) -> None:
        record = TrackedRecord({"owner_id": 7}, persisted=True)
        record["owner_id"] = 8
        record["owner_id"] = 9
        assert record.prior_value("owner_id") == 7

    def test_commit_snapshots_and_persists(self) -> None:
        record = TrackedRecord({"owner_id": None})
        record["owner_id"] = 7
        record.commit()
        assert record.persisted is True
        assert not record.was_changed("owner_id")
        assert record.prior_value("owner_id") == 7
