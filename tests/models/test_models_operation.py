import unittest

from gcloudjob.errors import InvalidArgumentError
from gcloudjob.models import (
    Failed,
    OperationError,
    OperationSnapshot,
    Pending,
    Succeeded,
    snapshot_from_dict,
)

NAME = "projects/p/instances/my-new-instance/operations/op-1"


class TestOperationSnapshot(unittest.TestCase):
    def test_default_status_is_pending(self) -> None:
        snap = OperationSnapshot(name=NAME)
        self.assertIsInstance(snap.status, Pending)
        self.assertFalse(snap.done)
        self.assertFalse(snap.failed)
        self.assertEqual(snap.metadata, {})

    def test_succeeded_is_done_not_failed(self) -> None:
        snap = OperationSnapshot(name=NAME, status=Succeeded({"name": "x"}))
        self.assertTrue(snap.done)
        self.assertFalse(snap.failed)

    def test_failed_is_done_and_failed(self) -> None:
        snap = OperationSnapshot(
            name=NAME, status=Failed(OperationError(code=6, message="already exists"))
        )
        self.assertTrue(snap.done)
        self.assertTrue(snap.failed)

    def test_equal_statuses_compare_equal(self) -> None:
        self.assertEqual(Pending(), Pending())
        self.assertEqual(Succeeded({"a": 1}), Succeeded({"a": 1}))
        self.assertNotEqual(Succeeded({"a": 1}), Pending())


class TestSnapshotFromDict(unittest.TestCase):
    def test_not_done_is_pending(self) -> None:
        snap = snapshot_from_dict({"name": NAME, "metadata": {"progress": 10}})
        self.assertEqual(snap.name, NAME)
        self.assertIsInstance(snap.status, Pending)
        self.assertEqual(snap.metadata, {"progress": 10})

        snap = snapshot_from_dict({"name": NAME, "done": False})
        self.assertIsInstance(snap.status, Pending)

    def test_done_with_response_is_succeeded(self) -> None:
        snap = snapshot_from_dict(
            {"name": NAME, "done": True, "response": {"name": "my-new-instance"}}
        )
        self.assertEqual(snap.status, Succeeded({"name": "my-new-instance"}))

    def test_done_without_response_has_empty_payload(self) -> None:
        snap = snapshot_from_dict({"name": NAME, "done": True})
        self.assertEqual(snap.status, Succeeded({}))

    def test_done_with_error_is_failed(self) -> None:
        snap = snapshot_from_dict(
            {
                "name": NAME,
                "done": True,
                "error": {
                    "code": 6,
                    "message": "already exists",
                    "details": [{"@type": "type.googleapis.com/x"}, "junk"],
                },
            }
        )
        self.assertIsInstance(snap.status, Failed)
        self.assertEqual(snap.status.error.code, 6)
        self.assertEqual(snap.status.error.message, "already exists")
        self.assertEqual(snap.status.error.details, [{"@type": "type.googleapis.com/x"}])

    def test_malformed_error_fields_fall_back(self) -> None:
        snap = snapshot_from_dict(
            {"name": NAME, "done": True, "error": {"code": "x", "details": "y"}}
        )
        self.assertEqual(snap.status, Failed(OperationError(code=0, message="")))

    def test_missing_name_raises(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            snapshot_from_dict({"done": True})
        with self.assertRaises(InvalidArgumentError):
            snapshot_from_dict({"name": "  "})


if __name__ == "__main__":
    unittest.main()
