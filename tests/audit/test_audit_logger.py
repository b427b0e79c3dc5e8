from __future__ import annotations

from src.fleet_attendance.fleet_attendance.audit.logger import ATTENDANCE_IMPORTED, AuditLogger

from conftest import RecordingAuditRepo


class BrokenAuditRepo:
    def insert(self, *, user_id, action, details):
        raise RuntimeError("audit table missing")


def test_log_action_records_details():
    repo = RecordingAuditRepo()

    AuditLogger(repo).log_action(5, ATTENDANCE_IMPORTED, {"count": 2})
    AuditLogger(repo).log_action(None, ATTENDANCE_IMPORTED)

    assert repo.entries == [("5", ATTENDANCE_IMPORTED, {"count": 2}), (None, ATTENDANCE_IMPORTED, {})]


def test_audit_failures_never_propagate(caplog):
    AuditLogger(BrokenAuditRepo()).log_action(1, ATTENDANCE_IMPORTED, {"count": 2})

    assert "Failed to log audit action" in caplog.text
