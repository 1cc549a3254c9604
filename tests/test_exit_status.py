"""Tests for the exit status kept while the menu closes."""

from power_menu.exitStatus import ExitStatus


class TestExitStatus:
    def test_clean_close(self):
        """Closing without a failure exits with 0."""
        status = ExitStatus()
        assert status.record(0) == 0
        assert not status.failed

    def test_failure_is_kept(self):
        """A failed action exits with 1."""
        status = ExitStatus()
        status.record(1)
        assert status.code == 1
        assert status.failed

    def test_later_close_does_not_reset_failure(self):
        """The focus-out close after a failure keeps the failure code."""
        status = ExitStatus()
        status.record(1)
        status.record(0)
        status.record(0)
        assert status.code == 1

    def test_first_failure_wins(self):
        status = ExitStatus()
        status.record(0)
        status.record(2)
        status.record(1)
        assert status.code == 2
