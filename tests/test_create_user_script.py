"""Tests for the create_user CLI script (SessionLocal swapped for in-memory SQLite)."""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from app.scripts import create_user
from tests.db import make_session_factory, make_test_engine


class TestCreateUserScript(unittest.TestCase):
    def setUp(self) -> None:
        engine = make_test_engine()
        self.addCleanup(engine.dispose)
        self.Session = make_session_factory(engine)
        for target, value in (("SessionLocal", self.Session), ("configure_logging", lambda: None)):
            patcher = patch.object(create_user, target, value)
            patcher.start()
            self.addCleanup(patcher.stop)

    def run_main(self, *argv: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = create_user.main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_creates_user(self) -> None:
        code, out, _ = self.run_main("alice", "alice@x.com", "secret1")
        self.assertEqual(code, 0)
        self.assertIn("Created user 'alice' with id 1", out)

    def test_duplicate_username_fails(self) -> None:
        self.run_main("alice", "alice@x.com", "secret1")
        code, _, err = self.run_main("alice", "other@x.com", "secret2")
        self.assertEqual(code, 1)
        self.assertIn("already exists", err)

    def test_invalid_email_fails_without_session(self) -> None:
        with patch.object(create_user, "SessionLocal") as session_local:
            code, _, err = self.run_main("alice", "nope", "secret1")
        self.assertEqual(code, 1)
        self.assertIn("Invalid email", err)
        session_local.assert_not_called()


if __name__ == "__main__":
    unittest.main()
