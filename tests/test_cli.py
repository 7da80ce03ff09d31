import io
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from game import Settings, load_progress, save_progress
from prismflow_core import cli


class TestCli(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.db = os.path.join(self._tmp.name, "prismflow.db")

    def tearDown(self):
        self._tmp.cleanup()

    def _run(self, argv, inputs=()):
        buf = io.StringIO()
        with patch.object(sys, "argv", ["prismflow"] + argv), \
                patch("builtins.input", side_effect=list(inputs)), \
                redirect_stdout(buf):
            cli.main()
        return buf.getvalue()

    def test_given_level_when_printing_then_board_and_hint_shown(self):
        out = self._run(["--level", "2", "--seed", "9", "--db", self.db, "--hint"])
        self.assertIn("Level 2:", out)
        self.assertIn("0 1 2 3 4", out)
        self.assertIn("Suggested pour:", out)

    def test_given_no_level_when_printing_then_saved_level_used(self):
        save_progress(self.db, 16, Settings())
        out = self._run(["--seed", "1", "--db", self.db])
        self.assertIn("Level 16:", out)

    def test_given_play_session_when_commands_entered_then_feedback_and_progress_saved(self):
        out = self._run(["--level", "1", "--seed", "4", "--db", self.db, "--play"], ["u", "x", "9,9", "h", "q"])
        self.assertIn("Nothing to undo.", out)
        self.assertIn("Could not parse.", out)
        self.assertIn("No such tube.", out)
        self.assertIn("Suggested pour:", out)
        self.assertIn("2 hints left", out)
        self.assertEqual(load_progress(self.db)[0], 1)


if __name__ == "__main__":
    unittest.main(verbosity=2)
