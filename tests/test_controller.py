from pathlib import Path
import argparse
import random
import tempfile
import unittest
from unittest.mock import MagicMock, Mock, patch

from flashmdlib._enums import ReviewEvent
from flashmdlib.config import Config
from flashmdlib.controller import FlashcardCommand
from flashmdlib.exceptions import EmptyDeckError
from flashmdlib.flashcard import FlashcardController, ReviewSession
from flashmdlib.models import Card


class TestFlashcardController(unittest.TestCase):
    def setUp(self):
        self.view = MagicMock()
        rng = Mock()
        rng.randrange.side_effect = [0, 1]
        self.session = ReviewSession([Card("A", "foo\n"), Card("B", "bar\n")], rng=rng)
        self.controller = FlashcardController(self.view, self.session)

    def test_bindings(self):
        self.view.bind_primary.assert_called_once_with(self.controller.primary)
        self.view.bind_cancel.assert_called_once_with(self.controller.cancel)
        self.view.setCloseCallback.assert_called_once_with(self.session.on_cancel_event)

    def test_initial_render(self):
        self.view.set_title.assert_called_with("A")
        self.view.set_body.assert_called_with("")

    def test_flip_and_advance(self):
        self.controller.primary()
        self.view.set_title.assert_called_with("A")
        self.view.set_body.assert_called_with("foo\n")
        self.controller.primary()
        self.view.set_title.assert_called_with("B")
        self.view.set_body.assert_called_with("")

    def test_cancel_closes_view(self):
        self.controller.cancel()
        self.assertTrue(self.session.terminated)
        self.view.close.assert_called_once()
        self.view.set_body.reset_mock()
        self.controller.primary()
        self.view.set_body.assert_not_called()

    def test_input_dispatched_as_review_events(self):
        with patch.object(self.session, "handle", wraps=self.session.handle) as handle:
            self.controller.primary()
            self.controller.cancel()
        self.assertListEqual([c.args[0] for c in handle.call_args_list], [ReviewEvent.Primary, ReviewEvent.Cancel])
        self.assertTrue(self.session.terminated)

    def test_run_shows_view(self):
        self.controller.run()
        self.view.show.assert_called_once()


class TestFlashcardCommand(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.root = Path(self.tmpdir.name)
        with patch.object(Config, "config_dir", return_value=self.root / "config"):
            self.command = FlashcardCommand(Config())

    def tearDown(self):
        self.tmpdir.cleanup()

    def namespace(self, file: str):
        return argparse.Namespace(file=file)

    def test_load(self):
        path = self.root / "cards.md"
        path.write_text("# A\nfoo\n# B\nbar\n", encoding="utf-8")
        session = self.command.load(self.namespace(str(path)))
        self.assertListEqual([card.title for card in session.deck], ["A", "B"])

    def test_load_empty_deck(self):
        path = self.root / "cards.md"
        path.write_text("no headings here\n", encoding="utf-8")
        with self.assertRaises(EmptyDeckError):
            self.command.load(self.namespace(str(path)))

    def test_cmd_not_a_file(self):
        with patch("builtins.print"):
            self.assertEqual(self.command.cmd(self.namespace(str(self.root))), 1)
            self.assertEqual(self.command.cmd(self.namespace(str(self.root / "missing.md"))), 1)

    def test_cmd_empty_deck(self):
        path = self.root / "cards.md"
        path.write_text("", encoding="utf-8")
        with patch("builtins.print") as mock_print:
            self.assertEqual(self.command.cmd(self.namespace(str(path))), 1)
        self.assertIn("No cards found", mock_print.call_args[0][0])

    def test_cmd_unreadable(self):
        path = self.root / "cards.md"
        path.write_text("# A\n", encoding="utf-8")
        with patch("flashmdlib.services.parse.Path.open", side_effect=PermissionError("denied")), \
                patch("builtins.print"):
            self.assertEqual(self.command.cmd(self.namespace(str(path))), 1)

    def test_cmd_runs_app(self):
        path = self.root / "cards.md"
        path.write_text("# A\nfoo\n", encoding="utf-8")
        app, window_cls = MagicMock(), MagicMock()
        app.exec.return_value = 0
        with patch.object(FlashcardCommand, "_app", app), patch.object(FlashcardCommand, "_window", window_cls):
            self.assertEqual(self.command.cmd(self.namespace(str(path))), 0)
        window_cls.assert_called_once_with(self.command.config)
        window_cls.return_value.set_title.assert_called_with("A")
        window_cls.return_value.show.assert_called_once()
        app.setStyleSheet.assert_called_once()


if __name__ == "__main__":
    unittest.main()
