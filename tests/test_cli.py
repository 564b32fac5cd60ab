import io
import os
import unittest
from contextlib import redirect_stdout
from unittest import mock

from tictactoe_core import cli
from game import Cell, GameState


class TestCli(unittest.TestCase):
    def _run(self, argv, inputs=None):
        out = io.StringIO()
        side_effect = list(inputs or []) + [EOFError()]
        with redirect_stdout(out), mock.patch("builtins.input", side_effect=side_effect):
            cli.main(argv)
        return out.getvalue()

    def test_given_scripted_moves_when_run_then_final_status_printed(self):
        text = self._run(["--moves", "0,3,1,4,2"])
        self.assertIn("Winner: X", text)
        self.assertIn("Go to move #5", text)

    def test_given_out_of_range_scripted_move_when_run_then_usage_error(self):
        with redirect_stdout(io.StringIO()), mock.patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["--moves", "0,9"])
        self.assertEqual(ctx.exception.code, 2)

    def test_given_interactive_commands_when_run_then_moves_jumps_and_quit(self):
        text = self._run([], ["4", "4", "h", "j 0", "nope", "q", "0"])
        self.assertIn("Square ignored.", text)
        self.assertIn("  0: Go to game start", text)
        self.assertIn("> 1: Go to move #1", text)
        self.assertIn("Could not use 'nope'", text)
        self.assertIn("Next player: O", text)

    def test_given_interactive_session_when_input_ends_then_loop_exits(self):
        text = self._run([], ["0"])
        self.assertIn("Next player: O", text)

    def test_given_game_when_handle_command_then_applies_to_core(self):
        game = GameState()
        with redirect_stdout(io.StringIO()):
            self.assertTrue(cli.handle_command(game, "0"))
            self.assertTrue(cli.handle_command(game, "j0"))
            self.assertTrue(cli.handle_command(game, "j 5"))
            self.assertFalse(cli.handle_command(game, "quit"))
        self.assertEqual(game.step_number, 0)
        self.assertIs(game.history[1][0], Cell.X)

    def test_given_debug_flag_when_run_then_debug_logging_and_env_settings_kept(self):
        env = {"TICTACTOE_HOST": "0.0.0.0", "TICTACTOE_PORT": "8080"}
        with mock.patch.dict(os.environ, env, clear=True), \
                mock.patch.object(cli, "configure_logging") as configure:
            self._run(["--debug", "--moves", "4"])
        settings = configure.call_args.args[0]
        self.assertTrue(settings.debug)
        self.assertEqual(settings.host, "0.0.0.0")
        self.assertEqual(settings.port, 8080)


if __name__ == "__main__":
    unittest.main(verbosity=2)
