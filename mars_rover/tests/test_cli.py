import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from mars_rover.cli import main


def run_cli(*argv):
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(list(argv))
    return code, out.getvalue(), err.getvalue()


class CliTests(unittest.TestCase):
    def test_default_rovers(self):
        code, out, _ = run_cli()
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["1", "3", "NORTH", "5", "1", "EAST"])

    def test_explicit_rover(self):
        code, out, _ = run_cli("--width", "2", "--height", "2", "0 0 N", "MMRMM")
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["2", "2", "EAST"])

    def test_failing_rover_does_not_stop_the_others(self):
        code, out, err = run_cli("0 0 S", "M", "1 2 N", "LMLMLMLMM")
        self.assertEqual(code, 1)
        self.assertEqual(out.splitlines(), ["1", "3", "NORTH"])
        self.assertIn("error: Invalid move", err)

    def test_unpaired_arguments(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["1 2 N"])
        self.assertEqual(ctx.exception.code, 2)

    def test_world_document(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "world.json"
            path.write_text(json.dumps({"edge": {"x": 1, "y": 1}}), encoding="utf-8")
            code, out, _ = run_cli("--world", str(path), "0 0 N", "MRM")
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["1", "1", "EAST"])

    def test_invalid_world_document(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "world.json"
            path.write_text(json.dumps({"edge": {"x": -1, "y": 1}}), encoding="utf-8")
            code, _, err = run_cli("--world", str(path))
        self.assertEqual(code, 2)
        self.assertIn("invalid world config", err)

    def test_missing_world_document(self):
        code, _, err = run_cli("--world", "/nonexistent/world.json")
        self.assertEqual(code, 2)
        self.assertIn("cannot load world", err)


if __name__ == "__main__":
    unittest.main()
