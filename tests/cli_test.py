#!/usr/bin/env python
import io
import json
import unittest
from contextlib import redirect_stdout
from unittest import mock
from pathglob.cli import EXIT_MATCH, EXIT_NOMATCH, EXIT_NORES, main

class CliTest(unittest.TestCase):
    def run_cli(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(argv)
        return code, out.getvalue()

    def test_prints_matches(self):
        code, output = self.run_cli(["*.py", "a.py", "b.txt", "c.py"])
        self.assertEqual(code, EXIT_MATCH)
        self.assertEqual(output.splitlines(), ["a.py", "c.py"])

    def test_no_match(self):
        code, output = self.run_cli(["*.py", "b.txt"])
        self.assertEqual(code, EXIT_NOMATCH)
        self.assertEqual(output, "")

    def test_invert(self):
        code, output = self.run_cli(["--invert", "*.py", "a.py", "b.txt"])
        self.assertEqual(code, EXIT_MATCH)
        self.assertEqual(output.splitlines(), ["b.txt"])

    def test_flags(self):
        code, _ = self.run_cli(["--pathname", "*.py", "src/a.py"])
        self.assertEqual(code, EXIT_NOMATCH)
        code, output = self.run_cli(["-p", "-d", "*", ".hidden", "shown"])
        self.assertEqual(output.splitlines(), ["shown"])
        code, output = self.run_cli(["--casefold", "--leading-dir", "SRC", "src/main.c"])
        self.assertEqual(code, EXIT_MATCH)
        code, output = self.run_cli(["--noescape", "\\*", "\\x"])
        self.assertEqual(output.splitlines(), ["\\x"])

    def test_json(self):
        code, output = self.run_cli(["--json", "a*", "abc", "xyz"])
        self.assertEqual(code, EXIT_MATCH)
        self.assertEqual(json.loads(output), {
            "pattern": "a*",
            "results": [
                {"subject": "abc", "result": "match"},
                {"subject": "xyz", "result": "nomatch"},
            ]
        })

    def test_too_complex(self):
        with self.assertLogs(level="WARNING"):
            code, output = self.run_cli(["*a" * 70 + "b", "a" * 100, "ab"])
        self.assertEqual(code, EXIT_NORES)
        self.assertEqual(output, "")

    def test_reads_stdin(self):
        with mock.patch("sys.stdin", io.StringIO("a.py\nb.txt\nsrc/c.py\n")):
            code, output = self.run_cli(["-p", "*.py"])
        self.assertEqual(code, EXIT_MATCH)
        self.assertEqual(output.splitlines(), ["a.py"])

if __name__ == "__main__":
    unittest.main()
