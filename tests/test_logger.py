import os
import tempfile
import unittest
import sys
from pathlib import Path
from unittest.mock import patch

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from pngme.logger import error, trace


class TestLogger(unittest.TestCase):
    def test_writes_log_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            log_file = os.path.join(tmp, "pngme.log")
            with patch.dict(os.environ, {"LOG_FILE": log_file}), patch("sys.stderr"):
                trace("읽기")
                error("실패")
            lines = Path(log_file).read_text(encoding="utf-8").splitlines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].endswith("TRACE 읽기"))
        self.assertTrue(lines[1].endswith("ERROR 실패"))


if __name__ == "__main__":
    unittest.main()
