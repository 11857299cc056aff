import json
import struct
import tempfile
import unittest
import zlib
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from click.testing import CliRunner

from cli import cli
from pngme.chunk import Chunk
from pngme.chunk_type import ChunkType
from pngme.png import STANDARD_HEADER, Png

# 1x1 RGB 이미지 (IHDR, IDAT, IEND)
PNG_1X1 = STANDARD_HEADER + b"".join(
    Chunk(ChunkType.from_str(chunk_type), data).as_bytes()
    for chunk_type, data in (
        ("IHDR", struct.pack(">IIBBBBB", 1, 1, 8, 2, 0, 0, 0)),
        ("IDAT", zlib.compress(b"\x00\x00\x00\x00")),
        ("IEND", b""),
    )
)


class TestCli(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / "image.png"
        self.path.write_bytes(PNG_1X1)

    def tearDown(self):
        self.tmp.cleanup()

    def invoke(self, *args):
        return self.runner.invoke(cli, [str(a) for a in args])

    def test_encode_decode(self):
        result = self.invoke("encode", self.path, "RuSt", "hello world")
        self.assertEqual(result.exit_code, 0, result.output)
        result = self.invoke("decode", self.path, "RuSt")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("hello world", result.stdout)

    def test_encode_output_file(self):
        output = Path(self.tmp.name) / "out.png"
        result = self.invoke("encode", self.path, "RuSt", "hello", output)
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(self.path.read_bytes(), PNG_1X1)
        self.assertEqual(Png.from_bytes(output.read_bytes()).chunk_by_type("RuSt").data, b"hello")

    def test_remove(self):
        self.invoke("encode", self.path, "RuSt", "hello")
        result = self.invoke("remove", self.path, "RuSt")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("RuSt", result.stdout)
        self.assertEqual(self.path.read_bytes(), PNG_1X1)

    def test_print_json(self):
        result = self.invoke("--json", "print", self.path)
        self.assertEqual(result.exit_code, 0, result.output)
        chunks = json.loads(result.stdout.strip().splitlines()[-1])
        self.assertEqual([c["chunk_type"] for c in chunks], ["IHDR", "IDAT", "IEND"])
        self.assertEqual(chunks[0]["length"], 13)

    def test_print_text(self):
        result = self.invoke("print", self.path)
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("IHDR", result.stdout)
        self.assertIn("length=13", result.stdout)

    def test_decode_missing_chunk(self):
        result = self.invoke("decode", self.path, "RuSt")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("RuSt", result.output)

    def test_invalid_chunk_type(self):
        result = self.invoke("encode", self.path, "R2St", "hello")
        self.assertEqual(result.exit_code, 1)
        self.assertEqual(self.path.read_bytes(), PNG_1X1)

    def test_missing_file(self):
        result = self.invoke("print", Path(self.tmp.name) / "missing.png")
        self.assertEqual(result.exit_code, 1)


if __name__ == "__main__":
    unittest.main()
