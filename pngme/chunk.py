import struct
import zlib
from typing import Union

from .chunk_type import ChunkType
from .errors import ChunkTooLarge, CrcMismatch, TruncatedChunk, Utf8DecodeError


LENGTH_SIZE = 4
TYPE_SIZE = 4
CRC_SIZE = 4
# length + type + crc
OVERHEAD = LENGTH_SIZE + TYPE_SIZE + CRC_SIZE
MAX_LENGTH = 0xFFFFFFFF


def crc32(data: bytes) -> int:
    """CRC-32/ISO-HDLC (PNG에서 사용하는 CRC)"""
    return zlib.crc32(data) & 0xFFFFFFFF


class Chunk:
    """PNG 청크: [length:4][type:4][data:N][crc:4] (big-endian)

    직렬화된 바이트 하나만 보관하며, 각 필드는 그 바이트에서 다시 꺼내 씁니다.
    생성된 Chunk는 항상 CRC가 일치합니다.
    """

    __slots__ = ("_raw",)

    def __init__(self, chunk_type: ChunkType, data: Union[bytes, bytearray]):
        data = bytes(data)
        if len(data) > MAX_LENGTH:
            raise ChunkTooLarge(f"청크 데이터가 너무 큽니다: {len(data)}바이트")

        body = chunk_type.as_bytes() + data
        self._raw = struct.pack(">I", len(data)) + body + struct.pack(">I", crc32(body))

    @classmethod
    def from_bytes(cls, raw: Union[bytes, bytearray]) -> 'Chunk':
        """직렬화된 청크 바이트를 파싱하고 CRC를 검증합니다."""
        raw = bytes(raw)
        if len(raw) < OVERHEAD:
            raise TruncatedChunk(f"청크는 최소 {OVERHEAD}바이트여야 합니다: {len(raw)}바이트")

        claimed, = struct.unpack(">I", raw[-CRC_SIZE:])
        actual = crc32(raw[LENGTH_SIZE:-CRC_SIZE])
        if actual != claimed:
            raise CrcMismatch(expected=claimed, actual=actual)

        length, = struct.unpack(">I", raw[:LENGTH_SIZE])
        if length + OVERHEAD != len(raw):
            raise TruncatedChunk(
                f"청크 길이가 맞지 않습니다: 선언 {length}바이트, 실제 {len(raw) - OVERHEAD}바이트"
            )

        chunk = cls.__new__(cls)
        chunk._raw = raw
        return chunk

    @property
    def length(self) -> int:
        return struct.unpack(">I", self._raw[:LENGTH_SIZE])[0]

    @property
    def chunk_type(self) -> ChunkType:
        return ChunkType.from_bytes(self._raw[LENGTH_SIZE:LENGTH_SIZE + TYPE_SIZE])

    @property
    def data(self) -> bytes:
        return self._raw[LENGTH_SIZE + TYPE_SIZE:-CRC_SIZE]

    @property
    def crc(self) -> int:
        return struct.unpack(">I", self._raw[-CRC_SIZE:])[0]

    def data_as_string(self) -> str:
        """데이터를 UTF-8 문자열로 반환합니다."""
        try:
            return self.data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise Utf8DecodeError(f'청크 "{self.chunk_type}"의 데이터가 UTF-8이 아닙니다: {e}') from e

    def as_bytes(self) -> bytes:
        return self._raw

    def __eq__(self, other) -> bool:
        if not isinstance(other, Chunk):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __repr__(self) -> str:
        return f"Chunk(type={str(self.chunk_type)!r}, length={self.length}, crc={self.crc})"

    def __str__(self) -> str:
        return "\n".join([
            "Chunk {",
            f"  Type: {self.chunk_type}",
            f"  Length: {self.length}",
            f"  Crc: {self.crc}",
            "}",
        ])
