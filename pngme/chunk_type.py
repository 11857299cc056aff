from typing import Union

from .errors import InvalidChunkType


# 각 바이트의 5번 비트(0x20)가 소문자 여부를 나타냄
PROPERTY_BIT = 0x20


def _is_ascii_letter(byte: int) -> bool:
    return 0x41 <= byte <= 0x5A or 0x61 <= byte <= 0x7A


class ChunkType:
    """PNG 청크 타입 (4바이트 태그)

    바이트 값 자체는 검증 없이 보관하며, 유효성은 is_valid()로 따로 확인합니다.
    """

    __slots__ = ("_bytes",)

    def __init__(self, raw: Union[bytes, bytearray]):
        raw = bytes(raw)
        if len(raw) != 4:
            raise InvalidChunkType(f"청크 타입은 4바이트여야 합니다: {len(raw)}바이트")
        self._bytes = raw

    @classmethod
    def from_bytes(cls, raw: Union[bytes, bytearray]) -> 'ChunkType':
        """임의의 4바이트로 청크 타입을 만듭니다."""
        return cls(raw)

    @classmethod
    def from_str(cls, text: str) -> 'ChunkType':
        """4글자 문자열에서 청크 타입을 파싱합니다."""
        if len(text) != 4 or not text.isascii() or not text.isalpha():
            raise InvalidChunkType(f'유효하지 않은 청크 타입입니다: "{text}"')
        return cls(text.encode("ascii"))

    def as_bytes(self) -> bytes:
        return self._bytes

    def __bytes__(self) -> bytes:
        return self._bytes

    def is_valid(self) -> bool:
        """4바이트가 모두 ASCII 알파벳인지 확인합니다."""
        return all(_is_ascii_letter(b) for b in self._bytes)

    def is_critical(self) -> bool:
        return not self._bytes[0] & PROPERTY_BIT

    def is_public(self) -> bool:
        return not self._bytes[1] & PROPERTY_BIT

    def is_reserved_bit_valid(self) -> bool:
        return not self._bytes[2] & PROPERTY_BIT

    def is_safe_to_copy(self) -> bool:
        return bool(self._bytes[3] & PROPERTY_BIT)

    def __str__(self) -> str:
        return self._bytes.decode("latin-1")

    def __repr__(self) -> str:
        return f"ChunkType({str(self)!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ChunkType):
            return NotImplemented
        return self._bytes == other._bytes

    def __hash__(self) -> int:
        return hash(self._bytes)
