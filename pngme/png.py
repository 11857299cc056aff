import struct
from typing import Iterable, List, Optional, Tuple, Union

from .chunk import Chunk, LENGTH_SIZE, OVERHEAD
from .errors import ChunkNotFound, InvalidSignature, TruncatedChunk


STANDARD_HEADER = bytes([137, 80, 78, 71, 13, 10, 26, 10])


class Png:
    """PNG 시그니처와 순서가 있는 청크 목록"""

    def __init__(self, chunks: Optional[Iterable[Chunk]] = None):
        self._chunks: List[Chunk] = list(chunks or [])

    @classmethod
    def from_chunks(cls, chunks: Iterable[Chunk]) -> 'Png':
        return cls(chunks)

    @classmethod
    def from_bytes(cls, buffer: Union[bytes, bytearray]) -> 'Png':
        """PNG 파일 전체 바이트를 파싱합니다.

        시그니처 뒤의 모든 바이트를 청크로 읽으며, IEND에서 멈추지 않습니다.
        """
        buffer = bytes(buffer)
        if buffer[:len(STANDARD_HEADER)] != STANDARD_HEADER:
            raise InvalidSignature()

        chunks = []
        position = len(STANDARD_HEADER)
        while position < len(buffer):
            remaining = len(buffer) - position
            if remaining < LENGTH_SIZE:
                raise TruncatedChunk(f"오프셋 {position}에서 청크 길이 필드가 잘렸습니다")

            length, = struct.unpack(">I", buffer[position:position + LENGTH_SIZE])
            end = position + length + OVERHEAD
            if end > len(buffer):
                raise TruncatedChunk(
                    f"오프셋 {position}의 청크가 잘렸습니다: {length + OVERHEAD}바이트 필요, {remaining}바이트 남음"
                )

            chunks.append(Chunk.from_bytes(buffer[position:end]))
            position = end

        return cls(chunks)

    def header(self) -> bytes:
        return STANDARD_HEADER

    def chunks(self) -> Tuple[Chunk, ...]:
        return tuple(self._chunks)

    def append_chunk(self, chunk: Chunk) -> None:
        """청크를 맨 끝에 추가합니다. 재정렬은 하지 않습니다."""
        self._chunks.append(chunk)

    def chunks_by_type(self, chunk_type: str) -> List[Chunk]:
        return [c for c in self._chunks if str(c.chunk_type) == chunk_type]

    def chunk_by_type(self, chunk_type: str) -> Optional[Chunk]:
        """해당 타입의 첫 번째 청크를 반환합니다. 없으면 None."""
        for chunk in self._chunks:
            if str(chunk.chunk_type) == chunk_type:
                return chunk
        return None

    def remove_chunks_by_type(self, chunk_type: str) -> List[Chunk]:
        """해당 타입의 청크를 모두 제거하고 제거된 청크를 반환합니다."""
        removed = self.chunks_by_type(chunk_type)
        if not removed:
            raise ChunkNotFound(chunk_type)

        self._chunks = [c for c in self._chunks if str(c.chunk_type) != chunk_type]
        return removed

    def as_bytes(self) -> bytes:
        return STANDARD_HEADER + b"".join(c.as_bytes() for c in self._chunks)

    def __len__(self) -> int:
        return len(self._chunks)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Png):
            return NotImplemented
        return self._chunks == other._chunks

    def __str__(self) -> str:
        return "\n".join(str(c) for c in self._chunks)
