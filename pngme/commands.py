import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from .chunk import Chunk
from .chunk_type import ChunkType
from .errors import ChunkNotFound
from .logger import trace
from .png import Png


PathLike = Union[str, Path]


@dataclass
class ChunkSummary:
    """print 명령에서 보여줄 청크 요약"""
    index: int
    chunk_type: str
    length: int
    crc: int
    critical: bool
    public: bool
    reserved_bit_valid: bool
    safe_to_copy: bool

    @classmethod
    def from_chunk(cls, index: int, chunk: Chunk) -> 'ChunkSummary':
        chunk_type = chunk.chunk_type
        return cls(
            index=index,
            chunk_type=str(chunk_type),
            length=chunk.length,
            crc=chunk.crc,
            critical=chunk_type.is_critical(),
            public=chunk_type.is_public(),
            reserved_bit_valid=chunk_type.is_reserved_bit_valid(),
            safe_to_copy=chunk_type.is_safe_to_copy(),
        )


def read_png(file_path: PathLike) -> Png:
    path = Path(file_path)
    trace(f"PNG 파일 읽기: {path}")
    return Png.from_bytes(path.read_bytes())


def write_png(png: Png, file_path: PathLike) -> Path:
    """같은 디렉터리의 임시 파일에 쓴 뒤 대상 파일과 교체합니다."""
    path = Path(file_path)
    fd, temp_name = tempfile.mkstemp(prefix=f".{path.name}-", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(png.as_bytes())
        if path.exists():
            os.chmod(temp_name, path.stat().st_mode & 0o7777)
        os.replace(temp_name, path)
    except BaseException:
        os.unlink(temp_name)
        raise
    trace(f"PNG 파일 저장: {path} ({len(png)}개 청크)")
    return path


def encode(file_path: PathLike, chunk_type: str, message: str,
           output_file: Optional[PathLike] = None) -> Path:
    """메시지 청크를 PNG 끝에 추가합니다. output_file이 없으면 원본을 덮어씁니다."""
    png = read_png(file_path)
    parsed_type = ChunkType.from_str(chunk_type)
    if not parsed_type.is_reserved_bit_valid():
        trace(f'청크 타입 "{chunk_type}"의 예약 비트가 유효하지 않습니다')

    png.append_chunk(Chunk(parsed_type, message.encode("utf-8")))
    return write_png(png, output_file if output_file is not None else file_path)


def decode(file_path: PathLike, chunk_type: str) -> str:
    """해당 타입의 첫 번째 청크 메시지를 반환합니다."""
    png = read_png(file_path)
    chunk = png.chunk_by_type(chunk_type)
    if chunk is None:
        raise ChunkNotFound(chunk_type)
    return chunk.data_as_string()


def remove(file_path: PathLike, chunk_type: str) -> List[Chunk]:
    """해당 타입의 청크를 모두 제거하고 원본 파일을 덮어씁니다."""
    png = read_png(file_path)
    removed = png.remove_chunks_by_type(chunk_type)
    write_png(png, file_path)
    return removed


def print_chunks(file_path: PathLike) -> List[ChunkSummary]:
    png = read_png(file_path)
    return [ChunkSummary.from_chunk(i, c) for i, c in enumerate(png.chunks())]
