__version__ = "0.1.0"

from .chunk import Chunk
from .chunk_type import ChunkType
from .errors import (
    ChunkNotFound,
    ChunkTooLarge,
    CrcMismatch,
    InvalidChunkType,
    InvalidSignature,
    PngError,
    TruncatedChunk,
    Utf8DecodeError,
)
from .png import STANDARD_HEADER, Png
