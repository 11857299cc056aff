class PngError(Exception):
    """PNG 청크 처리 중 발생하는 모든 오류의 기반 클래스"""
    pass


class InvalidChunkType(PngError):
    """청크 타입이 4바이트 ASCII 알파벳이 아닌 경우"""
    pass


class CrcMismatch(PngError):
    """청크의 CRC 값이 계산된 값과 다른 경우 (손상 또는 변조)"""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"CRC가 일치하지 않습니다: expected={expected}, actual={actual}")


class InvalidSignature(PngError):
    """PNG 시그니처로 시작하지 않는 버퍼"""

    def __init__(self, message: str = "유효한 PNG 파일이 아닙니다"):
        super().__init__(message)


class TruncatedChunk(PngError):
    """선언된 청크 길이보다 남은 바이트가 적은 경우"""
    pass


class Utf8DecodeError(PngError):
    """청크 데이터가 UTF-8 텍스트가 아닌 경우"""
    pass


class ChunkNotFound(PngError):
    """요청한 타입의 청크가 없는 경우"""

    def __init__(self, chunk_type: str):
        self.chunk_type = chunk_type
        super().__init__(f'청크 타입 "{chunk_type}"을 찾을 수 없습니다')


class ChunkTooLarge(PngError):
    """데이터 길이가 32비트 범위를 넘는 경우"""
    pass
