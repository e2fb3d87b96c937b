# box_filter/core/exceptions.py
from pathlib import Path
from typing import Optional, Union


class FilterError(Exception):
    """이미지 로드/필터/저장 과정에서 발생하는 모든 오류의 기본 예외"""
    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None

    def __str__(self):
        if self.path is not None:
            return f"{self.message} (file: {self.path})"
        return self.message


class DeviceError(FilterError):
    """CUDA 장치가 없거나 요구 성능을 만족하지 못할 때"""


class InputDirectoryError(FilterError):
    """입력 디렉토리를 찾을 수 없거나 읽을 수 없을 때"""


class ImageReadError(FilterError):
    """이미지 파일을 디코딩할 수 없을 때"""


class ImageWriteError(FilterError):
    """결과 이미지를 저장하지 못했을 때"""
