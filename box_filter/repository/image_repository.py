# box_filter/repository/image_repository.py

import cv2
from typing import List, Optional
from pathlib import Path

from box_filter.core.exceptions import ImageReadError, ImageWriteError, InputDirectoryError
from box_filter.core.models import HostImage
from config import INPUT_DATA_DIR, OUTPUT_DIR, OUTPUT_SUFFIX, OUTPUT_EXTENSION

class ImageRepository:
    """
    로컬 파일 시스템의 입력 이미지 목록을 제공하고,
    그레이스케일 이미지를 읽고 결과를 PGM으로 저장하는 역할을 합니다.
    """
    def __init__(self, input_dir: Optional[Path] = None, output_dir: Optional[Path] = None):
        self.input_dir = Path(input_dir if input_dir is not None else INPUT_DATA_DIR)
        self.output_dir = Path(output_dir if output_dir is not None else OUTPUT_DIR)

    def list_input_files(self) -> List[Path]:
        """
        입력 디렉토리에서 하위 디렉토리를 제외한 모든 항목을 이름 순으로 반환합니다.
        확장자로 거르지 않으며, 열 수 없는 항목(깨진 심볼릭 링크 등)은 이후 단계에서 오류가 됩니다.
        """
        if not self.input_dir.is_dir():
            raise InputDirectoryError("input directory not found", self.input_dir)

        try:
            entries = sorted(self.input_dir.iterdir())
        except OSError as e:
            raise InputDirectoryError(f"cannot list input directory: {e}", self.input_dir) from e

        return [p for p in entries if not p.is_dir()]

    def result_path_for(self, source_path: Path) -> Path:
        """
        결과 파일 경로를 계산합니다.
        예: data/cat.pgm -> output/cat_boxFilterOutput.pgm
        """
        # 마지막 확장자만 제거합니다. (archive.tar.gz -> archive.tar)
        stem = Path(source_path).stem
        return self.output_dir / f"{stem}{OUTPUT_SUFFIX}{OUTPUT_EXTENSION}"

    @staticmethod
    def is_readable(path: Path) -> bool:
        """
        파일을 읽기 모드로 열 수 있는지 확인합니다.
        일반 파일이 아닌 항목(FIFO, 소켓, 깨진 링크)은 열지 않고 실패로 처리합니다.
        """
        path = Path(path)
        if not path.is_file():
            return False
        try:
            with open(path, "rb"):
                return True
        except OSError:
            return False

    def load_grayscale(self, path: Path) -> HostImage:
        """이미지를 8-bit 단일 채널 그레이스케일로 불러옵니다."""
        image_data = cv2.imread(str(path), cv2.IMREAD_GRAYSCALE)
        if image_data is None:
            raise ImageReadError("unable to decode image as 8-bit grayscale", path)
        return HostImage(image_data, source_path=Path(path))

    def save_pgm(self, image: HostImage, path: Path) -> Path:
        """결과 이미지를 그레이스케일 PGM 파일로 저장합니다."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.suffix.lower() != ".pgm":
            raise ImageWriteError("result files must use the .pgm extension", path)

        # 바이너리(P5) 형식으로 저장합니다.
        ok = cv2.imwrite(str(path), image.data, [cv2.IMWRITE_PXM_BINARY, 1])
        if not ok:
            raise ImageWriteError("failed to write image", path)
        return path
