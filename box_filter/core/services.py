# box_filter/core/services.py
from pathlib import Path

from ..filtering.facade import BoxFilterFacade
from ..repository.image_repository import ImageRepository
from config import PROGRAM_NAME

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class BatchFilterService:
    """입력 디렉토리의 모든 파일에 순차적으로 박스 필터를 적용하는 책임"""
    def __init__(self, image_repo: ImageRepository, filter_facade: BoxFilterFacade):
        self._image_repo = image_repo
        self._filter_facade = filter_facade

    def check_file_error(self, path: Path) -> int:
        """파일을 열 수 있는지 확인하고 결과를 출력합니다. 오류 개수(0 또는 1)를 반환합니다."""
        if self._image_repo.is_readable(path):
            print(f"{PROGRAM_NAME} opened: <{path}> successfully!")
            return 0
        print(f"{PROGRAM_NAME} unable to open: <{path}>")
        return 1

    def run(self) -> int:
        """
        모든 입력 파일을 처리하고 종료 코드를 반환합니다.
        열 수 없는 파일을 만나면 남은 파일은 처리하지 않고 즉시 실패를 반환합니다.
        """
        for src_path in self._image_repo.list_input_files():
            print(f"running filter on {src_path}")

            if self.check_file_error(src_path) > 0:
                return EXIT_FAILURE

            result_path = self._image_repo.result_path_for(src_path)
            self._filter_facade.run_filter(src_path, result_path)

        return EXIT_SUCCESS
