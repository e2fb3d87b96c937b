# box_filter_main.py

import sys
from typing import List, Optional

from box_filter.core.exceptions import FilterError
from box_filter.core.services import BatchFilterService, EXIT_SUCCESS, EXIT_FAILURE
from box_filter.device.gpu import find_cuda_device, print_library_info
from box_filter.filtering.facade import BoxFilterFacade
from box_filter.repository.image_repository import ImageRepository
from config import CUDA_DEVICE_ID, INPUT_DATA_DIR, OUTPUT_DIR


def main(argv: Optional[List[str]] = None) -> int:
    """
    입력 디렉토리의 모든 이미지에 GPU 박스 필터를 적용하고
    결과를 출력 디렉토리에 PGM으로 저장하는 메인 함수입니다.
    종료 코드를 반환합니다.
    """
    argv = sys.argv if argv is None else argv
    prog = argv[0] if argv else "box-filter"
    print(f"{prog} Starting...\n")

    try:
        # 1. GPU 장치 선택 및 라이브러리 정보 확인
        device = find_cuda_device(CUDA_DEVICE_ID)
        if not print_library_info(device):
            return EXIT_FAILURE

        # 2. 리포지토리, 필터 퍼사드, 배치 서비스 초기화
        image_repo = ImageRepository(INPUT_DATA_DIR, OUTPUT_DIR)
        filter_facade = BoxFilterFacade(device, image_repo)
        service = BatchFilterService(image_repo, filter_facade)

        # 3. 모든 파일을 순차적으로 처리
        exit_code = service.run()
        if exit_code != EXIT_SUCCESS:
            return exit_code

        print("Finishing...")
        return EXIT_SUCCESS

    except FilterError as e:
        print("Program error! The following exception occurred: ", file=sys.stderr)
        print(e, file=sys.stderr)
        print("Aborting.", file=sys.stderr)
        return EXIT_FAILURE
    except Exception as e:
        print("Program error! An unknown type of exception occurred. ", file=sys.stderr)
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        print("Aborting.", file=sys.stderr)
        return EXIT_FAILURE


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
