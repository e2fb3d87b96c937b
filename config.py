# config.py
"""
프로젝트 내 설정 파일입니다.
이 파일은 입력 이미지 디렉토리, 출력 디렉토리, 박스 필터 파라미터 등 주요 설정을 포함합니다.
"""
from pathlib import Path

# --- 기본 경로 설정 ---
# 이 파일(config.py)이 위치한 디렉토리입니다. (테스트 데이터 등 참조용)
BASE_DIR = Path(__file__).resolve().parent

# --- 데이터 경로 ---
# 필터를 적용할 원본 이미지가 저장된 디렉토리입니다. 실행 위치 기준 상대 경로입니다.
INPUT_DATA_DIR = Path("data")

# 필터 결과(PGM)가 저장될 디렉토리입니다. 없으면 생성합니다.
OUTPUT_DIR = Path("output")

# 결과 파일 이름: <원본 파일 이름(확장자 제외)><OUTPUT_SUFFIX><OUTPUT_EXTENSION>
OUTPUT_SUFFIX = "_boxFilterOutput"
OUTPUT_EXTENSION = ".pgm"


# --- Box Filter 설정 ---
# 마스크 크기 (width, height). 앵커는 마스크 중심(내림)으로 자동 계산됩니다.
MASK_SIZE = (5, 5)

# 이미지 경계 밖 샘플 처리 방식입니다. 현재는 "replicate"만 지원합니다.
BORDER_MODE = "replicate"


# --- GPU 설정 ---
# 사용할 CUDA 장치 번호입니다. None이면 가장 성능이 좋은 장치를 자동으로 선택합니다.
CUDA_DEVICE_ID = None

# 필요한 최소 compute capability (major, minor) 입니다.
MIN_COMPUTE_CAPABILITY = (1, 0)


# --- 콘솔 출력 ---
# 파일 열기 결과 메시지에 사용되는 프로그램 이름입니다.
PROGRAM_NAME = "boxFilter"
