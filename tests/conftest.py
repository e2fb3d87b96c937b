# tests/conftest.py
from pathlib import Path

import cv2
import numpy as np
import pytest
import torch


@pytest.fixture
def cpu_device():
    return torch.device("cpu")


@pytest.fixture
def gradient_image():
    # 경계 복제 효과가 드러나도록 가로/세로로 값이 변하는 이미지
    ys, xs = np.mgrid[0:23, 0:31]
    return ((xs * 7 + ys * 11) % 256).astype(np.uint8)


@pytest.fixture
def write_pgm():
    def _write(path: Path, data: np.ndarray) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        assert cv2.imwrite(str(path), data)
        return path
    return _write
