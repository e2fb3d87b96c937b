# box_filter/core/models.py
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

import numpy as np
import torch

from box_filter.core.exceptions import FilterError

@dataclass(eq=False)
class HostImage:
    """
    호스트(CPU) 메모리에 있는 8-bit 단일 채널 그레이스케일 이미지 (DTO)
    """
    data: np.ndarray                    # shape (height, width), dtype uint8
    source_path: Optional[Path] = None  # 디스크에서 불러온 경우 원본 경로

    def __post_init__(self):
        if self.data.dtype != np.uint8 or self.data.ndim != 2:
            raise FilterError(
                f"8-bit grayscale image expected, got dtype={self.data.dtype} shape={self.data.shape}",
                self.source_path,
            )

    @property
    def width(self) -> int:
        return self.data.shape[1]

    @property
    def height(self) -> int:
        return self.data.shape[0]

    @property
    def pitch(self) -> int:
        """행 사이의 바이트 간격"""
        return self.data.strides[0]

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def __repr__(self):
        return f"HostImage(size={self.size}, source_path={self.source_path})"


@dataclass(eq=False)
class DeviceImage:
    """
    장치(GPU) 메모리에 올라간 8-bit 그레이스케일 이미지.
    한 번의 필터 호출 범위에서만 사용되고 release()로 해제됩니다.
    """
    tensor: Optional[torch.Tensor]

    @classmethod
    def from_host(cls, host_image: HostImage, device: torch.device) -> "DeviceImage":
        """호스트 이미지를 장치로 업로드합니다."""
        tensor = torch.from_numpy(np.ascontiguousarray(host_image.data)).to(device)
        return cls(tensor)

    @classmethod
    def allocate(cls, size: Tuple[int, int], device: torch.device) -> "DeviceImage":
        width, height = size
        return cls(torch.empty((height, width), dtype=torch.uint8, device=device))

    def _checked(self) -> torch.Tensor:
        if self.tensor is None:
            raise FilterError("device image has already been released")
        return self.tensor

    @property
    def device(self) -> torch.device:
        return self._checked().device

    @property
    def width(self) -> int:
        return self._checked().shape[1]

    @property
    def height(self) -> int:
        return self._checked().shape[0]

    @property
    def pitch(self) -> int:
        tensor = self._checked()
        return tensor.stride(0) * tensor.element_size()

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def copy_to_host(self) -> HostImage:
        """장치 데이터를 새 호스트 이미지로 다운로드합니다."""
        return HostImage(self._checked().cpu().numpy().copy())

    def release(self):
        self.tensor = None

    def __repr__(self):
        if self.tensor is None:
            return "DeviceImage(released)"
        return f"DeviceImage(size={self.size}, device={self.device})"


@dataclass(frozen=True)
class FilterParams:
    """박스 필터 마스크 크기와 앵커, 경계 처리 방식"""
    mask_size: Tuple[int, int] = (5, 5)   # (width, height)
    anchor: Tuple[int, int] = (2, 2)      # (x, y), 마스크 내부 위치
    border_mode: str = "replicate"

    @classmethod
    def from_mask_size(cls, mask_size: Tuple[int, int], border_mode: str = "replicate") -> "FilterParams":
        # 앵커는 마스크 중심이며, 홀수가 아닐 때는 내림합니다.
        width, height = mask_size
        return cls(mask_size=(width, height), anchor=(width // 2, height // 2), border_mode=border_mode)


@dataclass(frozen=True)
class FilterRegion:
    """소스 이미지 내 필터 적용 영역 (ROI)"""
    offset: Tuple[int, int] = (0, 0)   # (x, y)
    size: Tuple[int, int] = (0, 0)     # (width, height)

    @classmethod
    def full(cls, size: Tuple[int, int]) -> "FilterRegion":
        return cls(offset=(0, 0), size=size)


@dataclass
class DeviceInfo:
    """선택된 GPU 장치와 라이브러리 버전 정보"""
    device_id: int
    name: str
    compute_capability: Tuple[int, int]
    total_memory: int = 0
    multi_processor_count: int = 0
    torch_version: str = field(default=torch.__version__)
    cuda_driver_version: Optional[str] = None
    cuda_runtime_version: Optional[str] = None
    cudnn_version: Optional[int] = None
