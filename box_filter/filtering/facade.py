# box_filter/filtering/facade.py
from pathlib import Path
from typing import Optional

import torch

from box_filter.core.models import DeviceImage, FilterParams, FilterRegion, HostImage
from box_filter.filtering.strategies import FilterStrategy, BoxFilterBorderStrategy
from box_filter.repository.image_repository import ImageRepository
from config import MASK_SIZE, BORDER_MODE


class BoxFilterFacade:
    def __init__(self, device: torch.device, image_repo: ImageRepository,
                 params: Optional[FilterParams] = None,
                 strategy: Optional[FilterStrategy] = None):
        # 필터 파라미터는 실행 전체에서 고정입니다.
        self.device = device
        self._image_repo = image_repo
        self.params = params or FilterParams.from_mask_size(MASK_SIZE, BORDER_MODE)
        self._strategy = strategy or BoxFilterBorderStrategy()

    def filter_image(self, host_src: HostImage) -> HostImage:
        """호스트 이미지를 장치에 올려 박스 필터를 적용하고, 결과를 다시 호스트로 가져옵니다."""
        device_src = DeviceImage.from_host(host_src, self.device)
        device_dst = None
        try:
            device_dst = self._strategy.run(device_src, self.params, FilterRegion.full(device_src.size))
            return device_dst.copy_to_host()
        finally:
            # 장치 메모리는 한 번의 호출 범위에서만 유지합니다.
            device_src.release()
            if device_dst is not None:
                device_dst.release()

    def run_filter(self, src_path: Path, result_path: Path) -> Path:
        """퍼사드 메서드: 파일 하나를 불러와 필터링 후 PGM으로 저장"""
        host_src = self._image_repo.load_grayscale(src_path)
        host_dst = self.filter_image(host_src)
        saved_path = self._image_repo.save_pgm(host_dst, result_path)
        print(f"Saved image: {saved_path}")
        return saved_path
