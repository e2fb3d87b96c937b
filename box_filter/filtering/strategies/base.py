# box_filter/filtering/strategies/base.py
from abc import ABC, abstractmethod
from typing import Optional

from box_filter.core.models import DeviceImage, FilterParams, FilterRegion

# 장치 이미지 필터 전략에 대한 인터페이스 정의
class FilterStrategy(ABC):
    @abstractmethod
    def run(self, src: DeviceImage, params: FilterParams,
            region: Optional[FilterRegion] = None) -> DeviceImage:
        """
        장치에 올라간 소스 이미지에 필터를 적용하고,
        ROI 크기의 새 장치 이미지를 반환합니다.
        """
        pass
