# box_filter/filtering/strategies/box_filter_border.py
from typing import Optional, Tuple

import torch
import torch.nn.functional as F

from box_filter.core.exceptions import FilterError
from box_filter.core.models import DeviceImage, FilterParams, FilterRegion
from box_filter.filtering.strategies.base import FilterStrategy

SUPPORTED_BORDER_MODES = ("replicate",)


class BoxFilterBorderStrategy(FilterStrategy):
    """
    경계 복제(border replicate) 방식의 8-bit 단일 채널 박스(평균) 필터 구현체입니다.
    소스 텐서가 있는 장치(GPU 또는 CPU)에서 그대로 연산합니다.

    출력 픽셀 (x, y)는 소스 좌표 (offset_x + x - anchor_x, offset_y + y - anchor_y)를
    좌상단으로 하는 mask 크기 윈도우의 평균이며, 합계를 면적으로 나눈 뒤 반올림(half up)합니다.
    """

    def _validate(self, src: DeviceImage, params: FilterParams, region: FilterRegion):
        tensor = src.tensor
        if tensor is None:
            raise FilterError("source device image has been released")
        if tensor.dtype != torch.uint8 or tensor.dim() != 2:
            raise FilterError(f"8-bit single channel image expected, got {tensor.dtype} {tuple(tensor.shape)}")
        if src.width == 0 or src.height == 0:
            raise FilterError("source image is empty")

        mask_w, mask_h = params.mask_size
        anchor_x, anchor_y = params.anchor
        if mask_w <= 0 or mask_h <= 0:
            raise FilterError(f"mask size must be positive, got {params.mask_size}")
        if not (0 <= anchor_x < mask_w and 0 <= anchor_y < mask_h):
            raise FilterError(f"anchor {params.anchor} lies outside the mask {params.mask_size}")
        if params.border_mode not in SUPPORTED_BORDER_MODES:
            raise FilterError(f"unsupported border mode '{params.border_mode}'")

        off_x, off_y = region.offset
        roi_w, roi_h = region.size
        if roi_w <= 0 or roi_h <= 0:
            raise FilterError(f"ROI size must be positive, got {region.size}")
        if off_x < 0 or off_y < 0 or off_x + roi_w > src.width or off_y + roi_h > src.height:
            raise FilterError(f"ROI {region} does not fit inside the source image {src.size}")

    @staticmethod
    def _padding(params: FilterParams) -> Tuple[int, int, int, int]:
        # F.pad 순서: (left, right, top, bottom)
        mask_w, mask_h = params.mask_size
        anchor_x, anchor_y = params.anchor
        return (anchor_x, mask_w - 1 - anchor_x, anchor_y, mask_h - 1 - anchor_y)

    def run(self, src: DeviceImage, params: FilterParams,
            region: Optional[FilterRegion] = None) -> DeviceImage:
        if region is None:
            region = FilterRegion.full(src.size)
        self._validate(src, params, region)

        mask_w, mask_h = params.mask_size
        off_x, off_y = region.offset
        roi_w, roi_h = region.size
        area = mask_w * mask_h
        device = src.device

        # (1, 1, H, W) float 텐서로 변환 후 경계를 복제하여 확장합니다.
        image = src.tensor.to(torch.float32)[None, None]
        padded = F.pad(image, self._padding(params), mode="replicate")

        # ROI 출력에 필요한 윈도우 영역만 잘라냅니다.
        window = padded[:, :, off_y:off_y + roi_h + mask_h - 1, off_x:off_x + roi_w + mask_w - 1]

        # 1로 채운 커널과의 합성곱 = 윈도우 합계 (8-bit 값이므로 float32에서 정확합니다)
        kernel = torch.ones((1, 1, mask_h, mask_w), dtype=torch.float32, device=device)
        sums = F.conv2d(window, kernel).round().to(torch.int64)

        mean = torch.div(sums + area // 2, area, rounding_mode="floor")
        # ROI 크기의 결과 이미지를 장치에 할당하고 채웁니다.
        dst = DeviceImage.allocate(region.size, device)
        dst.tensor.copy_(mean.clamp_(0, 255)[0, 0])

        if device.type == "cuda":
            torch.cuda.synchronize(device)

        return dst
