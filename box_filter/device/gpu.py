# box_filter/device/gpu.py
import platform
from typing import Optional, Tuple

import torch

from box_filter.core.exceptions import DeviceError
from box_filter.core.models import DeviceInfo
from config import MIN_COMPUTE_CAPABILITY


def find_cuda_device(device_id: Optional[int] = None) -> torch.device:
    """
    사용할 CUDA 장치를 선택합니다.
    device_id가 None이면 compute capability와 SM 개수가 가장 큰 장치를 고릅니다.
    """
    if not torch.cuda.is_available():
        raise DeviceError("no CUDA capable device is available")

    device_count = torch.cuda.device_count()
    if device_id is None:
        device_id = max(
            range(device_count),
            key=lambda i: (
                torch.cuda.get_device_capability(i),
                torch.cuda.get_device_properties(i).multi_processor_count,
            ),
        )
    elif not 0 <= device_id < device_count:
        raise DeviceError(f"invalid CUDA device id {device_id} (found {device_count} devices)")

    torch.cuda.set_device(device_id)
    major, minor = torch.cuda.get_device_capability(device_id)
    print(f'GPU Device {device_id}: "{torch.cuda.get_device_name(device_id)}" '
          f'with compute capability {major}.{minor}\n')
    return torch.device("cuda", device_id)


def format_cuda_version(version: int) -> str:
    """CUDA 정수 버전(예: 12020)을 "12.2" 형식으로 변환합니다."""
    return f"{version // 1000}.{(version % 100) // 10}"


def get_device_info(device: torch.device) -> DeviceInfo:
    """선택된 장치와 라이브러리 버전 정보를 수집합니다."""
    if device.type != "cuda":
        return DeviceInfo(
            device_id=-1,
            name=f"{platform.processor() or platform.machine()} ({device.type})",
            compute_capability=(0, 0),
        )

    index = device.index if device.index is not None else torch.cuda.current_device()
    props = torch.cuda.get_device_properties(index)
    return DeviceInfo(
        device_id=index,
        name=props.name,
        compute_capability=(props.major, props.minor),
        total_memory=props.total_memory,
        multi_processor_count=props.multi_processor_count,
        cuda_driver_version=format_cuda_version(torch._C._cuda_getDriverVersion()),
        cuda_runtime_version=torch.version.cuda,
        cudnn_version=torch.backends.cudnn.version(),
    )


def check_cuda_capabilities(info: DeviceInfo,
                            minimum: Tuple[int, int] = MIN_COMPUTE_CAPABILITY) -> bool:
    """장치의 compute capability가 최소 요구치 이상인지 확인합니다."""
    if info.device_id < 0:
        return False
    return tuple(info.compute_capability) >= tuple(minimum)


def print_library_info(device: torch.device) -> bool:
    """
    PyTorch / CUDA / cuDNN 버전과 장치 정보를 출력하고,
    최소 compute capability를 만족하는지 여부를 반환합니다.
    """
    info = get_device_info(device)

    print(f"PyTorch Library Version {info.torch_version}")
    print(f"  CUDA Driver  Version: {info.cuda_driver_version}")
    print(f"  CUDA Runtime Version: {info.cuda_runtime_version}")
    print(f"  cuDNN Version: {info.cudnn_version}")

    if info.device_id >= 0:
        major, minor = info.compute_capability
        print(f"  Device: {info.name} (SM {major}.{minor}, "
              f"{info.multi_processor_count} SMs, {info.total_memory / (1024**3):.2f} GB)")
    else:
        print(f"  Device: {info.name}")

    ok = check_cuda_capabilities(info)
    if not ok:
        min_major, min_minor = MIN_COMPUTE_CAPABILITY
        print(f"⚠️ Device does not meet the minimum compute capability {min_major}.{min_minor}.")
    return ok
