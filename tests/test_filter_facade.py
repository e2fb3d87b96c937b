# tests/test_filter_facade.py
import numpy as np
import pytest

from box_filter.core.exceptions import FilterError
from box_filter.core.models import DeviceImage, FilterParams, HostImage
from box_filter.filtering.facade import BoxFilterFacade
from box_filter.filtering.strategies import FilterStrategy
from box_filter.repository.image_repository import ImageRepository


class RecordingStrategy(FilterStrategy):
    """전달받은 장치 이미지를 기록하고, 지정된 경우 예외를 던집니다."""
    def __init__(self, fail=False):
        self.fail = fail
        self.seen = []

    def run(self, src, params, region=None):
        self.seen.append((src, params, region))
        if self.fail:
            raise FilterError("filter failed")
        return DeviceImage(src.tensor.clone())


def test_default_params_from_config(cpu_device, tmp_path):
    facade = BoxFilterFacade(cpu_device, ImageRepository(tmp_path, tmp_path / "out"))
    assert facade.params == FilterParams(mask_size=(5, 5), anchor=(2, 2), border_mode="replicate")


def test_filter_image_uses_full_roi_and_releases(cpu_device, tmp_path, gradient_image):
    strategy = RecordingStrategy()
    facade = BoxFilterFacade(cpu_device, ImageRepository(tmp_path, tmp_path / "out"), strategy=strategy)

    result = facade.filter_image(HostImage(gradient_image))

    assert np.array_equal(result.data, gradient_image)
    src, params, region = strategy.seen[0]
    assert region.offset == (0, 0)
    assert region.size == (gradient_image.shape[1], gradient_image.shape[0])
    assert src.tensor is None


def test_filter_image_releases_on_error(cpu_device, tmp_path, gradient_image):
    strategy = RecordingStrategy(fail=True)
    facade = BoxFilterFacade(cpu_device, ImageRepository(tmp_path, tmp_path / "out"), strategy=strategy)

    with pytest.raises(FilterError):
        facade.filter_image(HostImage(gradient_image))
    assert strategy.seen[0][0].tensor is None


def test_run_filter_writes_pgm(cpu_device, tmp_path, write_pgm, capsys):
    src = write_pgm(tmp_path / "data" / "flat.pgm", np.full((8, 5), 42, dtype=np.uint8))
    repo = ImageRepository(tmp_path / "data", tmp_path / "out")
    facade = BoxFilterFacade(cpu_device, repo)

    saved = facade.run_filter(src, repo.result_path_for(src))

    assert saved == tmp_path / "out" / "flat_boxFilterOutput.pgm"
    assert np.array_equal(repo.load_grayscale(saved).data, np.full((8, 5), 42, dtype=np.uint8))
    assert f"Saved image: {saved}" in capsys.readouterr().out
