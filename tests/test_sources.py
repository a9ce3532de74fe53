import pytest
from PIL import Image

from lootbox.sources import (
    DiffusionNoiseSource,
    ImagePixelSource,
    SOURCE_NAMES,
    UniformRandomSource,
    create_source,
)


@pytest.mark.parametrize("source_cls", [UniformRandomSource, DiffusionNoiseSource])
def test_buffer_matches_dimensions(source_cls):
    image = source_cls("New Item").produce(5, 4)
    assert (image.width, image.height) == (5, 4)
    assert len(image.pixels) == 5 * 4 * 3
    image.validate()


@pytest.mark.parametrize("source_cls", [UniformRandomSource, DiffusionNoiseSource])
def test_same_seed_same_pixels(source_cls):
    assert source_cls("Sword").produce(6, 6) == source_cls("Sword").produce(6, 6)


def test_different_seeds_differ():
    assert UniformRandomSource("Sword").produce(8, 8) != UniformRandomSource("Shield").produce(8, 8)


def test_uniform_samples_stay_below_255():
    assert max(UniformRandomSource("max").produce(32, 32).pixels) < 255


def test_diffusion_without_timesteps_is_initial_noise():
    noise = UniformRandomSource("seed").produce(4, 4)
    assert DiffusionNoiseSource("seed", timesteps=0).produce(4, 4) == noise


def test_diffusion_changes_initial_noise():
    noise = UniformRandomSource("seed").produce(8, 8)
    assert DiffusionNoiseSource("seed", timesteps=10).produce(8, 8).pixels != noise.pixels


def test_add_noise_folds_into_byte_range():
    result = DiffusionNoiseSource._add_noise([0, 250, 100], [-30, 29, 10], 0.5)
    assert result == [15, 8, 105]


def test_negative_timesteps_rejected():
    with pytest.raises(ValueError):
        DiffusionNoiseSource(timesteps=-1)


@pytest.mark.parametrize("source_cls", [UniformRandomSource, DiffusionNoiseSource])
def test_non_positive_dimensions_rejected(source_cls):
    with pytest.raises(ValueError):
        source_cls().produce(0, 3)


def test_registry():
    assert SOURCE_NAMES == ["diffusion", "uniform"]
    assert isinstance(create_source("uniform", "x"), UniformRandomSource)
    source = create_source("Diffusion", "x", timesteps=3)
    assert isinstance(source, DiffusionNoiseSource)
    assert source.timesteps == 3
    with pytest.raises(ValueError, match="Unknown pixel source"):
        create_source("stable-diffusion")


def test_image_source_converts_and_resizes():
    img = Image.new("RGB", (2, 1))
    img.putpixel((0, 0), (255, 0, 0))
    img.putpixel((1, 0), (0, 0, 255))
    source = ImagePixelSource(img)
    assert source.produce(2, 1).pixels == bytes([255, 0, 0, 0, 0, 255])
    resized = source.produce(4, 3)
    assert len(resized.pixels) == 4 * 3 * 3


def test_image_source_from_path(tmp_path):
    path = tmp_path / "icon.png"
    Image.new("L", (3, 3), 128).save(path)
    image = ImagePixelSource.from_path(path).produce(3, 3)
    assert image.pixels == bytes([128]) * 27


def test_seed_only_feeds_the_generator():
    source = UniformRandomSource("Sword")
    assert not hasattr(source, "seed")
    assert source.produce(2, 2) == UniformRandomSource("Sword").produce(2, 2)
