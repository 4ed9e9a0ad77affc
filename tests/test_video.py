import pytest
from PIL import Image

from crosimage.video import color_monopolization, is_video_file, video_sample_offsets


@pytest.mark.parametrize(
    "path",
    ["movie.avi", "MOVIE.MKV", "dir/clip.mp4", "a.vob", "movie.mp4.crdownload"],
)
def test_video_files_recognised(path):
    assert is_video_file(path) is True


@pytest.mark.parametrize("path", ["photo.jpg", "x.crdownload", "avi", "notes.txt"])
def test_other_files_rejected(path):
    assert is_video_file(path) is False


def test_uniform_image_is_fully_monopolized():
    assert color_monopolization(Image.new("RGB", (8, 8), (12, 200, 7))) == 1.0


def test_empty_image_gives_zero():
    assert color_monopolization(Image.new("RGB", (0, 0))) == 0.0


def test_colours_in_same_bin_count_together():
    image = Image.new("RGB", (2, 1))
    image.putpixel((0, 0), (0, 0, 0))
    image.putpixel((1, 0), (31, 31, 31))
    assert color_monopolization(image) == 1.0


def test_four_distinct_colours():
    image = Image.new("RGB", (2, 2))
    for xy, color in zip(
        [(0, 0), (1, 0), (0, 1), (1, 1)],
        [(0, 0, 0), (255, 0, 0), (0, 255, 0), (0, 0, 255)],
    ):
        image.putpixel(xy, color)
    assert color_monopolization(image) == pytest.approx(0.75)


def test_result_is_a_fraction():
    image = Image.effect_noise((16, 16), 100).convert("RGB")
    value = color_monopolization(image)
    assert 0.0 < value <= 1.0


def test_sample_offsets_shape():
    offsets = video_sample_offsets()
    assert offsets[:2] == [1, 5]
    assert len(offsets) == 8
    steps = [b - a for a, b in zip(offsets[1:], offsets[2:])]
    assert steps[0] == 3
    assert all(b - a == 1 for a, b in zip(steps, steps[1:]))