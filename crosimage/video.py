"""Recognising video files and judging how informative a video frame is."""

from __future__ import annotations

from PIL import Image

VIDEO_EXTENSIONS = (".avi", ".flv", ".mkv", ".wmv", ".mp4", ".mpg", ".mov", ".vob")
PARTIAL_DOWNLOAD_SUFFIX = ".crdownload"

_QUANTIZATION_BITS = 5
_TOP_COLORS = 3


def is_video_file(path: str) -> bool:
    """Tell whether path names a video, also while it is still being downloaded."""
    path = path.lower()
    if path.endswith(PARTIAL_DOWNLOAD_SUFFIX):
        path = path[: -len(PARTIAL_DOWNLOAD_SUFFIX)]
    return path.endswith(VIDEO_EXTENSIONS)


def color_monopolization(image: Image.Image) -> float:
    """Return the share of pixels taken by the three most common coarse colours.

    Each channel is reduced to 3 bits before counting; an empty image gives 0.
    """
    rgb = image.convert("RGB")
    pixels = rgb.width * rgb.height
    if pixels <= 0:
        return 0.0
    quantized = rgb.point(lambda v: v >> _QUANTIZATION_BITS)
    counts = sorted((count for count, _ in quantized.getcolors(512)), reverse=True)
    return sum(counts[:_TOP_COLORS]) / pixels


def video_sample_offsets() -> list[int]:
    """Return the offsets in seconds at which frames are tried for a thumbnail."""
    offsets = [1, 5]
    step = 3
    for _ in range(6):
        offsets.append(offsets[-1] + step)
        step += 1
    return offsets