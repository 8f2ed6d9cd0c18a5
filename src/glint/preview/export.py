"""Image export utilities for rendered colors.

Rendered colors are already clamped to [0, 1] and are written without tone
mapping or gamma correction, one 8-bit channel value per color component.

Supported formats:
    - PNG (via Pillow)
    - PPM (binary P6, via Pillow)

Example:
    >>> from src.glint.core.integrator import render
    >>> from src.glint.preview.export import save_colors
    >>>
    >>> colors = render(scene, view, 500, 500)
    >>> save_colors(colors, 500, 500, "reference.png")
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

# File extension -> Pillow format name
SUPPORTED_FORMATS = {".png": "PNG", ".ppm": "PPM"}


def colors_to_image(
    colors: npt.NDArray[np.floating[npt.NBitBase]],
    width: int,
    height: int,
) -> npt.NDArray[np.float64]:
    """Reshape a raster-order color sequence into an image.

    Args:
        colors: Array of shape (width * height, 3).
        width: Image width in pixels.
        height: Image height in pixels.

    Returns:
        Image array of shape (height, width, 3), top row first.

    Raises:
        ValueError: If the number of colors does not match width * height.
    """
    colors = np.asarray(colors, dtype=np.float64)
    if colors.shape != (width * height, 3):
        raise ValueError(
            f"Expected {width * height} colors for a {width}x{height} image, got shape {colors.shape}"
        )
    return colors.reshape(height, width, 3)


def image_to_uint8(image: npt.NDArray[np.floating[npt.NBitBase]]) -> npt.NDArray[np.uint8]:
    """Convert a [0, 1] float image to 8-bit channel values.

    Values are clipped to [0, 1] and mapped with round(c * 255).

    Args:
        image: Float image array of any shape.

    Returns:
        Array of the same shape with dtype uint8.
    """
    clipped = np.clip(np.asarray(image, dtype=np.float64), 0.0, 1.0)
    return np.rint(clipped * 255.0).astype(np.uint8)


def save_colors(
    colors: npt.NDArray[np.floating[npt.NBitBase]],
    width: int,
    height: int,
    filepath: str | Path,
) -> None:
    """Save a raster-order color sequence as an image file.

    The format is chosen from the file extension.

    Args:
        colors: Array of shape (width * height, 3).
        width: Image width in pixels.
        height: Image height in pixels.
        filepath: Output path ending in .png or .ppm.

    Raises:
        ValueError: If the extension is unsupported or the color count is wrong.
    """
    path = Path(filepath)
    image_format = SUPPORTED_FORMATS.get(path.suffix.lower())
    if image_format is None:
        raise ValueError(
            f"Unsupported image format '{path.suffix}', expected one of {sorted(SUPPORTED_FORMATS)}"
        )

    image_uint8 = image_to_uint8(colors_to_image(colors, width, height))
    pil_image = PILImage.fromarray(image_uint8, mode="RGB")
    pil_image.save(path, format=image_format)


def load_image(filepath: str | Path) -> npt.NDArray[np.float64]:
    """Load an 8-bit RGB image as a (H, W, 3) float array in [0, 1]."""
    with PILImage.open(filepath) as pil_image:
        data = np.asarray(pil_image.convert("RGB"), dtype=np.float64)
    return data / 255.0


def compute_rmse(
    image_a: npt.NDArray[np.floating[npt.NBitBase]],
    image_b: npt.NDArray[np.floating[npt.NBitBase]],
) -> float:
    """Compute root mean squared error between two images.

    Args:
        image_a: First image array.
        image_b: Second image array (must have same shape as image_a).

    Returns:
        RMSE value (lower is more similar).

    Raises:
        ValueError: If image shapes don't match.
    """
    if image_a.shape != image_b.shape:
        raise ValueError(f"Image shapes must match: {image_a.shape} vs {image_b.shape}")

    diff = image_a.astype(np.float64) - image_b.astype(np.float64)
    return float(np.sqrt(np.mean(diff**2)))
