"""Matplotlib-based preview of rendered images.

Matplotlib is an optional dependency (the ``preview`` extra) and is only
imported when a window is actually shown.

Example:
    >>> from src.glint.preview.display import show_preview
    >>> show_preview(renderer.get_image_numpy(), title="Reference scene")
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from src.glint.preview.export import compute_rmse


def show_preview(
    image: npt.NDArray[np.floating[npt.NBitBase]],
    *,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 8),
    block: bool = True,
) -> None:
    """Display an image as a Matplotlib figure.

    Args:
        image: Image array of shape (H, W, 3) with values in [0, 1].
        title: Figure title (default shows the image size).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until the figure is closed.
    """
    import matplotlib.pyplot as plt

    display_image = np.clip(image, 0.0, 1.0)

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(display_image)
    ax.axis("off")

    if title is None:
        height, width = display_image.shape[:2]
        title = f"Render Preview - {width}x{height}"
    ax.set_title(title)

    plt.tight_layout()
    plt.show(block=block)


def show_comparison(
    image_a: npt.NDArray[np.floating[npt.NBitBase]],
    image_b: npt.NDArray[np.floating[npt.NBitBase]],
    *,
    labels: tuple[str, str] = ("A", "B"),
    diff_scale: float = 10.0,
    figsize: tuple[float, float] = (16, 6),
    block: bool = True,
) -> float:
    """Display two images side by side with their amplified difference.

    Args:
        image_a: First image array (H, W, 3).
        image_b: Second image array (H, W, 3).
        labels: Labels for the two images.
        diff_scale: Scale factor for difference amplification.
        figsize: Figure size in inches.
        block: Whether to block execution until the figure is closed.

    Returns:
        RMSE between the two images.

    Raises:
        ValueError: If image shapes don't match.
    """
    rmse = compute_rmse(image_a, image_b)

    import matplotlib.pyplot as plt

    diff = np.abs(image_a.astype(np.float64) - image_b.astype(np.float64))
    diff_amplified = np.clip(diff * diff_scale, 0.0, 1.0)

    fig, axes = plt.subplots(1, 3, figsize=figsize)
    panels = (
        (np.clip(image_a, 0.0, 1.0), labels[0]),
        (np.clip(image_b, 0.0, 1.0), labels[1]),
        (diff_amplified, f"Difference x{diff_scale:g} (RMSE {rmse:.4f})"),
    )
    for ax, (panel, label) in zip(axes, panels):
        ax.imshow(panel)
        ax.set_title(label)
        ax.axis("off")

    plt.tight_layout()
    plt.show(block=block)
    return rmse
