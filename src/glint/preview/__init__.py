"""Image export and preview utilities."""

from .display import show_comparison, show_preview
from .export import colors_to_image, compute_rmse, image_to_uint8, load_image, save_colors

__all__ = [
    "colors_to_image",
    "image_to_uint8",
    "save_colors",
    "load_image",
    "compute_rmse",
    "show_preview",
    "show_comparison",
]
