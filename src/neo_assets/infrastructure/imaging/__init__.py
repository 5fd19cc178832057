"""Image processing adapters."""

from .pillow_processor import PillowImageProcessor, create_pillow_image_processor

__all__ = [
    "PillowImageProcessor",
    "create_pillow_image_processor",
]
