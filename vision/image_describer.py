"""Placeholder image description with input validation."""

from __future__ import annotations

import logging
from pathlib import Path

from core.errors import InvalidInput
from vision.base_vision import BaseVisionProvider

logger = logging.getLogger("dwight.vision")

IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "gif", "bmp", "webp"})


class MockImageDescriber(BaseVisionProvider):
    """Always-available describer that names the file instead of inspecting it."""

    def is_available(self) -> bool:
        return True

    def describe(self, image_path: Path) -> str:
        if not image_path.exists():
            raise InvalidInput("File does not exist")
        extension = image_path.suffix.lower().lstrip(".")
        if extension not in IMAGE_EXTENSIONS:
            raise InvalidInput(
                "Invalid file type. Please select an image file (jpg, jpeg, png, gif, bmp, webp)"
            )
        logger.debug("Describing %s with mock provider", image_path.name)
        return (
            f"Mock Description: This appears to be an image file named '{image_path.name}'. "
            "In a production implementation, this would be analyzed by an AI vision model "
            "to provide a detailed description of the image contents, including objects, "
            "people, scenes, colors, and other visual elements detected in the image."
        )
