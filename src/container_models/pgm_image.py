from typing import Self

import numpy as np
from numpy.typing import NDArray
from pydantic import Field, model_validator

from .base import ConfigBaseModel


class PGMImage(ConfigBaseModel):
    """
    A decoded 8-bit grayscale PGM image.

    `contents` holds one byte per pixel, row-major, top-to-bottom and left-to-right.
    """

    width: int = Field(..., ge=0, description="number of pixel columns")
    height: int = Field(..., ge=0, description="number of pixel rows")
    max_grey_val: int = Field(..., ge=0, le=255, description="declared maximum sample value")
    contents: bytes = Field(..., repr=False, description="raw pixel samples")

    @model_validator(mode="after")
    def validate_contents_size(self) -> Self:
        if len(self.contents) != self.size:
            raise ValueError(
                f"Expected {self.size} pixel bytes for a {self.width}x{self.height} image, "
                f"got {len(self.contents)}"
            )
        return self

    @property
    def size(self) -> int:
        """The number of pixels."""
        return self.width * self.height

    @property
    def pixels(self) -> NDArray[np.uint8]:
        """Read-only view of the samples with shape (height, width)."""
        return np.frombuffer(self.contents, dtype=np.uint8).reshape(self.height, self.width)
