"""imagegen package: Gemini image generation and editing.

imagegen.options parses the server's command-line and environment settings,
imagegen.gemini talks to the model, and imagegen.imagegen turns model replies
into saved image files.
"""

from .imagegen import ImageResult, edit_image, generate_image, save_image
from .options import ParsedOptions, parse_args

__all__ = [
    "ImageResult",
    "ParsedOptions",
    "edit_image",
    "generate_image",
    "parse_args",
    "save_image",
]
