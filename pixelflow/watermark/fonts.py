"""
Font resolution for text watermarks.

Lookup order for a FontSpec:
1. ``family`` as a path to a font file
2. ``<family>.ttf`` / ``<family>.otf`` in the configured search paths
3. ``<family>.ttf`` through Pillow's own system font lookup
4. Pillow's built-in scalable default font
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional, Sequence, Tuple

from PIL import ImageFont

from pixelflow.config import Settings, get_settings
from pixelflow.schemas.watermark import FontSpec

logger = logging.getLogger(__name__)

FONT_EXTENSIONS = (".ttf", ".otf", ".ttc")


def _candidate_files(family: str, search_paths: Sequence[str]):
    if os.path.splitext(family)[1].lower() in FONT_EXTENSIONS:
        yield family

    for search_path in search_paths:
        path = Path(search_path)
        if path.is_file():
            if path.stem.lower() == family.lower():
                yield str(path)
        elif path.is_dir():
            for extension in FONT_EXTENSIONS:
                for match in sorted(path.rglob(f"{family}{extension}")):
                    yield str(match)

    # Resolved by Pillow against the platform font directories
    yield f"{family}.ttf"


@lru_cache(maxsize=64)
def _load(family: Optional[str], size: int, search_paths: Tuple[str, ...]):
    if family:
        for candidate in _candidate_files(family, search_paths):
            try:
                font = ImageFont.truetype(candidate, size)
            except OSError:
                continue
            logger.debug(f"Loaded font {candidate} at size {size}")
            return font
        logger.warning(f"Font '{family}' not found, using Pillow's default font")

    return ImageFont.load_default(size=size)


def load_font(spec: Optional[FontSpec] = None, settings: Optional[Settings] = None):
    """
    Load the font described by a FontSpec.

    Args:
        spec: Font family/path and size; unset fields use the configured defaults
        settings: Settings providing defaults and font search paths
            (defaults to get_settings())

    Returns:
        Pillow font object usable with ImageDraw
    """
    spec = spec or FontSpec()
    settings = settings or get_settings()
    family = spec.family or settings.fonts.default_family
    size = spec.size or settings.fonts.default_size
    return _load(family, size, tuple(settings.fonts.search_paths))
