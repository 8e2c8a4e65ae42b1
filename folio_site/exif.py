"""Read camera metadata from images for photo captions.

:func:`read_exif` opens an image with Pillow, pulls the handful of fields the
gallery templates show, and formats each into a display string. Fields the
camera did not record resolve to ``"--"`` individually; a missing or unreadable
file raises whatever Pillow raises.

Example
-------
>>> import asyncio
>>> from pathlib import Path
>>> summary = asyncio.run(read_exif(Path("src/images/harbour.jpg")))  # doctest: +SKIP
>>> summary.aperture  # doctest: +SKIP
'f/2.8'
"""

from __future__ import annotations

import asyncio
import dataclasses as dc
import math
import typing as typ
from fractions import Fraction

from PIL import ExifTags, Image

from ._constants import EXIF_PLACEHOLDER

if typ.TYPE_CHECKING:
    from pathlib import Path


@dc.dataclass(frozen=True, slots=True)
class ExifSummary:
    """Display-ready exposure details for one photograph."""

    camera: str = EXIF_PLACEHOLDER
    exposure: str = EXIF_PLACEHOLDER
    aperture: str = EXIF_PLACEHOLDER
    iso: str = EXIF_PLACEHOLDER
    flash: str = EXIF_PLACEHOLDER
    focal_length: str = EXIF_PLACEHOLDER
    lens: str = EXIF_PLACEHOLDER


async def read_exif(path: Path) -> ExifSummary:
    """Return the :class:`ExifSummary` for the image at ``path``."""
    return await asyncio.to_thread(_read_exif_sync, path)


def _read_exif_sync(path: Path) -> ExifSummary:
    with Image.open(path) as image:
        exif = image.getexif()
        details = dict(exif.get_ifd(ExifTags.IFD.Exif))

    def _field(tag: ExifTags.Base) -> object | None:
        value = details.get(tag)
        if value is None:
            value = exif.get(tag)
        return value

    fnumber = _as_fraction(_field(ExifTags.Base.FNumber))
    return ExifSummary(
        camera=_format_camera(_field(ExifTags.Base.Make), _field(ExifTags.Base.Model)),
        exposure=_format_exposure(_as_fraction(_field(ExifTags.Base.ExposureTime))),
        aperture=format_fstop(
            f"{fnumber.numerator}/{fnumber.denominator}" if fnumber else None
        ),
        iso=_format_iso(_field(ExifTags.Base.ISOSpeedRatings)),
        flash=_format_flash(_field(ExifTags.Base.Flash)),
        focal_length=_format_focal_length(
            _as_fraction(_field(ExifTags.Base.FocalLength))
        ),
        lens=_clean_text(_field(ExifTags.Base.LensModel)) or EXIF_PLACEHOLDER,
    )


def format_fstop(value: str | None) -> str:
    """Format an ``"a/b"`` aperture fraction as ``f/<decimal>``.

    >>> format_fstop("28/10")
    'f/2.8'
    >>> format_fstop("0/0")
    '--'
    """
    if not value:
        return EXIF_PLACEHOLDER
    numerator, sep, denominator = str(value).partition("/")
    try:
        top = float(numerator)
        bottom = float(denominator) if sep else 1.0
    except ValueError:
        return EXIF_PLACEHOLDER
    if bottom == 0 or not math.isfinite(top) or not math.isfinite(bottom):
        return EXIF_PLACEHOLDER
    return f"f/{round(top / bottom, 2):g}"


def _as_fraction(value: object | None) -> Fraction | None:
    """Convert Pillow rationals and plain numbers into a Fraction."""
    if value is None:
        return None
    if isinstance(value, tuple) and len(value) == 2:
        top, bottom = value
    else:
        top = getattr(value, "numerator", value)
        bottom = getattr(value, "denominator", 1)
    try:
        if not bottom:
            return None
        return Fraction(top) / Fraction(bottom)
    except (TypeError, ValueError):
        return None


def _first(value: object | None) -> object | None:
    """Unwrap single-element tuples Pillow returns for some SHORT tags."""
    if isinstance(value, tuple):
        return value[0] if value else None
    return value


def _clean_text(value: object | None) -> str | None:
    if value is None:
        return None
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="ignore")
    text = str(value).replace("\x00", "").strip()
    return text or None


def _format_camera(make: object | None, model: object | None) -> str:
    maker = _clean_text(make)
    name = _clean_text(model)
    if maker and name:
        if name.lower().startswith(maker.lower()):
            return name
        return f"{maker} {name}"
    return name or maker or EXIF_PLACEHOLDER


def _format_exposure(value: Fraction | None) -> str:
    if value is None or value <= 0:
        return EXIF_PLACEHOLDER
    if value >= 1:
        return f"{float(value):g}s"
    return f"1/{round(1 / value)}s"


def _format_iso(value: object | None) -> str:
    value = _first(value)
    if value is None:
        return EXIF_PLACEHOLDER
    try:
        return str(int(value))
    except (TypeError, ValueError):
        return EXIF_PLACEHOLDER


def _format_flash(value: object | None) -> str:
    value = _first(value)
    if value is None:
        return EXIF_PLACEHOLDER
    try:
        fired = int(value) & 0x1
    except (TypeError, ValueError):
        return EXIF_PLACEHOLDER
    return "Fired" if fired else "Did not fire"


def _format_focal_length(value: Fraction | None) -> str:
    if value is None or value <= 0:
        return EXIF_PLACEHOLDER
    return f"{round(float(value), 1):g}mm"


__all__ = ["ExifSummary", "format_fstop", "read_exif"]
