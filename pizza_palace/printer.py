"""ESC/POS receipt printing for finished bills."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterable

from pizza_palace.config import (
    PRINTER_FONT_PATH,
    PRINTER_FONT_SIZE,
    PRINTER_LEFT_INDENT_PX,
    PRINTER_LINE_SPACING_PX,
    PRINTER_TAIL_SPACER_PX,
    PRINTER_USB_PRODUCT_ID,
    PRINTER_USB_VENDOR_ID,
    PRINTER_WIDTH_PX,
)
from pizza_palace.models import Order
from pizza_palace.rendering import RULE, THIN_RULE, render_bill_lines

logger = logging.getLogger(__name__)

_RULE_HEIGHT_PX = 12
_RULE_THICKNESS_PX = {RULE: 3, THIN_RULE: 1}
_BLANK_LINE_PX = 10
_ELLIPSIS = "..."
_FONT_OVERRIDE_ENV = "PIZZA_PALACE_PRINTER_FONT_PATH"
# Bill columns only line up in a monospaced face.
_MONOSPACE_FONT_FALLBACKS = (
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
)


def printer_font_candidates() -> tuple[str, ...]:
    """Font paths to try, most specific first: env override, configured font, monospace fallbacks."""
    override = os.environ.get(_FONT_OVERRIDE_ENV, "").strip()
    ordered = ([override] if override else []) + [PRINTER_FONT_PATH, *_MONOSPACE_FONT_FALLBACKS]
    return tuple(dict.fromkeys(path for path in ordered if path))


def resolve_printer_font_path(candidates: Iterable[str] | None = None) -> str:
    """Return the first candidate font file that exists."""
    tried = tuple(candidates) if candidates is not None else printer_font_candidates()
    for path in tried:
        if Path(path).is_file():
            return path
    raise RuntimeError(
        f"No usable printer font found. Set {_FONT_OVERRIDE_ENV} to a monospaced .ttf/.otf file. "
        f"Tried: {', '.join(tried)}"
    )


def check_printer_dependencies() -> tuple[bool, str]:
    """Check whether printer dependencies and a font are available."""
    try:
        from escpos.printer import Usb  # noqa: F401
        from PIL import ImageFont

        ImageFont.truetype(resolve_printer_font_path(), PRINTER_FONT_SIZE)
    except Exception as exc:
        return (False, f"Printer deps unavailable: {exc}")
    return (True, "Printer ready")


def _longest_fitting_prefix(text: str, fits: Callable[[str], bool]) -> str:
    low, high = 0, len(text)
    while low < high:
        mid = (low + high + 1) // 2
        if fits(text[:mid]):
            low = mid
        else:
            high = mid - 1
    return text[:low]


def _fit_bill_line(text: str, font: object, max_width_px: int) -> str:
    """
    Shorten an over-wide bill line.

    The label before the last ``": "`` is trimmed so the amount after it stays
    readable; lines without an amount are cut at the end.
    """
    from PIL import Image, ImageDraw

    draw = ImageDraw.Draw(Image.new("1", (1, 1), color=1))

    def width(candidate: str) -> int:
        return draw.textbbox((0, 0), candidate, font=font)[2]

    if width(text) <= max_width_px:
        return text

    label, sep, amount = text.rpartition(": ")
    if sep:
        tail = f"{_ELLIPSIS}{sep}{amount}"
        if width(tail) <= max_width_px:
            head = _longest_fitting_prefix(label, lambda prefix: width(prefix + tail) <= max_width_px)
            return head + tail

    head = _longest_fitting_prefix(text, lambda prefix: width(prefix + _ELLIPSIS) <= max_width_px)
    return head + _ELLIPSIS



def _render_line(text: str, font: object) -> object:
    from PIL import Image, ImageDraw

    probe = Image.new("1", (1, 1), color=1)
    bbox = ImageDraw.Draw(probe).textbbox((0, 0), text or " ", font=font)
    text_height = bbox[3] - bbox[1]
    canvas_height = max(12, text_height + PRINTER_LINE_SPACING_PX)

    img = Image.new("1", (PRINTER_WIDTH_PX, canvas_height), color=1)
    draw = ImageDraw.Draw(img)
    # Offset by bbox top so descenders are not clipped.
    y = (canvas_height - text_height) // 2 - bbox[1]
    draw.text((PRINTER_LEFT_INDENT_PX, y), text, font=font, fill=0)
    return img


def _render_blank(height_px: int) -> object:
    """A white strip the full paper width."""
    from PIL import Image

    return Image.new("1", (PRINTER_WIDTH_PX, max(1, height_px)), color=1)


def _render_rule(thickness_px: int) -> object:
    from PIL import Image, ImageDraw

    img = Image.new("1", (PRINTER_WIDTH_PX, _RULE_HEIGHT_PX), color=1)
    draw = ImageDraw.Draw(img)
    top = max(0, (_RULE_HEIGHT_PX - thickness_px) // 2)
    bottom = min(_RULE_HEIGHT_PX - 1, top + thickness_px - 1)
    draw.rectangle((0, top, PRINTER_WIDTH_PX - 1, bottom), fill=0)
    return img


def render_receipt_images(lines: list[str], font: object) -> list[object]:
    """Turn bill lines into printer-width images; text rules become drawn rules."""
    max_text_px = PRINTER_WIDTH_PX - (PRINTER_LEFT_INDENT_PX * 2)
    images: list[object] = []
    for line in lines:
        if line in _RULE_THICKNESS_PX:
            images.append(_render_rule(_RULE_THICKNESS_PX[line]))
        elif not line.strip():
            images.append(_render_blank(_BLANK_LINE_PX))
        else:
            images.append(_render_line(_fit_bill_line(line, font, max_text_px), font))
    return images


def print_bill(order: Order, printer: object | None = None, font: object | None = None) -> None:
    """Print the rendered bill and cut the ticket at the end."""
    if not order.items:
        raise ValueError("Cannot print a bill with no items")

    try:
        from PIL import ImageFont
    except Exception as exc:
        raise RuntimeError(f"Printer dependencies unavailable: {exc}") from exc

    if printer is None:
        try:
            from escpos.printer import Usb
        except Exception as exc:
            raise RuntimeError(f"Printer dependencies unavailable: {exc}") from exc
        printer = Usb(PRINTER_USB_VENDOR_ID, PRINTER_USB_PRODUCT_ID)
    if font is None:
        font = ImageFont.truetype(resolve_printer_font_path(), PRINTER_FONT_SIZE)

    images = render_receipt_images(render_bill_lines(order), font)
    for img in images:
        printer.image(img)
    # Extra tail for easier tearing.
    printer.image(_render_blank(PRINTER_TAIL_SPACER_PX))
    printer.cut()
    logger.info("bill_printed lines=%d", len(images))
