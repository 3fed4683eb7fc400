"""Runtime configuration defaults for logging and receipt printing."""

from __future__ import annotations

DEBUG_LOG_PATH = "/tmp/pizza-palace-debug.log"
LOG_LEVEL = "DEBUG"

# 58mm ESC/POS thermal printer defaults.
PRINTER_USB_VENDOR_ID = 0x28E9
PRINTER_USB_PRODUCT_ID = 0x0289
PRINTER_WIDTH_PX = 384
PRINTER_FONT_SIZE = 13
PRINTER_FONT_PATH = "/System/Library/Fonts/Menlo.ttc"
PRINTER_LEFT_INDENT_PX = 4
PRINTER_LINE_SPACING_PX = 6
PRINTER_TAIL_SPACER_PX = 70
