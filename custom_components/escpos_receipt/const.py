DOMAIN = "escpos_receipt"

# Configuration keys
CONF_LINE_WIDTH = "line_width"
CONF_CURRENCY_SYMBOL = "currency_symbol"
CONF_CODEPAGE = "codepage"
CONF_CUT_MODE = "cut_mode"
CONF_FOOTER_LINES = "footer_lines"
CONF_TIMEOUT = "timeout"

# Default values
DEFAULT_LINE_WIDTH = 42  # 80mm roll, font A
DEFAULT_CURRENCY_SYMBOL = "$"
DEFAULT_CODEPAGE = "CP437"
DEFAULT_CUT_MODE = "full"
DEFAULT_TIMEOUT = 4.0
DEFAULT_FOOTER_LINES: tuple[str, ...] = (
    "Thank you for your purchase!",
    "Please keep this receipt",
    "for warranty and returns",
)
FOOTER_DECORATION = "* * * * * * * * * *"

CUT_MODES: list[str] = ["full", "partial"]
MIN_LINE_WIDTH = 16
MAX_LINE_WIDTH = 96

# Device selection (Seiko Epson Corp)
EPSON_VENDOR_ID = 0x04B8

# Serial line settings
SERIAL_BAUDRATE = 9600
SERIAL_BYTESIZE = 8
SERIAL_STOPBITS = 1
SERIAL_PARITY = "N"

# USB settings
USB_CONFIGURATION = 1
USB_INTERFACE = 0
USB_OUT_EP = 0x01

# Fallback print page
FALLBACK_PAGE_DIR = DOMAIN  # under the config directory
FALLBACK_URL_PATH = f"/{DOMAIN}"
FALLBACK_KEEP_PAGES = 5
FALLBACK_PRINT_DELAY_MS = 100
FALLBACK_CLOSE_DELAY_MS = 1000

SERVICE_PRINT_RECEIPT = "print_receipt"

ATTR_STORE = "store"
ATTR_NAME = "name"
ATTR_ADDRESS = "address"
ATTR_PHONE = "phone"
ATTR_ITEMS = "items"
ATTR_QUANTITY = "quantity"
ATTR_UNIT_PRICE = "unit_price"
ATTR_TOTAL = "total"
ATTR_TRANSACTION_ID = "transaction_id"
ATTR_TIMESTAMP = "timestamp"
ATTR_CASHIER = "cashier"
ATTR_SUBTOTAL = "subtotal"
ATTR_TAX = "tax"
ATTR_PAYMENT_METHOD = "payment_method"
ATTR_OPEN_DRAWER = "open_drawer"
