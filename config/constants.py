"""
Centralized constants for pdfcr.
Page geometry values are part of the output contract: changing them changes
where every line lands on the page.
"""

# ===========================================
# PAGE GEOMETRY (millimetres)
# ===========================================
PAGE_WIDTH_MM = 200.0
PAGE_HEIGHT_MM = 264.0                # body height, lines pack down from here
LEFT_MARGIN_MM = 2.0                  # x of every header and body line
HEADER_BASELINE_MM = 259.0            # y of the file name header

# ===========================================
# LAYOUT
# ===========================================
PAGE_HEIGHT_LINES = 48                # body lines per page, header excluded
WRAP_WIDTH = 85                       # characters per wrapped segment
TAB_WIDTH = 4                         # spaces per tab
FONT_SIZE = 11.0
LINE_SPACING_DIVISOR = 2.1            # line_spacing = font_size / 2.1

# ===========================================
# DOCUMENT
# ===========================================
DEFAULT_TITLE = 'TITLE'
DEFAULT_FONT_NAME = 'Courier'         # ReportLab built-in, no embedding needed
CUSTOM_FONT_NAME = 'PdfcrFont'        # name a TTF from font_path is registered under
STANDARD_FONT_ENCODING = 'cp1252'     # WinAnsi, the glyph set of the built-in fonts
PDF_CREATOR = 'pdfcr'

# ===========================================
# PROCESSING
# ===========================================
DEFAULT_WORKERS = 1                   # layout threads, 1 = inline

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = None                       # set a path to also log to a rotating file
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
