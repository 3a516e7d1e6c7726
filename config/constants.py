"""
Centralized constants for the pagination engine.
All magic numbers used by splitting, classification and logging.
"""

# ===========================================
# PAGINATION (load time)
# ===========================================
CHARS_PER_PAGE = 1500                 # packing budget when a chapter is first split
PAGE_BREAK_MARKER = '---pagebreak---'  # manual page boundary, never auto-split
PARAGRAPH_SEPARATOR = '\n\n'          # used when joining paragraphs/pages
PARAGRAPH_SPLIT_PATTERN = r'\n\n+'    # paragraph boundary

# ===========================================
# PAGE STATUS
# ===========================================
WORDS_PER_PAGE = 400                  # fixed target, independent of paper size
COMPLETE_RATIO = 0.8                  # complete at >= 320 words

# ===========================================
# PAPER SIZE (edit time)
# ===========================================
DEFAULT_PAPER_SIZE = 'a4'

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = None                       # e.g. 'logs/pagination.log'
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
