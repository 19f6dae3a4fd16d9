import os

# ==== pagination defaults / env vars ====
WIDTH = int(os.getenv("PAGINATION_WIDTH", 55))  # width of the divider lines, in cells
RESULTS_PER_PAGE = int(os.getenv("PAGINATION_RESULTS_PER_PAGE", 6))  # 0 disables pagination
LINE_CHARACTER = os.getenv("PAGINATION_LINE_CHARACTER", "-")

# ---- navigation buttons ----
PREVIOUS_PAGE_BUTTON_CHARACTER = "\u00ab"  # «
NEXT_PAGE_BUTTON_CHARACTER = "\u00bb"  # »
