"""
Terminal palette shared by the TUI stylesheets.
"""

BLACK = "#000000"
DARK_GRAY = "#111318"
CHARCOAL_GRAY = "#1A1D22"
SLATE = "#3A4150"
OFF_WHITE = "#F2F2F2"
MUTED_WHITE = "#9AA0A8"
TEAL_GREEN = "#46C59E"
CORAL_PINK = "#F26D6D"
