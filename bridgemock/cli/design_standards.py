"""Visual standards for the bridge CLI output."""

# Color palette
COLORS = {
    'primary': '#3B82F6',          # Headers, adapter name (bright blue)
    'success': '#10B981',          # Successful requests (green)
    'warning': '#F59E0B',          # Ignored input, notices (yellow)
    'error': '#EF4444',            # Bridge errors (red)
    'info': '#06B6D4',             # Metadata values (cyan)
    'muted': '#6B7280',            # Labels, secondary text (gray)
    'accent': '#8B5CF6',           # Counts and key numbers (purple)
}

LAYOUT = {
    'terminal_width': 120,
}

SYMBOLS = {
    'fail': '✗',
}
