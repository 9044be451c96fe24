"""
Color theme for console output.
"""

THEME = {
    "fg": "#e6edf3",
    "primary": "#58a6ff",
    "secondary": "#a371f7",
    "success": "#3fb950",
    "warning": "#d29922",
    "error": "#f85149",
    "muted": "#7d8590",
    "border": "#30363d",
}

SEVERITY_STYLES = {
    "failure": THEME["error"],
    "warning": THEME["warning"],
}
