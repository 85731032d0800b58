class Theme:
    LIGHT = {
        "bg_primary": "#F3F4F6",      # Main background (light gray)
        "bg_secondary": "#FFFFFF",    # Panels (white)
        "text_primary": "#1F2937",
        "text_secondary": "#4B5563",
        "accent": "#3B82F6",
        "accent_hover": "#2563eb",
        "border": "#E5E7EB",
        "input_bg": "#FFFFFF",
        "highlight": "#2563eb",       # Monthly payment / interest cells
        "total": "#10B981",           # Total amount cells
        "danger": "#EF4444",
        "danger_bg": "#FEF2F2",
        "danger_border": "#FEE2E2",
    }

    DARK = {
        "bg_primary": "#111827",
        "bg_secondary": "#1F2937",
        "text_primary": "#F9FAFB",
        "text_secondary": "#9CA3AF",
        "accent": "#60A5FA",
        "accent_hover": "#3B82F6",
        "border": "#374151",
        "input_bg": "#374151",
        "highlight": "#60A5FA",
        "total": "#34D399",
        "danger": "#F87171",
        "danger_bg": "#3f1d1d",
        "danger_border": "#7f1d1d",
    }

class ThemeManager:
    """Current palette for the window. Kept in memory only."""

    def __init__(self, theme_name="Light"):
        self.current_theme_name = theme_name
        self.colors = Theme.LIGHT if theme_name == "Light" else Theme.DARK

    def set_theme(self, theme_name):
        self.current_theme_name = theme_name
        self.colors = Theme.LIGHT if theme_name == "Light" else Theme.DARK

    def toggle_theme(self):
        new_theme = "Dark" if self.current_theme_name == "Light" else "Light"
        self.set_theme(new_theme)
        return new_theme

    def get_color(self, key):
        return self.colors.get(key, "#ff0000") # Return red if key missing

    @property
    def is_dark(self):
        return self.current_theme_name == "Dark"
