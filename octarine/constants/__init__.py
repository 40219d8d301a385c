from .web_colors import WEB_COLORS, lookup_web_color, name_for_rgb

__all__ = ['WEB_COLORS', 'lookup_web_color', 'name_for_rgb']
