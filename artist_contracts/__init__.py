"""Artist contract templates: validation, rendering and generation"""

__version__ = "0.1.0"
