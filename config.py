# config.py
"""
Camera Path Tool - Configuration
"""

# Supported camera file extensions
JSON_EXTENSIONS = {'.json'}
SUPPORTED_EXTENSIONS = JSON_EXTENSIONS

# Transform defaults (used by the CLI when a flag is omitted)
TRANSFORM_DEFAULTS = {
    'smooth_window': 3,       # keyframes per smoothing window
    'mirror_axis': 'x',
}

# Output settings
OUTPUT_CONFIG = {
    'indent': 2,              # pretty JSON, as the path editor writes it
    'encoding': 'utf-8',
}
