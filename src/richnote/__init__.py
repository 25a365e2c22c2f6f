"""Rich-text note engine: notes, style spans and selection-driven formatting."""

__version__ = "0.1.0"
