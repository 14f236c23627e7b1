"""OptionTracker - performance analytics for option trade journals."""

__version__ = "0.1.0"
