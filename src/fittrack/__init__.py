"""fittrack: personal fitness tracker."""

__version__ = "0.1.0"
