"""Terminal UI layout with a styled header, a scrollable viewport and a footer, plus a demo."""

__version__ = "1.0.0"
__all__ = ["__version__"]