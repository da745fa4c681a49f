"""Who's That Pokemon style main menu and shadow generator start screen."""

__version__ = "2.0.0"
__all__ = ["__version__"]