"""bulkedit - Rename and remove files in bulk with your text editor."""

__version__ = "0.1.0"
