"""rmtrash - move files and directories to the trash instead of deleting them."""

__version__ = "0.1.0"
