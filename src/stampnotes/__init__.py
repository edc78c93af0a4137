"""stampnotes: type notes during a recording, every new line gets a timestamp."""

__version__ = "0.3.0"
