"""tagls - list ID3-tagged audio files with their metadata."""

__version__ = "0.1.0"
