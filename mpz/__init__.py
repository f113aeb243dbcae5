"""Core library of a folder-based music player: tracks, CUE sheets, playlists and view state."""

__version__ = "0.1.0"