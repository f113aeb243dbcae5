"""File name extensions the player can open."""


def supported_file_formats() -> list[str]:
    """Extensions of audio files and CUE sheets that can be added to a playlist."""
    return ["mp3", "flac", "ogg", "m4a", "mp4", "wav", "wma", "aac", "ape", "cue", "opus", "dsf"]


def supported_playlist_file_formats() -> list[str]:
    """Extensions of playlist files that can be imported."""
    return ["m3u", "m3u8", "pls"]


def is_supported_file(name: str) -> bool:
    """True if ``name`` ends with a supported audio extension, ignoring case."""
    lowered = name.lower()
    return any(lowered.endswith(ext) for ext in supported_file_formats())