"""Keyboard shortcuts of the main window and global media keys."""

from __future__ import annotations

from enum import Enum
from typing import Callable


class Action(Enum):
    """Something a shortcut can make the player do."""

    QUIT = "quit"
    FOCUS_LIBRARY = "focus_library"
    FOCUS_PLAYLISTS = "focus_playlists"
    FOCUS_PLAYLIST = "focus_playlist"
    FOCUS_FILTER_LIBRARY = "focus_filter_library"
    FOCUS_FILTER_PLAYLISTS = "focus_filter_playlists"
    FOCUS_FILTER_PLAYLIST = "focus_filter_playlist"
    PLAY = "play"
    PAUSE = "pause"
    STOP = "stop"
    PREV = "prev"
    NEXT = "next"
    OPEN_MAIN_MENU = "open_main_menu"
    OPEN_PLAYBACK_LOG = "open_playback_log"
    OPEN_SORT_MENU = "open_sort_menu"
    OPEN_SHORTCUTS_MENU = "open_shortcuts_menu"
    JUMP_TO_PLAYING_TRACK = "jump_to_playing_track"


_LOCAL_KEYS: dict[Action, str] = {
    Action.QUIT: "Ctrl+Q",
    Action.FOCUS_LIBRARY: "Ctrl+1",
    Action.FOCUS_PLAYLISTS: "Ctrl+2",
    Action.FOCUS_PLAYLIST: "Ctrl+3",
    Action.FOCUS_FILTER_LIBRARY: "Alt+1",
    Action.FOCUS_FILTER_PLAYLISTS: "Alt+2",
    Action.FOCUS_FILTER_PLAYLIST: "Alt+3",
    Action.PLAY: "Alt+E",
    Action.STOP: "Alt+Q",
    Action.PAUSE: "Alt+W",
    Action.PREV: "Alt+R",
    Action.NEXT: "Alt+T",
    Action.OPEN_MAIN_MENU: "Alt+M",
    Action.OPEN_PLAYBACK_LOG: "Ctrl+L",
    Action.OPEN_SORT_MENU: "Ctrl+S",
    Action.OPEN_SHORTCUTS_MENU: "Alt+S",
    Action.JUMP_TO_PLAYING_TRACK: "Alt+J",
}

_GLOBAL_KEYS: dict[str, Action] = {
    "Media Stop": Action.STOP,
    "Media Play": Action.PLAY,
    "Media Pause": Action.PAUSE,
    "Media Next": Action.NEXT,
    "Media Previous": Action.PREV,
}

_DESCRIPTIONS: list[tuple[str, Action]] = [
    ("Play", Action.PLAY),
    ("Stop", Action.STOP),
    ("Pause", Action.PAUSE),
    ("Next", Action.NEXT),
    ("Previous", Action.PREV),
    ("Focus on library", Action.FOCUS_LIBRARY),
    ("Focus on playlists", Action.FOCUS_PLAYLISTS),
    ("Focus on playlist", Action.FOCUS_PLAYLIST),
    ("Focus on library filter", Action.FOCUS_FILTER_LIBRARY),
    ("Focus on playlists filter", Action.FOCUS_FILTER_PLAYLISTS),
    ("Focus on playlist filter", Action.FOCUS_FILTER_PLAYLIST),
    ("Open main menu", Action.OPEN_MAIN_MENU),
    ("Open playback log", Action.OPEN_PLAYBACK_LOG),
    ("Open sort menu", Action.OPEN_SORT_MENU),
    ("Open shortcuts dialog", Action.OPEN_SHORTCUTS_MENU),
    ("Jump to playing track", Action.JUMP_TO_PLAYING_TRACK),
    ("Quit", Action.QUIT),
]


def _normalize(key: str) -> str:
    return " ".join(key.split()).replace(" +", "+").replace("+ ", "+").casefold()


class Shortcuts:
    """Maps key sequences to actions and dispatches them to handlers.

    Global media keys are bound only when ``global_keys`` is true; they are
    unavailable on some display servers.
    """

    def __init__(self, global_keys: bool = True) -> None:
        self.keys: dict[Action, str] = dict(_LOCAL_KEYS)
        self._bindings: dict[str, Action] = {
            _normalize(key): action for action, key in self.keys.items()
        }
        if global_keys:
            self._bindings.update(
                (_normalize(key), action) for key, action in _GLOBAL_KEYS.items()
            )
        self._handlers: dict[Action, list[Callable[[], None]]] = {}

    def describe(self) -> list[tuple[str, str]]:
        """Human-readable ``(description, key sequence)`` pairs of the local shortcuts."""
        return [(name, self.keys[action]) for name, action in _DESCRIPTIONS]

    def connect(self, action: Action, handler: Callable[[], None]) -> None:
        """Call ``handler`` whenever ``action`` is triggered."""
        self._handlers.setdefault(action, []).append(handler)

    def trigger(self, key: str) -> Action | None:
        """Run the handlers bound to ``key``; return its action, or None if unbound."""
        action = self._bindings.get(_normalize(key))
        if action is None:
            return None
        for handler in self._handlers.get(action, []):
            handler()
        return action