# mpz

The library behind a folder-based music player. It turns directories,
single audio files, CUE sheets and M3U/PLS playlists into track lists,
sorts them by user criteria, and keeps the state that the player's views
show: playlist rows, the playback log, the status line, the tray menu,
keyboard shortcuts, sorting presets and volume.

It has no dependencies beyond the standard library.

## Install

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Overview

- `mpz.track` – `Track` is one playable item: a local file, a slice of a
  file described by a CUE sheet, or a network stream
  (`Track.from_file`, `Track.from_stream`, `Track.empty`).
  `formatted_time(ms)` renders durations as `MM:SS`, `H:MM:SS` or
  `Nd ...`.
- `mpz.streammeta.StreamMetaData` – ICY headers and `StreamTitle` of a
  stream: `artist()`, `title()`, `bitrate()`, `samplerate()`, `format()`.
- `mpz.formats` – `supported_file_formats()`,
  `supported_playlist_file_formats()` and `is_supported_file(name)`.
- `mpz.cueparser` – `CueParser(path).tracks()` reads a `.cue` sheet into
  tracks with begin offsets and durations in milliseconds;
  `split_cue_line` and `begin_by_index` are the helpers it uses.
- `mpz.fileparser.FileParser` – reads `.m3u`, `.m3u8` and `.pls` files into
  tracks and stream tracks.
- `mpz.loader.Loader` – loads a directory (recursively), a single file or a
  playlist file; audio files covered by a CUE sheet appear only as the
  sheet's tracks.
- `mpz.sorter.Sorter` – multi-level sorting such as
  `"Artist / -Year / Title"`; `default_criteria()` gives the default.
- `mpz.playlist` – `Playlist`, a named track list with a unique id that can
  be loaded from paths (also in a background thread with `load_async` /
  `concat_async`), sorted, searched by track uid and exported with
  `to_m3u()`; `PlaylistRandom` names the playback order modes.
- `mpz.columns` – `ColumnsConfig` of `Column`s: which track field each
  column of the playlist table shows, its width and `Alignment`;
  `serialize()` and `deserialize(data)` convert to and from plain data.
- `mpz.playback_log` – `PlaybackLog`, a bounded newest-first log of
  `LogItem`s with CSV export and play-time counters, and
  `PlaybackLogController`, which decides what gets logged.
- `mpz.playlist_view` – rows, cells, highlight and removal for the table of
  the current playlist (`PlaylistView`, `HighlightState`).
- `mpz.track_filter` – `matches(track, term)` and `filter_rows(tracks, term)`
  for the case-insensitive search box.
- `mpz.playlists.PlaylistCollection` – the list of all playlists, with an
  optional save callback called on every change.
- `mpz.status` – `StatusText` for the status line, and
  `humanized_bytes(count)`.
- `mpz.tray` – `TrayState`: enabled actions, tooltip and now-playing line.
- `mpz.shortcuts` – `Shortcuts` maps key sequences such as `"Alt+E"` or
  `"Media Play"` to `Action`s and calls connected handlers.
- `mpz.sort_presets` – `SortingPresets` of `SortingPreset`s and
  `standard_presets()`.
- `mpz.volume.VolumeControl` – volume in percent, clamped to 0..100, with
  wheel steps of 5.
- `mpz.sysinfo.system_info()` and `mpz.rng` – host description lines and
  random identifiers.

## Reading files

`Track.from_file` reads what it can with the standard library: duration,
channels, bitrate and sample rate of WAV files, and artist, title, album,
year and track number from an ID3v1 tag at the end of the file. For other
formats those fields stay empty or zero unless they are passed to `Track`
directly.

## Example

    from mpz.playlist import Playlist

    playlist = Playlist()
    playlist.load("/music/Some Album")
    playlist.sort_by("Artist / -Year / Title")
    for track in playlist.tracks:
        print(track.short_text(), track.formatted_duration())

    with open("album.m3u", "wb") as out:
        out.write(playlist.to_m3u())

## What it does not do

This package plays no audio and has no windows, menus or command-line
program: the view classes hold state and text only. It does not store
playlists or settings on disk itself; `PlaylistCollection` and
`PlaybackLog` take callbacks for saving.