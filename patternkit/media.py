"""Media players joined behind one interface through an adapter."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence


class MediaPlayer(ABC):
    """Anything that can play a file of a given audio type."""

    @abstractmethod
    def play(self, audio_type: str, file_name: str) -> None:
        """Play ``file_name``, which holds media of ``audio_type``."""


class Mp3Player(MediaPlayer):
    """Player that understands mp3 files only."""

    def play(self, audio_type: str, file_name: str) -> None:
        if audio_type == "mp3":
            print(f"Playing mp3 file. Name: {file_name}")
        else:
            print("Mp3Player can only play mp3 files.")


class Mp4Player:
    """Advanced player for mp4 files."""

    def play_mp4(self, file_name: str) -> None:
        print(f"Playing mp4 file. Name: {file_name}")


class VlcPlayer:
    """Advanced player for vlc files."""

    def play_vlc(self, file_name: str) -> None:
        print(f"Playing vlc file. Name: {file_name}")


class FlacPlayer:
    """Advanced player for flac files."""

    def play_flac(self, file_name: str) -> None:
        print(f"Playing flac file. Name: {file_name}")


class MediaAdapter(MediaPlayer):
    """Presents one advanced player through the ``MediaPlayer`` interface."""

    def __init__(self, audio_type: str) -> None:
        self.audio_type = audio_type
        self._mp4_player = Mp4Player() if audio_type == "mp4" else None
        self._vlc_player = VlcPlayer() if audio_type == "vlc" else None
        self._flac_player = FlacPlayer() if audio_type == "flac" else None

    def play(self, audio_type: str, file_name: str) -> None:
        if audio_type == "mp4" and self._mp4_player is not None:
            self._mp4_player.play_mp4(file_name)
        elif audio_type == "vlc" and self._vlc_player is not None:
            self._vlc_player.play_vlc(file_name)
        elif audio_type == "flac" and self._flac_player is not None:
            self._flac_player.play_flac(file_name)
        else:
            print(f"Unsupported format: {audio_type}")


class AudioPlayer(MediaPlayer):
    """Plays mp3 itself and hands other known formats to an adapter."""

    ADAPTED_TYPES = frozenset({"mp4", "vlc", "flac"})

    def __init__(self) -> None:
        self._mp3_player = Mp3Player()
        self.media_adapter: MediaAdapter | None = None

    def play(self, audio_type: str, file_name: str) -> None:
        if audio_type == "mp3":
            self._mp3_player.play(audio_type, file_name)
        elif audio_type in self.ADAPTED_TYPES:
            self.media_adapter = MediaAdapter(audio_type)
            self.media_adapter.play(audio_type, file_name)
        else:
            print(f"Invalid media format: {audio_type}")


def main(argv: Sequence[str] | None = None) -> int:
    """Play a fixed list of sample files."""
    player = AudioPlayer()
    for audio_type, file_name in (
        ("mp3", "song.mp3"),
        ("mp4", "video.mp4"),
        ("vlc", "movie.vlc"),
        ("flac", "audio.flac"),
        ("avi", "unsupported.avi"),
    ):
        player.play(audio_type, file_name)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())