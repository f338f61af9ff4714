"""Audio channels, their volumes and a mixer that records what is played."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

THEME_SOUND = "theme"
MUSIC_VOLUME = 0.9


class Channel(Enum):
    FX = "fx"
    MUSIC = "music"


@dataclass
class Volume:
    """Amplitude of one channel; 1.0 is full volume."""

    volume: float = 1.0

    def set_volume(self, value: float) -> None:
        self.volume = float(value)


@dataclass
class Playback:
    """One sound started on a channel."""

    channel: Channel
    sound: str
    volume: float = 1.0
    is_looped: bool = False

    def with_volume(self, volume: float) -> Playback:
        self.volume = float(volume)
        return self

    def looped(self) -> Playback:
        self.is_looped = True
        return self


@dataclass
class Mixer:
    """Holds a volume per channel and the sounds played on them, in order."""

    volumes: dict[Channel, Volume] = field(
        default_factory=lambda: {channel: Volume() for channel in Channel}
    )
    played: list[Playback] = field(default_factory=list)

    def play(self, channel: Channel, sound: str) -> Playback:
        """Start ``sound`` on ``channel``; the returned playback can be adjusted."""
        playback = Playback(channel=channel, sound=sound)
        self.played.append(playback)
        return playback

    def effective_volume(self, playback: Playback) -> float:
        """Playback volume scaled by its channel's volume."""
        return playback.volume * self.volumes[playback.channel].volume