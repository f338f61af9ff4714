import pytest

from hatgame.audio import MUSIC_VOLUME, THEME_SOUND, Channel, Mixer, Volume


def test_volume_defaults_to_full():
    assert Volume().volume == 1.0


def test_set_volume():
    volume = Volume()
    volume.set_volume(0.25)
    assert volume.volume == 0.25


def test_mixer_has_volume_per_channel():
    mixer = Mixer()
    assert set(mixer.volumes) == {Channel.FX, Channel.MUSIC}
    mixer.volumes[Channel.FX].set_volume(0.5)
    assert mixer.volumes[Channel.MUSIC].volume == 1.0


def test_play_records_in_order():
    mixer = Mixer()
    mixer.play(Channel.FX, "coin")
    mixer.play(Channel.FX, "levelup")
    assert [p.sound for p in mixer.played] == ["coin", "levelup"]


def test_theme_playback_is_looped_with_volume():
    mixer = Mixer()
    playback = mixer.play(Channel.MUSIC, THEME_SOUND).with_volume(MUSIC_VOLUME).looped()
    assert playback.is_looped
    assert playback.volume == MUSIC_VOLUME
    assert mixer.played[-1] is playback
    assert playback.channel is Channel.MUSIC


def test_effective_volume_scales_with_channel():
    mixer = Mixer()
    mixer.volumes[Channel.FX].set_volume(0.5)
    playback = mixer.play(Channel.FX, "coin").with_volume(0.5)
    assert mixer.effective_volume(playback) == pytest.approx(0.25)


def test_plain_playback_not_looped():
    playback = Mixer().play(Channel.FX, "grunt")
    assert playback.is_looped is False
    assert playback.volume == 1.0