"""Parsing and matching of window, property and audio queries"""

import pytest

from attention.errors import ProbeFailure
from attention.probe import EnvironmentProbe, parse_sink_inputs, parse_window_list

from conftest import FakeRunner


WMCTRL_OUTPUT = """\
0x02600003  0 1234   xfce4-panel.Xfce4-panel  laptop xfce4-panel
0x04000007  0 5678   Navigator.Firefox     laptop Mozilla Firefox
0x05200004  0 9012   gl.mpv                laptop Big Buck Bunny.mkv - mpv
0x05400001 -1 0      N/A                   laptop
"""

XPROP_FULLSCREEN = """\
_NET_WM_USER_TIME(CARDINAL) = 163371
_NET_WM_STATE(ATOM) = _NET_WM_STATE_FULLSCREEN
WM_CLASS(STRING) = "gl", "mpv"
"""

XPROP_MAXIMIZED = """\
_NET_WM_STATE(ATOM) = _NET_WM_STATE_MAXIMIZED_VERT, _NET_WM_STATE_MAXIMIZED_HORZ
_NET_WM_ALLOWED_ACTIONS(ATOM) = _NET_WM_ACTION_FULLSCREEN, _NET_WM_ACTION_CLOSE
"""

PACTL_OUTPUT = """\
Sink Input #51
	Driver: protocol-native.c
	Owner Module: 10
	Client: 48
	Sink: 0
	Corked: no
	Mute: no
	Properties:
		media.name = "AudioStream"
		application.name = "Firefox"
		application.process.binary = "firefox"
		stream.is-live = "true"

Sink Input #52
	Corked: yes
	Properties:
		application.name = "mpv Media Player"
		application.process.binary = "mpv"
		stream.is-live = "true"

Sink Input #53
	Corked: no
	Properties:
		application.name = "Spotify"
		stream.is-live = "false"
"""


def make_probe(**outputs):
    runner = FakeRunner(outputs=outputs)
    return EnvironmentProbe(runner=runner, sleep=lambda seconds: None), runner


def test_parse_window_list():
    windows = parse_window_list(WMCTRL_OUTPUT)

    assert [w.window_id for w in windows] == ['0x02600003', '0x04000007', '0x05200004', '0x05400001']
    firefox = windows[1]
    assert firefox.pid == 5678
    assert firefox.identity == 'Navigator.Firefox Mozilla Firefox'


def test_parse_window_list_skips_garbage():
    assert parse_window_list("not a window line\n\n0xabc 0 notapid cls host title") == []


@pytest.mark.parametrize('app', ['firefox', 'Firefox', 'FIREFOX', 'fox'])
def test_window_exists_is_case_insensitive(app):
    probe, _ = make_probe(wmctrl=WMCTRL_OUTPUT)
    assert probe.window_exists(app, 5678)


def test_window_exists_requires_matching_pid():
    probe, runner = make_probe(wmctrl=WMCTRL_OUTPUT)

    assert not probe.window_exists('firefox', 9012)
    assert not probe.window_exists('vlc', 5678)
    assert runner.calls[0] == ['wmctrl', '-lpx']


def test_find_window_id_polls_until_window_appears():
    slept = []
    runner = FakeRunner(outputs={'wmctrl': ['', '0x01 0 1 term.Term host shell\n', WMCTRL_OUTPUT]})
    probe = EnvironmentProbe(runner=runner, sleep=slept.append)

    assert probe.find_window_id('MPV', 9012, interval=0.2) == '0x05200004'
    assert slept == [0.2, 0.2]


def test_find_window_id_times_out():
    now = [0.0]

    def sleep(seconds):
        now[0] += seconds

    runner = FakeRunner(outputs={'wmctrl': ''})
    probe = EnvironmentProbe(runner=runner, sleep=sleep, clock=lambda: now[0])

    with pytest.raises(ProbeFailure, match='within 1 seconds'):
        probe.find_window_id('mpv', 9012, interval=0.25, timeout=1)

    assert len(runner.calls) == 5


def test_is_fullscreen():
    probe, runner = make_probe(xprop=XPROP_FULLSCREEN)
    assert probe.is_fullscreen('0x05200004')
    assert runner.calls == [['xprop', '-id', '0x05200004']]


def test_fullscreen_action_is_not_fullscreen_state():
    probe, _ = make_probe(xprop=XPROP_MAXIMIZED)
    assert not probe.is_fullscreen('0x05200004')


def test_fullscreen_among_several_states():
    probe, _ = make_probe(xprop="_NET_WM_STATE(ATOM) = _NET_WM_STATE_ABOVE, _NET_WM_STATE_FULLSCREEN\n")
    assert probe.is_fullscreen('0x1')


def test_parse_sink_inputs():
    streams = parse_sink_inputs(PACTL_OUTPUT)

    assert [s.index for s in streams] == ['51', '52', '53']
    firefox, mpv, spotify = streams
    assert firefox.is_live and not firefox.is_corked
    assert firefox.identity == 'Firefox firefox AudioStream'
    assert mpv.is_corked
    assert not spotify.is_live


@pytest.mark.parametrize('app, playing', [
    ('firefox', True),
    ('FireFox', True),
    ('mpv', False),  # corked
    ('spotify', False),  # not live
    ('vlc', False),  # no stream
])
def test_is_playing_audio(app, playing):
    probe, runner = make_probe(pactl=PACTL_OUTPUT)
    assert probe.is_playing_audio(app) is playing
    assert runner.calls == [['pactl', 'list', 'sink-inputs']]


def test_conditions_must_hold_on_the_same_stream():
    # mpv is named, some stream is live and some stream is uncorked, but not the same one
    output = """\
Sink Input #1
	Corked: yes
	Properties:
		application.name = "mpv"
		stream.is-live = "true"
Sink Input #2
	Corked: no
	Properties:
		application.name = "other"
		stream.is-live = "true"
"""
    probe, _ = make_probe(pactl=output)
    assert not probe.is_playing_audio('mpv')


def test_query_failure_is_raised():
    runner = FakeRunner(failures={'wmctrl': 'Cannot open display.'})
    probe = EnvironmentProbe(runner=runner)

    with pytest.raises(ProbeFailure, match='Cannot open display'):
        probe.window_exists('mpv', 1)
