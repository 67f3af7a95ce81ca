import pytest

from primeroids.audio import TONES, synthesize_tone

@pytest.mark.parametrize("name", sorted(TONES))
def test_tone_length_and_range(name):
    waveform, start_hz, end_hz, gain, duration = TONES[name]
    samples = synthesize_tone(waveform, start_hz, end_hz, gain, duration, 22050)
    assert len(samples) == int(22050 * duration)
    peak = int(gain * 32767) + 1
    assert all(-peak <= s <= peak for s in samples)

def test_tone_fades_out():
    samples = synthesize_tone('sine', 440, 440, 0.2, 0.2, 22050)
    head = max(abs(s) for s in samples[:500])
    tail = max(abs(s) for s in samples[-500:])
    assert tail < head / 5

def test_stereo_duplicates_each_sample():
    samples = synthesize_tone('sawtooth', 150, 50, 0.2, 0.05, 22050, channels=2)
    assert len(samples) == 2 * int(22050 * 0.05)
    assert samples[0::2] == samples[1::2]
