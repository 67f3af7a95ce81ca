import math
from array import array

import pygame

# name: (waveform, start Hz, end Hz, start gain, seconds)
TONES = {
    'shoot': ('sine', 400, 200, 0.1, 0.1),
    'collect': ('sine', 600, 1200, 0.15, 0.15),
    'damage': ('sawtooth', 150, 50, 0.2, 0.2),
    'factorize': ('sine', 300, 150, 0.12, 0.12),
}

END_GAIN = 0.01

def synthesize_tone(waveform, start_hz, end_hz, start_gain, duration, sample_rate, channels=1):
    """ Builds signed 16-bit samples for a tone sweeping exponentially in pitch and volume. """
    count = max(1, int(sample_rate * duration))
    samples = array('h')
    phase = 0.0
    for i in range(count):
        t = i / count
        freq = start_hz * (end_hz / start_hz) ** t
        gain = start_gain * (END_GAIN / start_gain) ** t
        phase = (phase + freq / sample_rate) % 1.0
        if waveform == 'sawtooth':
            value = 2.0 * phase - 1.0
        else:
            value = math.sin(phase * math.tau)
        sample = int(value * gain * 32767)
        for _ in range(channels):
            samples.append(sample)
    return samples

class SoundBank:
    """ Fire-and-forget sound hook. Falls back to silence if the mixer is unavailable. """
    def __init__(self):
        self._sounds = {}
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=22050, size=-16, channels=1)
            sample_rate, _, channels = pygame.mixer.get_init()
            for name, (waveform, start_hz, end_hz, gain, duration) in TONES.items():
                samples = synthesize_tone(waveform, start_hz, end_hz, gain, duration, sample_rate, channels)
                self._sounds[name] = pygame.mixer.Sound(buffer=samples.tobytes())
        except pygame.error as e:
            print(f"Audio disabled: {e}")
            self._sounds = {}

    def get_sound(self, name):
        return self._sounds.get(name)

    def __call__(self, name):
        sound = self._sounds.get(name)
        if sound:
            sound.play()
