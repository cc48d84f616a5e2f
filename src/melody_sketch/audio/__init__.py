"""
Audio sink - WAV file output.
"""

from melody_sketch.audio.wav import WAV_SUBTYPE, read_wav, write_wav

__all__ = [
    "WAV_SUBTYPE",
    "read_wav",
    "write_wav",
]
