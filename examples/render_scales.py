#!/usr/bin/env python3
"""
Example: Render scales and a rule-grown melody to WAV.

This demonstrates the library API end to end - key, melody, synthesis and
WAV output - without going through the command line.

Usage:
    python examples/render_scales.py
    # Creates: examples/output/*.wav
"""

from pathlib import Path

from melody_sketch.audio import write_wav
from melody_sketch.config import SynthesisConfig
from melody_sketch.core import Key
from melody_sketch.melody import RuleSet, decode, expand
from melody_sketch.synth import render


def main() -> None:
    """Generate example WAV files."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)
    config = SynthesisConfig()

    # Example 1: C major up and down
    print("Generating c_major.wav...")
    c_major = Key.from_names("C", "major")
    write_wav(output_dir / "c_major.wav", render_tokens(c_major, "ABCDEFGHxHGFEDCBA", config))
    print(f"  Created: {output_dir / 'c_major.wav'}")

    # Example 2: F# minor, same tokens, different key
    print("\nGenerating f_sharp_minor.wav...")
    fs_minor = Key.from_names("F#", "minor")
    write_wav(output_dir / "f_sharp_minor.wav", render_tokens(fs_minor, "ABCDEFGHxHGFEDCBA", config))
    print(f"  Created: {output_dir / 'f_sharp_minor.wav'}")

    # Example 3: A melody grown from a four-note seed
    print("\nGenerating grown.wav...")
    rules = RuleSet.parse(["A->AC", "B->DD", "C->CA", "D->DB"])
    tokens = expand("ABCD", rules, 3)
    print(f"  Tokens: {tokens}")
    write_wav(output_dir / "grown.wav", render_tokens(fs_minor, tokens, config))
    print(f"  Created: {output_dir / 'grown.wav'}")

    print("\nDone! Play the WAV files with any audio player.")


def render_tokens(key: Key, tokens: str, config: SynthesisConfig):
    """Decode and render a token string with the given settings."""
    return render(
        key,
        decode(tokens),
        config.sample_rate,
        config.event_seconds,
        amplitude=config.amplitude,
        fade_ms=config.fade_ms,
    )


if __name__ == "__main__":
    main()
