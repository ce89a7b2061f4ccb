"""
Example usage of the sound generation endpoint.
"""

import logging
import sys

from elevenlabs_rest import ElevenLabsClient
from elevenlabs_rest.sound_generation import SoundGenerationRequest


def main():
    """Main example function."""
    logging.basicConfig(level=logging.INFO)

    prompt = " ".join(sys.argv[1:]) or "Footsteps on a wooden floor, slow and heavy"

    print("=" * 70)
    print("ElevenLabs - Sound Generation")
    print("=" * 70)

    request = SoundGenerationRequest(prompt, duration_seconds=3.0, prompt_influence=0.5)
    with ElevenLabsClient() as client:
        clip = client.sound_generation.generate_sound(request)

    print(f"Prompt: {clip.text}")
    print(f"✅ Saved to {clip.cached_path}")


if __name__ == "__main__":
    main()
