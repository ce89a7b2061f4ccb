"""
Example usage of streamed text-to-speech.

A producer thread reads PCM chunks from the API into a bounded queue while the
main thread plays them back with pydub. When playback falls behind, the
producer blocks on the full queue instead of buffering the whole clip.

Requires an API key (ELEVENLABS_API_KEY or a .elevenlabs file) and a pydub
playback backend (simpleaudio, pyaudio or ffplay).
"""

import logging
import queue
import sys
import threading

from elevenlabs_rest import ElevenLabsClient
from elevenlabs_rest.common.output_format import OutputFormat
from elevenlabs_rest.voices import ADAM


QUEUE_SIZE = 16
_DONE = object()


def produce(stream, chunks: "queue.Queue", errors: list):
    try:
        for chunk in stream:
            chunks.put(chunk)
    except Exception as e:  # reported by the consumer
        errors.append(e)
    finally:
        chunks.put(_DONE)


def main():
    """Main example function."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    text = " ".join(sys.argv[1:]) or "The quick brown fox jumps over the lazy dog."

    print("=" * 70)
    print("ElevenLabs - Streamed Text To Speech")
    print("=" * 70)

    from pydub.playback import play

    with ElevenLabsClient() as client:
        stream = client.text_to_speech.stream_text_to_speech(
            text, ADAM, output_format=OutputFormat.PCM_24000
        )
        chunks: "queue.Queue" = queue.Queue(maxsize=QUEUE_SIZE)
        errors: list = []
        producer = threading.Thread(target=produce, args=(stream, chunks, errors), daemon=True)
        producer.start()

        try:
            while True:
                chunk = chunks.get()
                if chunk is _DONE:
                    break
                print(f"  chunk {chunk.index}: {chunk.duration_seconds:.2f}s")
                play(chunk.to_segment())
        except KeyboardInterrupt:
            print("Interrupted, closing stream...")
            stream.close()
        producer.join(timeout=5)

        if errors:
            print(f"❌ Error: {errors[0]}")
            return

        if stream.result is not None:
            print(f"✅ Clip {stream.result.id} cached at {stream.result.cached_path}")


if __name__ == "__main__":
    main()
