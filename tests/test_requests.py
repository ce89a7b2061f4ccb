import io
import tempfile
import unittest
from pathlib import Path

from elevenlabs_rest.common.output_format import OutputFormat
from elevenlabs_rest.dubbing import DubbingRequest, DubbingStream, media_type_for
from elevenlabs_rest.models import Model
from elevenlabs_rest.sound_generation import SoundGenerationRequest
from elevenlabs_rest.text_to_speech import TextToSpeechRequest
from elevenlabs_rest.voice_generation import Accent, Age, CreateVoiceRequest, Gender, GeneratedVoiceRequest
from elevenlabs_rest.voices import Voice, VoiceSettings


class TestSoundGenerationRequest(unittest.TestCase):
    def test_duration_range(self):
        """Test duration must stay within [0.5, 22] seconds"""
        SoundGenerationRequest("rain", duration_seconds=0.5)
        SoundGenerationRequest("rain", duration_seconds=22)
        for duration in (0.49, 22.01, -1):
            with self.assertRaises(ValueError):
                SoundGenerationRequest("rain", duration_seconds=duration)

    def test_prompt_influence_range(self):
        """Test prompt influence must stay within [0, 1]"""
        SoundGenerationRequest("rain", prompt_influence=0)
        SoundGenerationRequest("rain", prompt_influence=1)
        for influence in (-0.1, 1.1):
            with self.assertRaises(ValueError):
                SoundGenerationRequest("rain", prompt_influence=influence)

    def test_payload_omits_unset_values(self):
        """Test only the given parameters are sent"""
        self.assertEqual(SoundGenerationRequest("rain").to_dict(), {"text": "rain"})
        self.assertEqual(
            SoundGenerationRequest("rain", 3.0, 0.5).to_dict(),
            {"text": "rain", "duration_seconds": 3.0, "prompt_influence": 0.5},
        )


class TestGeneratedVoiceRequest(unittest.TestCase):
    def test_accent_strength_is_clamped(self):
        """Test accent strength 5.0 is clamped to 2.0 without raising"""
        request = GeneratedVoiceRequest("A" * 100, Gender.MALE, Accent.AMERICAN, Age.MIDDLE_AGED, accent_strength=5.0)
        self.assertEqual(request.accent_strength, 2.0)

        low = GeneratedVoiceRequest("A" * 1000, Gender.FEMALE, Accent.BRITISH, Age.YOUNG, accent_strength=0.0)
        self.assertEqual(low.accent_strength, 0.3)

    def test_non_finite_accent_strength_is_clamped(self):
        """Test NaN and infinite accent strengths still land inside [0.3, 2.0]"""
        for value, expected in [(float("nan"), 0.3), (float("inf"), 2.0), (float("-inf"), 0.3)]:
            request = GeneratedVoiceRequest("A" * 100, Gender.MALE, Accent.AMERICAN, Age.OLD, accent_strength=value)
            self.assertEqual(request.accent_strength, expected)

    def test_text_length_bounds(self):
        """Test text shorter than 100 or longer than 1000 characters is rejected"""
        with self.assertRaises(ValueError):
            GeneratedVoiceRequest("short text", Gender.MALE, Accent.AMERICAN, Age.MIDDLE_AGED)
        with self.assertRaises(ValueError):
            GeneratedVoiceRequest("A" * 99, Gender.MALE, Accent.AMERICAN, Age.MIDDLE_AGED)
        with self.assertRaises(ValueError):
            GeneratedVoiceRequest("A" * 1001, Gender.MALE, Accent.AMERICAN, Age.MIDDLE_AGED)

    def test_payload_uses_codes(self):
        """Test gender, accent and age are sent as their codes"""
        payload = GeneratedVoiceRequest("A" * 100, Gender.MALE, Accent.AMERICAN, Age.OLD).to_dict()
        self.assertEqual(payload["gender"], "male")
        self.assertEqual(payload["accent"], "american")
        self.assertEqual(payload["age"], "old")
        self.assertEqual(payload["accent_strength"], 1.0)

    def test_create_voice_request_requires_ids(self):
        """Test a voice can't be created without name and generated id"""
        with self.assertRaises(ValueError):
            CreateVoiceRequest("", "gen")
        with self.assertRaises(ValueError):
            CreateVoiceRequest("Name", " ")
        self.assertEqual(
            CreateVoiceRequest("Name", "gen").to_dict(),
            {"voice_name": "Name", "generated_voice_id": "gen"},
        )


class PipeStream(io.RawIOBase):
    """Readable raw stream that can't seek, like a pipe."""

    def __init__(self, data=b""):
        self._data = data

    def readable(self):
        return True

    def seekable(self):
        return False

    def readinto(self, buffer):
        size = min(len(buffer), len(self._data))
        buffer[:size] = self._data[:size]
        self._data = self._data[size:]
        return size


class TestDubbingStream(unittest.TestCase):
    def test_valid_stream(self):
        """Test a readable, non-empty stream with a proper media type is accepted"""
        with DubbingStream(io.BytesIO(b"data"), "clip.wav", "audio/wav") as dub:
            self.assertEqual(dub.read(), b"data")
        self.assertTrue(dub.stream.closed)

    def test_missing_arguments_raise_type_error(self):
        """Test None stream, name or media type raise TypeError"""
        with self.assertRaises(TypeError):
            DubbingStream(None, "clip.wav", "audio/wav")
        with self.assertRaises(TypeError):
            DubbingStream(io.BytesIO(b"data"), None, "audio/wav")
        with self.assertRaises(TypeError):
            DubbingStream(io.BytesIO(b"data"), "clip.wav", None)

    def test_invalid_streams_raise_value_error(self):
        """Test empty, unreadable and closed streams are rejected"""
        with self.assertRaises(ValueError):
            DubbingStream(io.BytesIO(b""), "clip.wav", "audio/wav")

        closed = io.BytesIO(b"data")
        closed.close()
        with self.assertRaises(ValueError):
            DubbingStream(closed, "clip.wav", "audio/wav")

        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "out.bin"
            with open(path, "wb") as write_only:
                write_only.write(b"data")
                with self.assertRaises(ValueError):
                    DubbingStream(write_only, "clip.wav", "audio/wav")

    def test_non_seekable_streams(self):
        """Test streams that can't seek are peeked for content instead of trusted"""
        with self.assertRaises(ValueError):
            DubbingStream(PipeStream(), "clip.wav", "audio/wav")
        with self.assertRaises(ValueError):
            DubbingStream(PipeStream(b"data"), "clip.wav", "audio/wav")
        with self.assertRaises(ValueError):
            DubbingStream(io.BufferedReader(PipeStream()), "clip.wav", "audio/wav")

        with DubbingStream(io.BufferedReader(PipeStream(b"data")), "clip.wav", "audio/wav") as dub:
            self.assertEqual(dub.read(), b"data")

    def test_invalid_name_and_media_type(self):
        """Test blank names and malformed media types are rejected"""
        for name, media_type in [
            ("  ", "audio/wav"),
            ("clip.wav", "audio"),
            ("clip.wav", "audio/wav/extra"),
            ("clip.wav", "/wav"),
            ("clip.wav", "audio/ "),
        ]:
            with self.assertRaises(ValueError):
                DubbingStream(io.BytesIO(b"data"), name, media_type)


class TestDubbingRequest(unittest.TestCase):
    def test_requires_target_language_and_source(self):
        """Test a target language and either files or a URL are required"""
        with self.assertRaises(ValueError):
            DubbingRequest(" ", source_url="https://example.com/video.mp4")
        with self.assertRaises(ValueError):
            DubbingRequest("es")

    def test_file_paths_are_opened_with_media_type(self):
        """Test paths become streams with a media type from their extension"""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "speech.mp3"
            path.write_bytes(b"ID3")
            with DubbingRequest("es", files=[path]) as request:
                dub = request.files[0]
                self.assertEqual(dub.name, "speech.mp3")
                self.assertEqual(dub.media_type, "audio/mp3")
            self.assertTrue(dub.stream.closed)

    def test_missing_file_raises(self):
        """Test a path that doesn't exist is rejected"""
        with self.assertRaises(FileNotFoundError):
            DubbingRequest("es", files=["/does/not/exist.wav"])

    def test_media_types(self):
        """Test the extension to media type table"""
        self.assertEqual(media_type_for("a.MP4"), "video/mp4")
        self.assertEqual(media_type_for("a.acc"), "audio/aac")
        self.assertEqual(media_type_for("a.xyz"), "application/octet-stream")

    def test_form_fields(self):
        """Test booleans are lowercased and unset fields skipped"""
        request = DubbingRequest(
            "es",
            source_url="https://example.com/v.mp4",
            number_of_speakers=2,
            watermark=True,
            drop_background_audio=False,
        )
        self.assertEqual(
            request.form_fields(),
            [
                ("source_url", "https://example.com/v.mp4"),
                ("target_lang", "es"),
                ("num_speakers", "2"),
                ("watermark", "true"),
                ("drop_background_audio", "false"),
            ],
        )


class TestTextToSpeechRequest(unittest.TestCase):
    def test_defaults(self):
        """Test the default model, format and voice settings"""
        settings = VoiceSettings(stability=0.2)
        voice = Voice(voice_id="v1", settings=settings)
        request = TextToSpeechRequest(voice, "Hello")

        self.assertEqual(request.model, Model.MONOLINGUAL_V1)
        self.assertEqual(request.output_format, OutputFormat.MP3_44100_128)
        self.assertIs(request.voice_settings, settings)

    def test_validation(self):
        """Test blank text and voices without id are rejected"""
        with self.assertRaises(ValueError):
            TextToSpeechRequest(Voice.from_id("v1"), "  ")
        with self.assertRaises(ValueError):
            TextToSpeechRequest(Voice(), "Hello")
        with self.assertRaises(ValueError):
            TextToSpeechRequest(None, "Hello")

    def test_payload(self):
        """Test the wire payload and query parameters"""
        request = TextToSpeechRequest(
            Voice.from_id("v1"),
            "Hello",
            voice_settings=VoiceSettings(),
            model=Model.MULTILINGUAL_V2,
            output_format="pcm_24000",
            optimize_streaming_latency=2,
            previous_text="Before.",
            previous_request_ids=["a", "b", "c", "d"],
            language_code="en",
        )
        payload = request.to_dict()

        self.assertEqual(payload["model_id"], "eleven_multilingual_v2")
        self.assertEqual(payload["previous_request_ids"], ["a", "b", "c"])
        self.assertEqual(payload["voice_settings"]["stability"], 0.75)
        self.assertNotIn("next_text", payload)
        self.assertNotIn("output_format", payload)
        self.assertEqual(request.query, {"output_format": "pcm_24000", "optimize_streaming_latency": 2})


if __name__ == "__main__":
    unittest.main()
