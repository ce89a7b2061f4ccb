import unittest
import uuid
from datetime import datetime, timezone

from elevenlabs_rest.common.utils import generate_guid, sanitize_path_component
from elevenlabs_rest.dubbing import DubbingProjectMetadata, DubbingResponse
from elevenlabs_rest.history import HistoryInfo, HistoryItem
from elevenlabs_rest.models import Model
from elevenlabs_rest.user import SubscriptionInfo, UserInfo
from elevenlabs_rest.voices import RACHEL, Voice, VoiceSettings


VOICE_JSON = {
    "voice_id": "21m00Tcm4TlvDq8ikWAM",
    "name": "Rachel",
    "samples": [
        {
            "sample_id": "s1",
            "file_name": "take1.mp3",
            "mime_type": "audio/mpeg",
            "size_bytes": 1024,
            "hash": "abc",
        }
    ],
    "category": "premade",
    "labels": {"accent": "american"},
    "preview_url": "https://example.com/preview.mp3",
    "settings": {
        "stability": 0.5,
        "similarity_boost": 0.75,
        "style": 0.45,
        "use_speaker_boost": True,
        "speed": 1.0,
    },
}


class TestVoiceDto(unittest.TestCase):
    def test_voice_round_trip(self):
        """Test a documented voice payload serializes back to the same JSON"""
        voice = Voice.from_dict(VOICE_JSON)

        self.assertEqual(voice.id, "21m00Tcm4TlvDq8ikWAM")
        self.assertEqual(voice.samples[0].id, "s1")
        self.assertEqual(voice.settings.stability, 0.5)
        self.assertEqual(voice.to_dict(), VOICE_JSON)

    def test_voice_settings_always_serialize_every_field(self):
        """Test default voice settings are still written out in full"""
        self.assertEqual(
            VoiceSettings().to_dict(),
            {
                "stability": 0.75,
                "similarity_boost": 0.75,
                "style": 0.45,
                "use_speaker_boost": True,
                "speed": 1.0,
            },
        )

    def test_defaults_are_omitted(self):
        """Test an id-only voice serializes to its id and name only"""
        self.assertEqual(RACHEL.to_dict(), {"voice_id": "21m00Tcm4TlvDq8ikWAM", "name": "Rachel"})
        self.assertEqual(str(RACHEL), RACHEL.id)

    def test_missing_keys_use_defaults(self):
        """Test absent keys fall back to field defaults"""
        voice = Voice.from_dict({"voice_id": "v"})
        self.assertEqual(voice.samples, [])
        self.assertIsNone(voice.settings)
        self.assertIsNone(Voice.from_dict(None))


class TestOtherDtos(unittest.TestCase):
    def test_history_item_computed_fields(self):
        """Test the history item date and text hash"""
        item = HistoryItem.from_dict(
            {"history_item_id": "h1", "voice_id": "v1", "text": "Hello", "date_unix": 1700000000}
        )
        self.assertEqual(item.date, datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc))
        self.assertEqual(item.text_hash, generate_guid("v1Hello"))
        self.assertIsInstance(item.text_hash, uuid.UUID)

    def test_history_info_round_trip(self):
        """Test nested history items survive a round trip"""
        payload = {
            "history": [{"history_item_id": "h1", "voice_id": "v1", "text": "Hi", "state": "created"}],
            "last_history_item_id": "h1",
            "has_more": True,
        }
        self.assertEqual(HistoryInfo.from_dict(payload).to_dict(), payload)

    def test_user_info_nested_subscription(self):
        """Test the subscription and its invoice are parsed"""
        info = UserInfo.from_dict(
            {
                "subscription": {
                    "tier": "creator",
                    "character_count": 100,
                    "character_limit": 1000,
                    "next_character_count_reset_unix": 0,
                    "available_models": [
                        {"model_id": "m1", "supported_languages": [{"iso_code": "en"}]}
                    ],
                    "next_invoice": {"amount_due_cents": 2200, "next_payment_attempt_unix": 60},
                },
                "is_new_user": False,
            }
        )
        subscription = info.subscription
        self.assertIsInstance(subscription, SubscriptionInfo)
        self.assertEqual(subscription.characters_remaining, 900)
        self.assertEqual(subscription.available_models[0].supported_languages[0].iso_code, "en")
        self.assertEqual(subscription.next_invoice.next_payment_attempt.minute, 1)
        self.assertEqual(subscription.next_character_count_reset.year, 1970)

    def test_model_constants(self):
        """Test predefined models and the explicit id accessor"""
        self.assertEqual(Model.MONOLINGUAL_V1.id, "eleven_monolingual_v1")
        self.assertEqual(Model.MULTILINGUAL_V1.id, "eleven_multilingual_v1")
        self.assertEqual(str(Model.MULTILINGUAL_V2), "eleven_multilingual_v2")

    def test_dubbing_metadata_local_fields_stay_local(self):
        """Test client-filled dubbing fields are never serialized"""
        metadata = DubbingProjectMetadata.from_dict(
            {"dubbing_id": "d1", "status": "dubbed", "expected_duration_seconds": 99}
        )
        self.assertEqual(metadata.expected_duration_seconds, 0.0)
        self.assertEqual(metadata.to_dict(), {"dubbing_id": "d1", "status": "dubbed"})
        self.assertEqual(DubbingResponse.from_dict({"dubbing_id": "d1"}).id, "d1")


class TestUtils(unittest.TestCase):
    def test_guid_is_deterministic(self):
        """Test the same text always maps to the same GUID"""
        self.assertEqual(generate_guid("abc"), generate_guid("abc"))
        self.assertNotEqual(generate_guid("abc"), generate_guid("abd"))

    def test_sanitize_path_component(self):
        """Test voice names are made safe for the file system"""
        self.assertEqual(sanitize_path_component("A/B:C"), "A_B_C")
        self.assertEqual(sanitize_path_component("  "), "Unnamed")
        self.assertEqual(len(sanitize_path_component("x" * 100)), 64)


if __name__ == "__main__":
    unittest.main()
