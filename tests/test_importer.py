import tempfile
import unittest
from pathlib import Path

from elevenlabs_rest import VoiceClip, copy_into_project
from elevenlabs_rest.voices import Voice


class TestCopyIntoProject(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp.name)
        self.cache = self.root / "cache"
        self.cache.mkdir()
        self.project = self.root / "project"
        self.voice = Voice.from_id("v1", "My: Voice")

    def tearDown(self):
        self.tmp.cleanup()

    def clip(self, clip_id, text, data=b"audio"):
        path = self.cache / f"{clip_id}.mp3"
        path.write_bytes(data)
        return VoiceClip(id=clip_id, text=text, cached_path=path, voice=self.voice)

    def test_clips_are_copied_under_voice_name(self):
        """Test synthesized clips and samples land in their directories"""
        spoken = self.clip("c1", "Hello")
        sample = self.clip("s1", "")

        paths = copy_into_project(self.project, spoken, sample)

        self.assertEqual(paths, [
            self.project / "My_ Voice" / "c1.mp3",
            self.project / "My_ Voice" / "Samples" / "s1.mp3",
        ])
        self.assertTrue(all(p.is_file() for p in paths))

    def test_existing_target_is_not_overwritten(self):
        """Test importing the same clip twice keeps the first copy"""
        clip = self.clip("c1", "Hello", b"first")
        copy_into_project(self.project, clip)

        clip.cached_path.write_bytes(b"second")
        paths = copy_into_project(self.project, clip)

        self.assertEqual(paths[0].read_bytes(), b"first")

    def test_failures_are_logged_and_skipped(self):
        """Test a clip without a cached file doesn't stop the batch"""
        missing = VoiceClip(id="gone", text="x", cached_path=self.cache / "gone.mp3", voice=self.voice)
        good = self.clip("c2", "Hi")

        with self.assertLogs("elevenlabs.importer", level="ERROR"):
            paths = copy_into_project(self.project, missing, good)

        self.assertEqual([p.name for p in paths], ["c2.mp3"])

    def test_blank_directory_does_nothing(self):
        """Test a blank project directory is logged and ignored"""
        with self.assertLogs("elevenlabs.importer", level="ERROR"):
            self.assertEqual(copy_into_project("  ", self.clip("c1", "Hello")), [])


if __name__ == "__main__":
    unittest.main()
