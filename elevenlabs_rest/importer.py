"""
Copy cached clips into a project directory.

Layout:
    <directory>/<voice name>/<clip id>.<ext>            synthesized clips
    <directory>/<voice name>/Samples/<sample id>.<ext>  voice samples (no text)
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union
import logging
import shutil

from tqdm import tqdm

from .common.clips import GeneratedClip, VoiceClip
from .common.utils import sanitize_path_component


logger = logging.getLogger("elevenlabs.importer")


def _target_directory(root: Path, clip: GeneratedClip) -> Path:
    voice = getattr(clip, "voice", None)
    voice_name = (voice.name or voice.voice_id) if voice is not None else "Unknown"
    directory = root / sanitize_path_component(voice_name)
    if not (clip.text or "").strip():
        directory = directory / "Samples"
    return directory


def copy_into_project(directory: Union[str, Path], *voice_clips: VoiceClip) -> List[Path]:
    """
    Copy the cached files of ``voice_clips`` under ``directory``.

    Existing targets are never overwritten. A clip that can't be copied is
    logged and skipped.

    Returns:
        Target paths that exist after the copy.
    """
    if not directory or not str(directory).strip():
        logger.error("No project directory given, nothing imported")
        return []

    root = Path(directory)
    imported: List[Path] = []

    for clip in tqdm(voice_clips, desc="Importing clips", unit="clip"):
        try:
            if clip.cached_path is None:
                raise FileNotFoundError(f"Clip {clip.id} has no cached file")
            source = Path(clip.cached_path)
            if not source.is_file():
                raise FileNotFoundError(f"Cached clip not found: {source}")

            target_dir = _target_directory(root, clip)
            target_dir.mkdir(parents=True, exist_ok=True)
            target = target_dir / f"{clip.id}{source.suffix}"

            if target.exists():
                logger.debug("%s already imported", target)
            else:
                shutil.copyfile(source, target)
                logger.info("Imported %s -> %s", source, target)
            imported.append(target)
        except OSError as exc:
            logger.error("Failed to import clip %s: %s", clip.id, exc)

    return imported
