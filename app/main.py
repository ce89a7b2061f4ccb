"""FastAPI demo service for the ElevenLabs REST client."""

from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import FileResponse, JSONResponse, StreamingResponse
from pydantic import BaseModel

from elevenlabs_rest import (
    AuthenticationError,
    ElevenLabsClient,
    ElevenLabsHTTPError,
    OutputFormat,
)
from elevenlabs_rest.cache_config import get_cache_directory
from elevenlabs_rest.models import Model
from elevenlabs_rest.sound_generation import SoundGenerationRequest
from elevenlabs_rest.voices import RACHEL, Voice


logger = logging.getLogger("elevenlabs.app")

app = FastAPI(
    title="ElevenLabs REST demo",
    description="Small HTTP front for the ElevenLabs client: voices, synthesis and streaming",
    version="0.1.0",
)


class SpeechRequest(BaseModel):
    text: str
    voice_id: Optional[str] = None
    model_id: Optional[str] = None
    output_format: OutputFormat = OutputFormat.MP3_44100_128


class StreamRequest(BaseModel):
    text: str
    voice_id: Optional[str] = None
    model_id: Optional[str] = None
    output_format: OutputFormat = OutputFormat.PCM_24000


class SoundRequest(BaseModel):
    text: str
    duration_seconds: Optional[float] = None
    prompt_influence: Optional[float] = None


def get_client(request: Request) -> ElevenLabsClient:
    """One client per app, created on first use."""
    client = getattr(request.app.state, "client", None)
    if client is None:
        try:
            client = ElevenLabsClient()
        except AuthenticationError as e:
            raise HTTPException(status_code=500, detail=str(e))
        logger.info("ElevenLabs client ready: %s", client.settings.base_request_url)
        request.app.state.client = client
    return client


@app.on_event("shutdown")
async def _close_client():
    client = getattr(app.state, "client", None)
    if client is not None:
        client.close()


@app.exception_handler(ElevenLabsHTTPError)
async def _upstream_error(request: Request, exc: ElevenLabsHTTPError):
    return JSONResponse(
        status_code=502,
        content={"detail": f"ElevenLabs error: HTTP {exc.status_code}", "body": exc.body},
    )


@app.exception_handler(ValueError)
async def _validation_error(request: Request, exc: ValueError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


def _voice(voice_id: Optional[str]) -> Voice:
    return Voice.from_id(voice_id) if voice_id else RACHEL


def _model(model_id: Optional[str]) -> Optional[Model]:
    return Model(model_id) if model_id else None


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "ElevenLabs REST demo"}


@app.get("/api/voices")
def list_voices(client: ElevenLabsClient = Depends(get_client)) -> List[Dict[str, Any]]:
    return [
        {"voice_id": v.id, "name": v.name, "category": v.category, "labels": v.labels}
        for v in client.voices.get_all_voices()
    ]


@app.get("/api/models")
def list_models(client: ElevenLabsClient = Depends(get_client)) -> List[Dict[str, Any]]:
    return [m.to_dict() for m in client.models.get_models()]


@app.get("/api/subscription")
def subscription(client: ElevenLabsClient = Depends(get_client)) -> Dict[str, Any]:
    info = client.user.get_subscription_info()
    return {
        "tier": info.tier,
        "character_count": info.character_count,
        "character_limit": info.character_limit,
        "characters_remaining": info.characters_remaining,
        "next_character_count_reset": info.next_character_count_reset.isoformat(),
    }


@app.post("/api/speech")
def synthesize_speech(payload: SpeechRequest, client: ElevenLabsClient = Depends(get_client)):
    """Synthesize a clip into the cache and return where to download it."""
    clip = client.text_to_speech.text_to_speech(
        payload.text,
        _voice(payload.voice_id),
        model=_model(payload.model_id),
        output_format=payload.output_format,
    )
    voice_id = clip.voice.id
    filename = Path(clip.cached_path).name
    return {
        "status": "ok",
        "clip_id": clip.id,
        "voice_id": voice_id,
        "filename": filename,
        "audio_url": f"/api/download/{voice_id}/{filename}",
    }


@app.get("/api/download/{voice_id}/{filename}")
def download_clip(voice_id: str, filename: str, client: ElevenLabsClient = Depends(get_client)):
    """Download a synthesized clip from the cache."""
    if Path(filename).name != filename or Path(voice_id).name != voice_id:
        raise HTTPException(status_code=400, detail="Invalid path")
    file_path = get_cache_directory("TextToSpeech", voice_id, cache_root=client.cache_root) / filename
    if not file_path.exists():
        raise HTTPException(status_code=404, detail="File not found")
    media_type = "audio/wav" if file_path.suffix == ".wav" else "audio/mpeg"
    return FileResponse(path=file_path, filename=filename, media_type=media_type)


@app.post("/api/speech/stream")
def stream_speech(payload: StreamRequest, client: ElevenLabsClient = Depends(get_client)):
    """Relay streamed PCM chunks as they arrive."""
    stream = client.text_to_speech.stream_text_to_speech(
        payload.text,
        _voice(payload.voice_id),
        model=_model(payload.model_id),
        output_format=payload.output_format,
    )

    def body():
        try:
            for chunk in stream:
                yield chunk.data
        finally:
            stream.close()

    return StreamingResponse(
        body(),
        media_type="application/octet-stream",
        headers={
            "X-Clip-Id": stream.clip_id,
            "X-Sample-Rate": str(stream.sample_rate),
        },
    )


@app.post("/api/sound")
def generate_sound(payload: SoundRequest, client: ElevenLabsClient = Depends(get_client)):
    request = SoundGenerationRequest(
        payload.text,
        duration_seconds=payload.duration_seconds,
        prompt_influence=payload.prompt_influence,
    )
    clip = client.sound_generation.generate_sound(request)
    return FileResponse(path=clip.cached_path, filename=Path(clip.cached_path).name, media_type="audio/mpeg")
