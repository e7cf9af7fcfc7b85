"""
FastAPI web application for Tempo Run
Provides REST API endpoints for building running playlists.
"""

from pydantic import BaseModel, Field
from config.settings import Settings
from fastapi import Depends, FastAPI, Header, Request
from fastapi.responses import JSONResponse
from typing import Optional, List
from fastapi.middleware.cors import CORSMiddleware

from tempo_run.api.base_client import APIError, AuthenticationError, RateLimitError
from tempo_run.models.auth_state import AuthState
from tempo_run.models.pace import PACE_OPTIONS
from tempo_run.models.playlist import PlaylistType
from tempo_run.models.seed import Seed, SeedKind, SeedSelection
from tempo_run.services.track_pipeline import TempoRunService
from tempo_run.utils.validators import resolve_min_tempo, validate_track_uris

app = FastAPI(
    title="Tempo Run API",
    description="Build running playlists from Spotify tracks matching your pace",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize settings
settings = Settings()

class SeedModel(BaseModel):
    id: str
    name: str
    kind: SeedKind = SeedKind.ARTIST

class TracksRequest(BaseModel):
    playlist_type: PlaylistType = PlaylistType.MY_TRACKS
    min_tempo: Optional[float] = None
    pace: Optional[int] = None
    seeds: List[SeedModel] = Field(default_factory=list)

class PlaylistRequest(BaseModel):
    track_uris: List[str]

@app.exception_handler(AuthenticationError)
async def authentication_error_handler(request: Request, exc: AuthenticationError):
    return JSONResponse(status_code=401, content={"detail": str(exc)})

@app.exception_handler(APIError)
async def api_error_handler(request: Request, exc: APIError):
    status_code = 429 if isinstance(exc, RateLimitError) else 502
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})

@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})

async def get_service(
    authorization: Optional[str] = Header(None),
    x_token_expires_at: Optional[str] = Header(None)
):
    """
    Open a Spotify session for the bearer token on the request.

    The optional X-Token-Expires-At header carries the token expiry as an
    ISO 8601 timestamp; expired tokens are rejected before any Spotify call.
    """
    token = None
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization[len("bearer "):].strip()
    if not token:
        raise AuthenticationError("Missing bearer token")

    auth_state = AuthState.from_expiry_timestamp(token, x_token_expires_at)
    async with TempoRunService(settings, auth_state) as service:
        yield service

@app.get("/")
async def root():
    return {"message": "Tempo Run API", "version": "1.0.0"}

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

@app.get("/pace-options")
async def get_pace_options():
    """Get the pace bands and the minimum tempo each one selects."""
    return [dict(option.to_dict(), pace=i, min_tempo=option.min_tempo) for i, option in enumerate(PACE_OPTIONS, 1)]

@app.get("/seed-candidates")
async def get_seed_candidates(service: TempoRunService = Depends(get_service)):
    """Get the user's top artists to pick discover seeds from."""
    seeds = await service.get_seed_candidates()
    return [seed.to_dict() for seed in seeds]

@app.post("/tracks")
async def get_tracks(request: TracksRequest, service: TempoRunService = Depends(get_service)):
    """Get tracks matching the running playlist options."""
    min_tempo = resolve_min_tempo(request.min_tempo, request.pace)

    selection = SeedSelection()
    for seed in request.seeds:
        selection.add(Seed.from_dict(seed.model_dump()))

    tracks = await service.get_tracks(request.playlist_type, min_tempo, selection.seeds)
    return [track.to_dict() for track in tracks]

@app.post("/playlists")
async def create_playlist(request: PlaylistRequest, service: TempoRunService = Depends(get_service)):
    """Create the running playlist on the user's account."""
    if not request.track_uris:
        raise ValueError("At least one track URI is required")

    playlist = await service.create_playlist(validate_track_uris(request.track_uris))
    return {"id": playlist.id, "name": playlist.name, "external_url": playlist.external_url}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
