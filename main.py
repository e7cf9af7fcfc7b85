#!/usr/bin/env python3
"""
Tempo Run
Main CLI entry point for building running playlists from Spotify tracks
that match your pace.
"""

import sys
import asyncio
import argparse
import logging

from config.settings import Settings
from tempo_run.api.base_client import APIError
from tempo_run.api.spotify_client import get_authorization_url
from tempo_run.models.audio_features import EnrichedTrack
from tempo_run.models.auth_state import AuthState
from tempo_run.models.pace import PACE_OPTIONS
from tempo_run.models.playlist import PlaylistType
from tempo_run.models.seed import Seed, SeedKind, SeedSelection
from tempo_run.services.track_pipeline import TempoRunService
from tempo_run.utils.validators import resolve_min_tempo

logger = logging.getLogger("tempo_run.cli")

PLAYLIST_TYPES = {
    "discover": PlaylistType.DISCOVER,
    "my-tracks": PlaylistType.MY_TRACKS
}

def display_tracks(tracks, min_tempo):
    """Display the tracks that made it into the playlist."""
    print("\n" + "="*60)
    print(f"🏃 Your Playlist ({len(tracks)} tracks above {min_tempo:g} BPM)")
    print("="*60)

    if not tracks:
        print("Sorry. No tracks could be found. Please try again with different options.")
        return

    for i, track in enumerate(tracks, 1):
        if isinstance(track, EnrichedTrack):
            print(f"{i:2d}. {track.to_track().display_name} [{track.tempo:.0f} BPM]")
        else:
            print(f"{i:2d}. {track.display_name}")
    print("-" * 60)

def build_auth_state(args, settings: Settings) -> AuthState:
    if args.callback_url:
        return AuthState.from_callback_url(args.callback_url)

    token = args.token or settings.SPOTIFY_ACCESS_TOKEN
    settings.validate(require_token=True, access_token=token)
    return AuthState(access_token=token)

def build_seeds(args) -> SeedSelection:
    selection = SeedSelection()
    for artist_id in args.seed_artist or []:
        selection.add(Seed(id=artist_id, name=artist_id, kind=SeedKind.ARTIST))
    return selection

async def collect_tracks(service: TempoRunService, args):
    min_tempo = resolve_min_tempo(args.min_tempo, args.pace)
    playlist_type = PLAYLIST_TYPES[args.type]
    tracks = await service.get_tracks(playlist_type, min_tempo, build_seeds(args).seeds)
    display_tracks(tracks, min_tempo)
    return tracks

async def list_tracks(args):
    """List tracks for a running playlist without creating it."""
    settings = Settings()
    async with TempoRunService(settings, build_auth_state(args, settings)) as service:
        await collect_tracks(service, args)

async def create_running_playlist(args):
    """Build the track list and create the playlist on Spotify."""
    settings = Settings()
    async with TempoRunService(settings, build_auth_state(args, settings)) as service:
        tracks = await collect_tracks(service, args)
        if not tracks:
            return 1

        playlist = await service.create_playlist([track.uri for track in tracks])
        print(f"\n🎉 Created '{playlist.name}' with {playlist.track_count} tracks")
        print(f"🔗 {playlist.external_url}")
    return 0

async def list_top_artists(args):
    """List the user's top artists, usable as discover seeds."""
    settings = Settings()
    async with TempoRunService(settings, build_auth_state(args, settings)) as service:
        seeds = await service.get_seed_candidates(limit=args.limit)

    if not seeds:
        print("Couldn't fetch your top artists. Try the 'my-tracks' playlist type instead.")
        return
    for seed in seeds:
        print(f"{seed.id}  {seed.name}")

def show_paces():
    """Show pace options and the tempo each one selects."""
    for i, option in enumerate(PACE_OPTIONS, 1):
        print(f"{i}. {option.label} {'>' * i}")

def show_auth_url():
    settings = Settings()
    settings.validate(require_client_id=True)
    url = get_authorization_url(settings.SPOTIFY_CLIENT_ID, settings.SPOTIFY_REDIRECT_URI)
    print("🔐 Log in to Spotify and copy the access_token from the redirect URL:")
    print(url)

def add_session_arguments(parser):
    session_group = parser.add_mutually_exclusive_group()
    session_group.add_argument('--token', type=str, help='Spotify access token (default: SPOTIFY_ACCESS_TOKEN)')
    session_group.add_argument('--callback-url', type=str, dest='callback_url',
                               help='Redirect URL from the Spotify login, including its #access_token fragment')

def add_track_arguments(parser):
    add_session_arguments(parser)
    parser.add_argument('--type', choices=sorted(PLAYLIST_TYPES), default='my-tracks', help='Playlist type')
    pace_group = parser.add_mutually_exclusive_group()
    pace_group.add_argument('--pace', type=int, help=f'Pace option 1-{len(PACE_OPTIONS)} (see "paces")')
    pace_group.add_argument('--min-tempo', type=float, dest='min_tempo', help='Minimum tempo in BPM')
    parser.add_argument('--seed-artist', action='append', dest='seed_artist', help='Spotify artist ID (repeatable, the first 5 are used)')

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Tempo Run - running playlists matched to your pace')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('auth-url', help='Print the Spotify login URL')
    subparsers.add_parser('paces', help='List pace options')

    top_parser = subparsers.add_parser('top-artists', help='List your top artists for discover seeds')
    add_session_arguments(top_parser)
    top_parser.add_argument('--limit', type=int, default=50, help='Number of artists (default: 50)')

    tracks_parser = subparsers.add_parser('tracks', help='List matching tracks')
    add_track_arguments(tracks_parser)

    create_parser = subparsers.add_parser('create', help='Create a running playlist on Spotify')
    add_track_arguments(create_parser)

    return parser

def main(argv=None):
    """Main entry point with command line argument parsing."""
    settings = Settings()
    logging.basicConfig(level=settings.log_level, format=settings.log_format)

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == 'auth-url':
            show_auth_url()
        elif args.command == 'paces':
            show_paces()
        elif args.command == 'top-artists':
            asyncio.run(list_top_artists(args))
        elif args.command == 'tracks':
            asyncio.run(list_tracks(args))
        elif args.command == 'create':
            return asyncio.run(create_running_playlist(args))
        else:
            parser.print_help()
            return 1
    except APIError as e:
        logger.error(f"Spotify request failed: {e}")
        print(f"❌ Spotify request failed: {e}")
        return 1
    except ValueError as e:
        print(f"❌ {e}")
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
