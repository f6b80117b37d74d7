"""Spotify Web API URLs, paths and client defaults."""

# Spotify Web API base
SPOTIFY_API_BASE = "https://api.spotify.com/v1/"

# Spotify Web API paths, relative to the base URL
ME_PATH = "me"
ME_TRACKS_PATH = "me/tracks"
ME_ALBUMS_PATH = "me/albums"
ME_SHOWS_PATH = "me/shows"
ME_PLAYLISTS_PATH = "me/playlists"
ME_FOLLOWING_PATH = "me/following"
ME_TOP_ARTISTS_PATH = "me/top/artists"
ME_TOP_TRACKS_PATH = "me/top/tracks"
ME_LIBRARY_PATH = "me/library"
ME_LIBRARY_CONTAINS_PATH = "me/library/contains"
RECENTLY_PLAYED_PATH = "me/player/recently-played"
USERS_PATH = "users"
ALBUMS_PATH = "albums"
ARTISTS_PATH = "artists"
TRACKS_PATH = "tracks"
SHOWS_PATH = "shows"
EPISODES_PATH = "episodes"
PLAYLISTS_PATH = "playlists"
SEARCH_PATH = "search"

# Batch limits documented by the Web API
MAX_ALBUM_IDS = 20
MAX_ARTIST_IDS = 50
MAX_TRACK_IDS = 50
MAX_PLAYLIST_URIS = 100

# Client defaults
DEFAULT_REQUEST_TIMEOUT = 30.0  # seconds
DEFAULT_SERVICE_NAME = "spotify-web"
