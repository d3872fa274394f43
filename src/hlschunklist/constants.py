from __future__ import annotations

# Playlist tags (RFC 8216)
EXTM3U                   = "#EXTM3U"
EXT_X_VERSION            = "#EXT-X-VERSION"
EXT_X_MEDIA_SEQUENCE     = "#EXT-X-MEDIA-SEQUENCE"
EXT_X_DISCONTINUITY_SEQ  = "#EXT-X-DISCONTINUITY-SEQUENCE"
EXT_X_PLAYLIST_TYPE      = "#EXT-X-PLAYLIST-TYPE"
EXT_X_TARGETDURATION     = "#EXT-X-TARGETDURATION"
EXT_X_INDEPENDENT_SEGS   = "#EXT-X-INDEPENDENT-SEGMENTS"
EXT_X_MAP                = "#EXT-X-MAP"
EXT_X_DISCONTINUITY      = "#EXT-X-DISCONTINUITY"
EXTINF                   = "#EXTINF"
EXT_X_ENDLIST            = "#EXT-X-ENDLIST"

M3U8_EXTENSION    = ".m3u8"
M3U8_CONTENT_TYPE = "application/vnd.apple.mpegurl"

# Defaults
DEFAULT_HLS_VERSION     = 3
DEFAULT_TARGET_DURATION = 6.0
DEFAULT_WINDOW_SIZE     = 5
DEFAULT_HTTP_TIMEOUT_S  = 10.0
FILE_MODE               = 0o644
