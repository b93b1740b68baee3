import logging
from urllib.parse import parse_qs, urlparse

import requests
from django.conf import settings

from core.youtube import is_configured, youtube_params, youtube_session

logger = logging.getLogger(__name__)


class VideoInfoError(Exception):
    status_code = 500


class InvalidVideoUrl(VideoInfoError):
    status_code = 400


class VideoNotFound(VideoInfoError):
    status_code = 404


class YouTubeUpstreamError(VideoInfoError):
    status_code = 500


def is_youtube_link(link):
    return bool(link) and ('youtube.com' in link or 'youtu.be' in link)


def extract_video_id(url):
    try:
        parsed = urlparse(url)
    except ValueError:
        return None

    if not parsed.scheme or not parsed.netloc:
        return None

    host = parsed.hostname or ''
    if host == 'youtu.be':
        return parsed.path[1:] or None
    if 'youtube.com' in host:
        values = parse_qs(parsed.query).get('v')
        return values[0] if values else None
    return None


def fetch_video_info(url):
    if not url:
        raise InvalidVideoUrl('URL is required')
    if not isinstance(url, str):
        raise InvalidVideoUrl('Invalid YouTube URL')

    video_id = extract_video_id(url)
    if not video_id:
        raise InvalidVideoUrl('Invalid YouTube URL')

    if not is_configured():
        raise YouTubeUpstreamError('YouTube not connected')

    try:
        response = youtube_session().get(
            settings.YOUTUBE_API_URL,
            params=youtube_params(part='snippet,statistics', id=video_id),
            timeout=settings.YOUTUBE_TIMEOUT,
        )
        response.raise_for_status()
        items = response.json().get('items') or []
    except (requests.RequestException, ValueError) as e:
        logger.error("YouTube API error for %s: %s", video_id, e)
        raise YouTubeUpstreamError('Failed to fetch video information') from e

    if not items:
        raise VideoNotFound('Video not found')

    video = items[0]
    title = (video.get('snippet') or {}).get('title') or ''
    try:
        views = int((video.get('statistics') or {}).get('viewCount') or 0)
    except (TypeError, ValueError):
        views = 0

    return {'title': title, 'views': views}
