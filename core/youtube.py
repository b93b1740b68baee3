import requests
from django.conf import settings


def youtube_session():
    session = requests.Session()
    session.headers['Accept'] = 'application/json'

    if settings.YOUTUBE_ACCESS_TOKEN:
        session.headers['Authorization'] = f'Bearer {settings.YOUTUBE_ACCESS_TOKEN}'

    return session


def youtube_params(**params):
    if settings.YOUTUBE_API_KEY:
        params['key'] = settings.YOUTUBE_API_KEY
    return params


def is_configured():
    return bool(settings.YOUTUBE_API_KEY or settings.YOUTUBE_ACCESS_TOKEN)
