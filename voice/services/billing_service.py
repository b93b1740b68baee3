"""Voice artists, their recorded work and the monthly bill.

A work entry's bill is fixed when it is recorded, using the artist's rate at
that moment. Later rate changes only affect new entries.
"""
import logging
from datetime import datetime

from django.core.exceptions import ValidationError

from store.collections import RecordStore, VOICE_ARTISTS, VOICE_WORK
from utils.records import is_month, new_id, now_iso, parse_int, parse_number

logger = logging.getLogger(__name__)


def parse_rate(value):
    rate = parse_number(value, label='Per minute rate')
    return 0 if rate is None else float(rate)


# === ARTISTS ===

def _clean_artist(name, phone, rate, notes):
    name = (name or '').strip()
    phone = (phone or '').strip()
    if not name or not phone:
        raise ValidationError('Please fill in name and phone number')

    return {
        'name': name,
        'phone': phone,
        'perMinuteRate': parse_rate(rate),
        'notes': (notes or '').strip(),
    }


def add_artist(name, phone, rate, notes=''):
    artist = {'id': new_id(), **_clean_artist(name, phone, rate, notes), 'createdAt': now_iso()}
    RecordStore(VOICE_ARTISTS).add(artist)
    logger.info("Voice artist %s added", artist['name'])
    return artist


def update_artist(id, name, phone, rate, notes=''):
    return RecordStore(VOICE_ARTISTS).update(id, _clean_artist(name, phone, rate, notes))


def delete_artist(id):
    return RecordStore(VOICE_ARTISTS).remove(id)


def public_artist(artist):
    """The artist as a non-admin may see it: no rate."""
    return {k: v for k, v in artist.items() if k != 'perMinuteRate'}


# === WORK ENTRIES ===

def duration_minutes(minute, second):
    return parse_int(minute) + parse_int(second) / 60


def add_work(date, title, artist_id, minute, second):
    date = (date or '').strip()
    title = (title or '').strip()
    if not date or not title or not artist_id:
        raise ValidationError('Please fill in all required fields')
    try:
        datetime.strptime(date, '%Y-%m-%d')
    except ValueError:
        raise ValidationError('Date must be in YYYY-MM-DD format')

    artist = RecordStore(VOICE_ARTISTS).get(artist_id)
    if artist is None:
        raise ValidationError('Voice artist not found')

    total = duration_minutes(minute, second)
    entry = {
        'id': new_id(),
        'date': date,
        'title': title,
        'artistId': artist['id'],
        'artistName': artist.get('name', ''),
        'minute': parse_int(minute),
        'second': parse_int(second),
        'totalMin': round(total, 2),
        'totalBill': round(total * (artist.get('perMinuteRate') or 0), 2),
        'createdAt': now_iso(),
    }
    RecordStore(VOICE_WORK).add(entry)
    return entry


def delete_work(id):
    return RecordStore(VOICE_WORK).remove(id)


# === BILL ===

def bill_report(entries, month):
    if not is_month(month):
        raise ValidationError('Month must be in YYYY-MM format')

    grouped = {}
    for entry in entries:
        if (entry.get('date') or '')[:7] != month:
            continue
        row = grouped.setdefault(entry.get('artistId'), {
            'artistId': entry.get('artistId'),
            'name': entry.get('artistName', ''),
            'totalMin': 0,
            'totalBill': 0,
        })
        row['totalMin'] += entry.get('totalMin') or 0
        row['totalBill'] += entry.get('totalBill') or 0

    rows = []
    for row in grouped.values():
        row['totalMin'] = round(row['totalMin'], 2)
        row['totalBill'] = round(row['totalBill'], 2)
        rows.append(row)

    return {
        'month': month,
        'rows': rows,
        'totalBill': round(sum(r['totalBill'] for r in rows), 2),
    }
