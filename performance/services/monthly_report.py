"""Monthly contributor rollups for the rankings page and the monthly report.

Entries are bucketed by the month of ``createdAt`` as seen in the project
``TIME_ZONE``; both views use the same bucketing.
"""
from datetime import datetime

import pytz
from django.conf import settings
from django.utils.dateparse import parse_datetime

from utils.records import current_month

ROLE_CATEGORIES = [
    ('scriptWriter', 'Script Writer', 'স্ক্রিপ্ট লেখক'),
    ('videoEditor', 'Video Editor', 'ভিডিও এডিটর'),
    ('photoCard', 'Photo Card Maker', 'ফটো কার্ড তৈরিকারী'),
    ('websiteNews', 'Website News Reporter', 'ওয়েবসাইট নিউজ রিপোর্টার'),
    ('seo', 'SEO Specialist', 'এসইও বিশেষজ্ঞ'),
    ('voiceArtist', 'Voice Artist', 'ভয়েস আর্টিস্ট'),
    ('mojoReporter', 'Mojo Reporter', 'মোজো রিপোর্টার'),
    ('jelaReporter', 'Jela Reporter', 'জেলা রিপোর্টার'),
]

RANKING_CATEGORIES = [
    ('scriptWriter', 'Script Writer'),
    ('videoEditor', 'Video Editor'),
    ('mojoReporter', 'Mojo Reporter'),
    ('jelaReporter', 'Jela Reporter'),
]

TOP_RANKED = 2


def entry_month(created_at):
    if not created_at:
        return None
    try:
        moment = parse_datetime(created_at)
    except ValueError:
        return None
    if moment is None:
        return None
    if moment.tzinfo is None:
        moment = pytz.utc.localize(moment)
    return moment.astimezone(pytz.timezone(settings.TIME_ZONE)).strftime('%Y-%m')


def available_months(entries):
    months = {entry_month(e.get('createdAt')) for e in entries}
    months.discard(None)
    return sorted(months, reverse=True)


def entries_for_month(entries, month):
    return [e for e in entries if entry_month(e.get('createdAt')) == month]


def category_stats(entries, field):
    counts = {}
    for entry in entries:
        value = entry.get(field)
        if isinstance(value, str) and value.strip():
            counts[value] = counts.get(value, 0) + 1

    stats = [{'name': name, 'count': count} for name, count in counts.items()]
    return sorted(stats, key=lambda s: s['count'], reverse=True)


def monthly_report(entries, month=None):
    month = month or current_month()
    monthly = entries_for_month(entries, month)

    report = []
    for field, label, label_bn in ROLE_CATEGORIES:
        stats = category_stats(monthly, field)
        if not stats:
            continue
        report.append({
            'category': label,
            'categoryBengali': label_bn,
            'field': field,
            'stats': stats,
        })
    return report


def rankings(entries, month):
    monthly = entries_for_month(entries, month) if month else list(entries)

    return [
        {
            'category': label,
            'field': field,
            'ranking': category_stats(monthly, field)[:TOP_RANKED],
        }
        for field, label in RANKING_CATEGORIES
    ]


def month_label(month):
    return datetime.strptime(month + '-01', '%Y-%m-%d').strftime('%B %Y')
