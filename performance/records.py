from django.core.exceptions import ValidationError

from utils.records import new_id, now_iso, parse_number, today_iso

CONTENT_STATUSES = [
    ('writing', 'Writing Processing'),
    ('footage', 'Footage Downloading'),
    ('voiceover', 'Voice Over'),
    ('thumbnail', 'Thumbnail Make'),
    ('editing', 'Editing'),
    ('ready', 'Ready'),
    ('alldone', 'All Done'),
    ('published', 'Published'),
]
STATUS_KEYS = [key for key, _ in CONTENT_STATUSES]

CONTRIBUTOR_FIELDS = [
    'voiceArtist', 'scriptWriter', 'videoEditor', 'topicSelector', 'mojoReporter',
    'jelaReporter', 'photoCard', 'seo', 'websiteNews',
]
METRIC_FIELDS = ['views', 'reach', 'engagement']
TEXT_FIELDS = ['date', 'link', 'title'] + CONTRIBUTOR_FIELDS
EDITABLE_FIELDS = TEXT_FIELDS + METRIC_FIELDS + ['contentStatus']


def new_entry():
    entry = {'id': new_id(), 'date': today_iso()}
    entry.update({field: '' for field in ['link', 'title'] + CONTRIBUTOR_FIELDS})
    entry['contentStatus'] = 'writing'
    entry['createdAt'] = now_iso()
    return entry


def clean_changes(fields):
    """Form values -> stored values. Blank metrics become None."""
    changes = {}
    for field, value in fields.items():
        if field in METRIC_FIELDS:
            changes[field] = parse_number(value, label=field)
        elif field == 'contentStatus':
            if value not in STATUS_KEYS:
                raise ValidationError(f'Unknown content status: {value}')
            changes[field] = value
        else:
            changes[field] = (value or '').strip()
    return changes
