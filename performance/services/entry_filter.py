from performance.records import CONTRIBUTOR_FIELDS

ALL = 'all'
DEFAULT_SORT = 'date-desc'

FILTER_OPTION_FIELDS = ['scriptWriter', 'videoEditor', 'mojoReporter', 'jelaReporter']

SORTS = {
    'date-desc': (lambda e: e.get('date') or '', True),
    'date-asc': (lambda e: e.get('date') or '', False),
    'views-desc': (lambda e: e.get('views') or 0, True),
    'views-asc': (lambda e: e.get('views') or 0, False),
    'engagement-desc': (lambda e: e.get('engagement') or 0, True),
    'engagement-asc': (lambda e: e.get('engagement') or 0, False),
}


def _matches_search(entry, search):
    if not search:
        return True
    needle = search.lower()
    return needle in (entry.get('title') or '').lower() or needle in (entry.get('link') or '').lower()


def _matches_dates(entry, date_start, date_end):
    date = entry.get('date')
    # undated entries are never hidden by the range
    if not date:
        return True
    if date_start and date < date_start:
        return False
    if date_end and date > date_end:
        return False
    return True


def matches(entry, search='', date_start='', date_end='', contributors=None, content_status=ALL):
    if not _matches_search(entry, search):
        return False
    if not _matches_dates(entry, date_start, date_end):
        return False
    for field, wanted in (contributors or {}).items():
        if wanted and wanted != ALL and entry.get(field) != wanted:
            return False
    if content_status and content_status != ALL and entry.get('contentStatus') != content_status:
        return False
    return True


def sort_entries(entries, sort_by=DEFAULT_SORT):
    if sort_by not in SORTS:
        return list(entries)
    key, reverse = SORTS[sort_by]
    return sorted(entries, key=key, reverse=reverse)


def filter_entries(entries, search='', date_start='', date_end='', contributors=None,
                   content_status=ALL, sort_by=DEFAULT_SORT):
    result = [
        e for e in entries
        if matches(e, search, date_start, date_end, contributors, content_status)
    ]
    return sort_entries(result, sort_by)


def unique_values(entries, field):
    seen = []
    for entry in entries:
        value = entry.get(field)
        if value and value not in seen:
            seen.append(value)
    return seen


def filter_options(entries):
    return {field: unique_values(entries, field) for field in FILTER_OPTION_FIELDS}


def has_active_filters(search='', date_start='', date_end='', contributors=None, content_status=ALL):
    if search or date_start or date_end:
        return True
    if content_status and content_status != ALL:
        return True
    return any(v and v != ALL for v in (contributors or {}).values())


def contributors_from_query(query):
    return {field: query.get(field, ALL) for field in CONTRIBUTOR_FIELDS if field in query}
