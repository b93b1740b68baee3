from django.core.exceptions import ValidationError
from django.views.decorators.http import require_POST
from django.http import JsonResponse
from cms.decorators import login_auth, admin_required, permission_required
from cms.services.admin_service import load_settings
from store.collections import RecordStore, ENTRIES
from utils.payload import error_response, json_body, posted_fields, validation_message
from utils.records import current_month, is_month
from .records import CONTENT_STATUSES, EDITABLE_FIELDS, clean_changes, new_entry
from .services import entry_filter, monthly_report
from .services.youtube_service import VideoInfoError, fetch_video_info, is_youtube_link

# Create your views here.

@login_auth
def dashboard(request):
    entries = RecordStore(ENTRIES).load()

    search = request.GET.get('q', '').strip()
    date_start = request.GET.get('date_start', '')
    date_end = request.GET.get('date_end', '')
    content_status = request.GET.get('content_status', entry_filter.ALL)
    sort_by = request.GET.get('sort', entry_filter.DEFAULT_SORT)
    contributors = entry_filter.contributors_from_query(request.GET)

    filtered = entry_filter.filter_entries(
        entries,
        search=search,
        date_start=date_start,
        date_end=date_end,
        contributors=contributors,
        content_status=content_status,
        sort_by=sort_by,
    )

    context = {
        'entries': filtered,
        'count': len(filtered),
        'total': len(entries),
        'hasActiveFilters': entry_filter.has_active_filters(
            search, date_start, date_end, contributors, content_status
        ),
        'filterOptions': entry_filter.filter_options(entries),
        'contentStatuses': [{'value': k, 'label': v} for k, v in CONTENT_STATUSES],
        'canDelete': request.gate.has_permission('delete'),
    }
    return JsonResponse(context)

@require_POST
@login_auth
@permission_required('add')
def add_entry(request):
    entry = RecordStore(ENTRIES).add(new_entry(), prepend=True)
    return JsonResponse({
        'status': 'success',
        'message': 'New performance entry has been created',
        'entry': entry,
    })

@require_POST
@login_auth
@permission_required('edit')
def edit_entry(request, id):
    try:
        changes = clean_changes(posted_fields(request, EDITABLE_FIELDS))
    except ValidationError as e:
        return error_response(validation_message(e))

    entry = RecordStore(ENTRIES).update(id, changes)
    if entry is None:
        return error_response('Entry not found', status=404)

    return JsonResponse({'status': 'success', 'entry': entry})

@require_POST
@login_auth
@permission_required('edit')
def update_link(request, id):
    store = RecordStore(ENTRIES)
    link = request.POST.get('link', '').strip()

    entry = store.update(id, {'link': link})
    if entry is None:
        return error_response('Entry not found', status=404)

    if not is_youtube_link(link):
        return JsonResponse({'status': 'success', 'entry': entry})

    try:
        info = fetch_video_info(link)
    except VideoInfoError as e:
        # the link stays saved; title and views keep their previous values
        return JsonResponse({
            'status': 'warning',
            'message': f'Could not retrieve YouTube video data: {e}',
            'entry': entry,
        })

    entry = store.update(id, {'title': info['title'], 'views': info['views']})
    return JsonResponse({
        'status': 'success',
        'message': 'Title and views updated successfully',
        'entry': entry,
    })

@require_POST
@login_auth
@permission_required('delete')
def delete_entry(request, id):
    RecordStore(ENTRIES).remove(id)
    return JsonResponse({'status': 'success', 'message': 'Performance entry has been removed'})

@require_POST
@login_auth
def video_info(request):
    data = json_body(request)
    url = data.get('url') or request.POST.get('url', '')

    try:
        info = fetch_video_info(url)
    except VideoInfoError as e:
        return JsonResponse({'error': str(e)}, status=e.status_code)

    return JsonResponse(info)

@login_auth
@admin_required
def rankings(request):
    entries = RecordStore(ENTRIES).load()
    months = monthly_report.available_months(entries)
    month = request.GET.get('month') or (months[0] if months else '')

    if month and not is_month(month):
        return error_response('Month must be in YYYY-MM format')

    context = {
        'month': month,
        'monthLabel': monthly_report.month_label(month) if month else '',
        'availableMonths': months,
        'message': load_settings()['employeeOfMonthMessage'],
        'rankings': monthly_report.rankings(entries, month),
    }
    return JsonResponse(context)

@login_auth
@admin_required
def report(request):
    entries = RecordStore(ENTRIES).load()
    month = request.GET.get('month') or None

    if month and not is_month(month):
        return error_response('Month must be in YYYY-MM format')

    categories = monthly_report.monthly_report(entries, month)
    return JsonResponse({
        'month': month or current_month(),
        'hasData': bool(categories),
        'categories': categories,
    })
