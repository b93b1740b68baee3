from django.core.exceptions import ValidationError
from django.views.decorators.http import require_POST
from django.http import JsonResponse
from cms.decorators import login_auth, permission_required
from core.decorators.feature_only import feature_only
from store.collections import RecordStore, UPLOAD_SCHEDULES, WORK_CATEGORIES, WORK_NOTES
from utils.payload import error_response, validation_message
from .services import board_service, schedule_service
from .services.schedule_service import SCHEDULE_FIELDS

# Create your views here.

def _saved(record, key, not_found):
    if record is None:
        return error_response(not_found, status=404)
    return JsonResponse({'status': 'success', key: record})

# === WORK FLOW ===

@login_auth
@feature_only('workFlow')
def work_flow(request):
    context = {
        'postTypes': RecordStore(WORK_CATEGORIES).load(),
        'notes': RecordStore(WORK_NOTES).load(),
        'canEdit': request.gate.has_permission('admin'),
        'canDelete': request.gate.has_permission('delete'),
    }
    return JsonResponse(context)

@require_POST
@login_auth
@feature_only('workFlow')
@permission_required('admin')
def add_post_type(request):
    try:
        post_type = board_service.add_post_type(request.POST.get('name', ''))
    except ValidationError as e:
        return error_response(validation_message(e))

    return JsonResponse({'status': 'success', 'message': 'Post Type added successfully', 'postType': post_type})

@require_POST
@login_auth
@feature_only('workFlow')
@permission_required('admin')
def edit_post_type(request, id):
    try:
        post_type = board_service.rename_post_type(id, request.POST.get('name', ''))
    except ValidationError as e:
        return error_response(validation_message(e))

    return _saved(post_type, 'postType', 'Post Type not found')

@require_POST
@login_auth
@feature_only('workFlow')
@permission_required('admin')
def delete_post_type(request, id):
    board_service.delete_post_type(id)
    return JsonResponse({'status': 'success', 'message': 'Post Type deleted successfully'})

@require_POST
@login_auth
@feature_only('workFlow')
@permission_required('admin')
def add_job(request, post_type_id):
    try:
        post_type = board_service.add_job(post_type_id, request.POST.get('name', ''))
    except ValidationError as e:
        return error_response(validation_message(e))

    return _saved(post_type, 'postType', 'Post Type not found')

@require_POST
@login_auth
@feature_only('workFlow')
@permission_required('admin')
def edit_job(request, post_type_id, job_id):
    try:
        post_type = board_service.rename_job(post_type_id, job_id, request.POST.get('name', ''))
    except ValidationError as e:
        return error_response(validation_message(e))

    return _saved(post_type, 'postType', 'Post Type not found')

@require_POST
@login_auth
@feature_only('workFlow')
@permission_required('admin')
def delete_job(request, post_type_id, job_id):
    post_type = board_service.delete_job(post_type_id, job_id)
    return JsonResponse({'status': 'success', 'message': 'Job deleted successfully', 'postType': post_type})

@require_POST
@login_auth
@feature_only('workFlow')
def add_note(request):
    try:
        note = board_service.add_note(
            request.POST.get('to', ''),
            request.POST.get('message', ''),
            request.gate.user['id'],
        )
    except ValidationError as e:
        return error_response(validation_message(e))

    return JsonResponse({'status': 'success', 'message': 'Note added successfully', 'note': note})

@require_POST
@login_auth
@feature_only('workFlow')
def edit_note(request, id):
    try:
        note = board_service.update_note(id, request.POST.get('to', ''), request.POST.get('message', ''))
    except ValidationError as e:
        return error_response(validation_message(e))

    return _saved(note, 'note', 'Note not found')

@require_POST
@login_auth
@feature_only('workFlow')
@permission_required('delete')
def delete_note(request, id):
    board_service.delete_note(id)
    return JsonResponse({'status': 'success', 'message': 'Note deleted successfully'})

# === VIDEO UPLOAD TIME ===

@login_auth
@feature_only('videoUploadTime')
def upload_schedules(request):
    return JsonResponse({
        'schedules': RecordStore(UPLOAD_SCHEDULES).load(),
        'canEdit': request.gate.has_permission('admin'),
    })

@require_POST
@login_auth
@feature_only('videoUploadTime')
@permission_required('admin')
def add_schedule(request):
    try:
        schedule = schedule_service.add_schedule({f: request.POST.get(f, '') for f in SCHEDULE_FIELDS})
    except ValidationError as e:
        return error_response(validation_message(e))

    return JsonResponse({'status': 'success', 'message': 'Upload schedule added successfully', 'schedule': schedule})

@require_POST
@login_auth
@feature_only('videoUploadTime')
@permission_required('admin')
def edit_schedule(request, id):
    try:
        schedule = schedule_service.update_schedule(id, {f: request.POST.get(f, '') for f in SCHEDULE_FIELDS})
    except ValidationError as e:
        return error_response(validation_message(e))

    return _saved(schedule, 'schedule', 'Upload schedule not found')

@require_POST
@login_auth
@feature_only('videoUploadTime')
@permission_required('admin')
def delete_schedule(request, id):
    schedule_service.delete_schedule(id)
    return JsonResponse({'status': 'success', 'message': 'Upload schedule deleted successfully'})
