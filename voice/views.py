from django.core.exceptions import ValidationError
from django.views.decorators.http import require_POST
from django.http import JsonResponse
from cms.decorators import login_auth, admin_required, permission_required
from core.decorators.feature_only import feature_only
from store.collections import RecordStore, VOICE_ARTISTS, VOICE_WORK
from utils.payload import error_response, validation_message
from utils.records import current_month
from .services import billing_service

# Create your views here.

@login_auth
@feature_only('voiceArtist')
def voice_artist(request):
    artists = RecordStore(VOICE_ARTISTS).load()
    if not request.gate.is_admin:
        artists = [billing_service.public_artist(a) for a in artists]

    work = RecordStore(VOICE_WORK).load()

    context = {
        'artists': artists,
        'work': work,
        'canManageArtists': request.gate.is_admin,
        'canDelete': request.gate.has_permission('delete'),
    }
    return JsonResponse(context)

@require_POST
@login_auth
@feature_only('voiceArtist')
@admin_required
def add_artist(request):
    try:
        artist = billing_service.add_artist(
            request.POST.get('name', ''),
            request.POST.get('phone', ''),
            request.POST.get('perMinuteRate', ''),
            request.POST.get('notes', ''),
        )
    except ValidationError as e:
        return error_response(validation_message(e))

    return JsonResponse({
        'status': 'success',
        'message': f"{artist['name']} has been added successfully",
        'artist': artist,
    })

@require_POST
@login_auth
@feature_only('voiceArtist')
@admin_required
def edit_artist(request, id):
    try:
        artist = billing_service.update_artist(
            id,
            request.POST.get('name', ''),
            request.POST.get('phone', ''),
            request.POST.get('perMinuteRate', ''),
            request.POST.get('notes', ''),
        )
    except ValidationError as e:
        return error_response(validation_message(e))

    if artist is None:
        return error_response('Voice artist not found', status=404)

    return JsonResponse({'status': 'success', 'message': 'Voice artist information has been updated', 'artist': artist})

@require_POST
@login_auth
@feature_only('voiceArtist')
@admin_required
def delete_artist(request, id):
    billing_service.delete_artist(id)
    return JsonResponse({'status': 'success'})

@require_POST
@login_auth
@feature_only('voiceArtist')
def add_work(request):
    try:
        entry = billing_service.add_work(
            request.POST.get('date', ''),
            request.POST.get('title', ''),
            request.POST.get('artistId', ''),
            request.POST.get('minute', ''),
            request.POST.get('second', ''),
        )
    except ValidationError as e:
        return error_response(validation_message(e))

    return JsonResponse({
        'status': 'success',
        'message': f"Entry for {entry['artistName']} has been recorded",
        'entry': entry,
    })

@require_POST
@login_auth
@feature_only('voiceArtist')
@permission_required('delete')
def delete_work(request, id):
    billing_service.delete_work(id)
    return JsonResponse({'status': 'success', 'message': 'Work entry has been removed'})

@login_auth
@feature_only('voiceArtist')
@admin_required
def bill(request):
    month = request.GET.get('month') or current_month()

    try:
        report = billing_service.bill_report(RecordStore(VOICE_WORK).load(), month)
    except ValidationError as e:
        return error_response(validation_message(e))

    return JsonResponse(report)
