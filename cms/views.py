from django.core.exceptions import ValidationError
from django.views.decorators.http import require_POST
from django.shortcuts import redirect
from django.http import JsonResponse
from django.contrib import messages
from utils.payload import error_response, validation_message
from .services import admin_service
from .services.navigation import visible_tabs
from .decorators import *

# Create your views here.

def login(request):
    if request.method == 'POST':
        user_id = request.POST.get('userId', '').strip()
        password = request.POST.get('password', '')

        if not user_id or not password:
            return error_response('User ID and password are required')

        if not request.gate.login(user_id, password):
            return error_response('Invalid User ID or Password', status=401)

        return JsonResponse({
            'status': 'success',
            'user': request.gate.user,
            'redirect': '/',
        })

    return JsonResponse({
        'authenticated': request.gate.is_authenticated,
        'user': request.gate.user,
    })

def logout(request):
    request.gate.logout()
    return redirect('/login/')

def session_info(request):
    gate = request.gate

    return JsonResponse({
        'authenticated': gate.is_authenticated,
        'user': gate.user,
        'role': gate.role,
        'permissions': {
            name: gate.has_permission(name) for name in ('add', 'edit', 'delete', 'admin')
        },
    })

@login_auth
def navigation(request):
    return JsonResponse({'tabs': visible_tabs(request.gate.role, request.features)})

@login_auth
@admin_required
def admin_settings(request):
    context = {
        'settings': admin_service.load_settings(),
        'features': admin_service.load_feature_toggles(),
        'moderators': admin_service.list_moderators(),
    }
    return JsonResponse(context)

@require_POST
@login_auth
@admin_required
def save_settings(request):
    try:
        data = admin_service.save_settings(
            request.POST.get('currentMonth', ''),
            request.POST.get('employeeOfMonthMessage', ''),
        )
    except ValidationError as e:
        return error_response(validation_message(e))

    messages.success(request, 'Admin settings have been updated successfully')
    return JsonResponse({'status': 'success', 'settings': data})

@require_POST
@login_auth
@admin_required
def change_credentials(request):
    try:
        admin_service.change_admin_credentials(
            request.POST.get('currentUserId', ''),
            request.POST.get('currentPassword', ''),
            request.POST.get('newUserId', '').strip(),
            request.POST.get('newPassword', ''),
            request.POST.get('confirmPassword', ''),
        )
    except ValidationError as e:
        return error_response(validation_message(e))

    return JsonResponse({
        'status': 'success',
        'message': 'Your new credentials are now active. Please use them for your next login.',
    })

@require_POST
@login_auth
@admin_required
def add_moderator(request):
    name = request.POST.get('name', '').strip()
    user_id = request.POST.get('userId', '').strip()
    password = request.POST.get('password', '')

    try:
        moderator = admin_service.add_moderator(name, user_id, password)
    except ValidationError as e:
        return error_response(validation_message(e))

    return JsonResponse({
        'status': 'success',
        'message': f'{name} can now log in with their credentials',
        'moderator': moderator,
    })

@require_POST
@login_auth
@admin_required
def edit_moderator(request, id):
    try:
        moderator = admin_service.update_moderator(
            id,
            request.POST.get('name', '').strip(),
            request.POST.get('userId', '').strip(),
            request.POST.get('password', ''),
        )
    except ValidationError as e:
        return error_response(validation_message(e))

    if moderator is None:
        return error_response('Moderator not found', status=404)

    return JsonResponse({'status': 'success', 'moderator': moderator})

@require_POST
@login_auth
@admin_required
def delete_moderator(request, id):
    admin_service.delete_moderator(id)
    return JsonResponse({'status': 'success'})

@require_POST
@login_auth
@admin_required
def toggle_feature(request, feature):
    enabled = request.POST.get('enabled', '').lower() in ('1', 'true', 'on', 'yes')

    try:
        toggles = admin_service.set_feature(feature, enabled)
    except ValidationError as e:
        return error_response(validation_message(e))

    return JsonResponse({'status': 'success', 'features': toggles})

@require_POST
@login_auth
@admin_required
def reset_data(request):
    data = admin_service.reset_all_data()
    return JsonResponse({
        'status': 'success',
        'message': 'All entries and settings have been cleared',
        'settings': data,
    })
