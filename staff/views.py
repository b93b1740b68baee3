from django.core.exceptions import ValidationError
from django.views.decorators.http import require_POST
from django.http import JsonResponse
from django.utils import timezone
from cms.decorators import login_auth, admin_required, permission_required
from core.decorators.feature_only import feature_only
from store.collections import ATTENDANCE, EMPLOYEES, JELA_REPORTERS, RecordStore
from utils.payload import error_response, posted_fields, validation_message
from utils.records import current_month
from .services import attendance_service, directory_service

# Create your views here.

# === EMPLOYEES ===

@login_auth
@admin_required
def employees(request):
    people = RecordStore(EMPLOYEES).load()

    filtered = directory_service.search_people(
        people,
        search=request.GET.get('q', ''),
        designation=request.GET.get('designation', directory_service.ALL),
        shift=request.GET.get('shift', directory_service.ALL),
    )

    context = {
        'employees': directory_service.with_total_hours(filtered),
        'count': len(filtered),
        'total': len(people),
        'designations': directory_service.distinct(people, 'designation'),
        'shifts': directory_service.distinct(people, 'officeShift'),
    }
    return JsonResponse(context)

@require_POST
@login_auth
@admin_required
def add_employee(request):
    employee = directory_service.add_person(EMPLOYEES)
    return JsonResponse({'status': 'success', 'message': 'New employee entry created', 'employee': employee})

@require_POST
@login_auth
@admin_required
def edit_employee(request, id):
    fields = posted_fields(request, directory_service.EMPLOYEE_FIELDS)
    employee = directory_service.update_person(EMPLOYEES, id, fields)
    if employee is None:
        return error_response('Employee not found', status=404)

    return JsonResponse({'status': 'success', 'employee': directory_service.with_total_hours([employee])[0]})

@require_POST
@login_auth
@admin_required
@permission_required('delete')
def delete_employee(request, id):
    directory_service.remove_person(EMPLOYEES, id)
    return JsonResponse({'status': 'success', 'message': 'Employee record removed'})

# === JELA REPORTERS ===

@login_auth
@admin_required
def jela_reporters(request):
    people = RecordStore(JELA_REPORTERS).load()

    filtered = directory_service.search_people(
        people,
        search=request.GET.get('q', ''),
        designation=request.GET.get('designation', directory_service.ALL),
    )

    context = {
        'reporters': filtered,
        'count': len(filtered),
        'total': len(people),
        'designations': directory_service.distinct(people, 'designation'),
    }
    return JsonResponse(context)

@require_POST
@login_auth
@admin_required
def add_jela_reporter(request):
    reporter = directory_service.add_person(JELA_REPORTERS)
    return JsonResponse({'status': 'success', 'message': 'New reporter entry created', 'reporter': reporter})

@require_POST
@login_auth
@admin_required
def edit_jela_reporter(request, id):
    fields = posted_fields(request, directory_service.REPORTER_FIELDS)
    reporter = directory_service.update_person(JELA_REPORTERS, id, fields)
    if reporter is None:
        return error_response('Reporter not found', status=404)

    return JsonResponse({'status': 'success', 'reporter': reporter})

@require_POST
@login_auth
@admin_required
@permission_required('delete')
def delete_jela_reporter(request, id):
    directory_service.remove_person(JELA_REPORTERS, id)
    return JsonResponse({'status': 'success', 'message': 'Reporter record removed'})

# === ATTENDANCE ===

@login_auth
@feature_only('attendance')
def attendance(request):
    date = request.GET.get('date') or timezone.localdate().isoformat()
    employees = RecordStore(EMPLOYEES).load()
    records = RecordStore(ATTENDANCE).load()

    context = {
        'date': date,
        'statuses': list(attendance_service.STATUSES),
        'sheet': attendance_service.day_sheet(employees, records, date),
    }
    return JsonResponse(context)

@login_auth
@feature_only('attendance')
def attendance_month(request):
    month = request.GET.get('month') or current_month()

    try:
        records = attendance_service.records_for_month(RecordStore(ATTENDANCE).load(), month)
    except ValidationError as e:
        return error_response(validation_message(e))

    return JsonResponse({'month': month, 'records': records, 'count': len(records)})

@require_POST
@login_auth
@feature_only('attendance')
def update_attendance(request):
    try:
        record = attendance_service.update_attendance(
            request.POST.get('employeeId', ''),
            request.POST.get('date', ''),
            request.POST.get('field', ''),
            request.POST.get('value', '').strip(),
        )
    except ValidationError as e:
        return error_response(validation_message(e))

    return JsonResponse({'status': 'success', 'record': record})
