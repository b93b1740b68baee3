import json

from django.http import JsonResponse


def posted_fields(request, fields):
    """Only the fields actually submitted, so updates keep everything else."""
    return {field: request.POST[field] for field in fields if field in request.POST}


def json_body(request):
    if not request.body:
        return {}
    try:
        data = json.loads(request.body)
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def error_response(message, status=400):
    return JsonResponse({'status': 'error', 'message': message}, status=status)


def validation_message(error):
    return ' '.join(error.messages)
