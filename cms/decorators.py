from django.shortcuts import redirect
from django.contrib import messages
from functools import wraps

def login_auth(view_func):
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if request.gate.is_authenticated:
            return view_func(request, *args, **kwargs)
        else:
            return redirect('/login/')
    return wrapper

def admin_required(view_func):
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if not request.gate.is_admin:
            messages.error(request, "Only administrators can access this page")
            return redirect('/')
        return view_func(request, *args, **kwargs)

    return wrapper

def permission_required(permission):
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            if not request.gate.has_permission(permission):
                messages.error(request, "You do not have permission to do this")
                return redirect('/')
            return view_func(request, *args, **kwargs)
        return wrapper
    return decorator
