from functools import wraps
from django.shortcuts import redirect
from django.contrib import messages

from cms.services.admin_service import FEATURES, is_feature_enabled

def feature_only(feature):
    def decorator(view_func):
        @wraps(view_func)
        def _wrapped_view(request, *args, **kwargs):
            if not is_feature_enabled(feature, request.features):
                _, label = FEATURES[feature]
                messages.error(request, f"{label} module is disabled.")
                return redirect('/')

            return view_func(request, *args, **kwargs)

        return _wrapped_view
    return decorator
