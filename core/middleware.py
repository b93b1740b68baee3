from django.utils.functional import SimpleLazyObject

from cms.services.admin_service import load_feature_toggles
from cms.services.auth_service import SessionGate


class SessionGateMiddleware:
    """Puts the login gate and the feature toggles on every request."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.gate = SessionGate(request.session)
        request.features = SimpleLazyObject(load_feature_toggles)
        return self.get_response(request)
