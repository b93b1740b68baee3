from .auth_service import ADMIN
from .admin_service import is_feature_enabled

TABS = [
    {'path': '/', 'label': 'Dashboard', 'role': None, 'feature': None},
    {'path': '/voice-artist/', 'label': 'Voice Artist', 'role': None, 'feature': 'voiceArtist'},
    {'path': '/attendance/', 'label': 'Daily Attendance', 'role': None, 'feature': 'attendance'},
    {'path': '/work-flow/', 'label': 'Work Flow', 'role': None, 'feature': 'workFlow'},
    {'path': '/video-upload-time/', 'label': 'Video Upload Time', 'role': None, 'feature': 'videoUploadTime'},
    {'path': '/employees/', 'label': 'Employee Data', 'role': ADMIN, 'feature': None},
    {'path': '/jela-reporters/', 'label': 'Jela Reporter Data', 'role': ADMIN, 'feature': None},
    {'path': '/rankings/', 'label': 'Monthly Rankings', 'role': ADMIN, 'feature': None},
    {'path': '/admin/', 'label': 'Admin Settings', 'role': ADMIN, 'feature': None},
]


def visible_tabs(role, toggles):
    tabs = []
    for tab in TABS:
        if tab['role'] and role != tab['role']:
            continue
        if tab['feature'] and not is_feature_enabled(tab['feature'], toggles):
            continue
        tabs.append({'path': tab['path'], 'label': tab['label']})
    return tabs
