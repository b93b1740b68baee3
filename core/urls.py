from django.urls import path, include

urlpatterns = [
    path('', include('cms.urls')),
    path('', include('performance.urls')),
    path('', include('staff.urls')),
    path('voice-artist/', include('voice.urls')),
    path('', include('workflow.urls')),
]
