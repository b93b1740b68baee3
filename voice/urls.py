from django.urls import path
from .views import *

urlpatterns = [
    path('', voice_artist, name='voice_artist'),

    path('artists/add/', add_artist, name='add_artist'),
    path('artists/<str:id>/edit/', edit_artist, name='edit_artist'),
    path('artists/<str:id>/delete/', delete_artist, name='delete_artist'),

    path('work/add/', add_work, name='add_work'),
    path('work/<str:id>/delete/', delete_work, name='delete_work'),

    path('bill/', bill, name='voice_bill'),
]
