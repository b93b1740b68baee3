from django.urls import path
from .views import *

urlpatterns = [
    path('employees/', employees, name='employees'),
    path('employees/add/', add_employee, name='add_employee'),
    path('employees/<str:id>/edit/', edit_employee, name='edit_employee'),
    path('employees/<str:id>/delete/', delete_employee, name='delete_employee'),

    path('jela-reporters/', jela_reporters, name='jela_reporters'),
    path('jela-reporters/add/', add_jela_reporter, name='add_jela_reporter'),
    path('jela-reporters/<str:id>/edit/', edit_jela_reporter, name='edit_jela_reporter'),
    path('jela-reporters/<str:id>/delete/', delete_jela_reporter, name='delete_jela_reporter'),

    path('attendance/', attendance, name='attendance'),
    path('attendance/month/', attendance_month, name='attendance_month'),
    path('attendance/update/', update_attendance, name='update_attendance'),
]
