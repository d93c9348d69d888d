# bs_calendar/urls.py
from django.urls import path
from . import views

app_name = 'bs_calendar'

urlpatterns = [
    # /convert/bs-to-ad/?date=2072-01-12
    path('convert/bs-to-ad/', views.bs_to_ad_view, name='bs_to_ad'),

    # /convert/ad-to-bs/?date=2015-04-25
    path('convert/ad-to-bs/', views.ad_to_bs_view, name='ad_to_bs'),

    # /format-number/?value=123456&in_words=1
    path('format-number/', views.format_number_view, name='format_number'),
]
