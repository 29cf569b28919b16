"""
정적 페이지 URL 설정

URL 이름은 네임스페이스 없이 전역으로 사용합니다. ({% url 'about' %})
기준 경로에는 끝 슬래시가 없고, 슬래시가 붙은 요청은 301로 리다이렉트합니다.
"""
from django.urls import path
from django.views.generic import RedirectView

from . import views

PAGE_NAMES = ('about', 'product', 'review', 'dashboard')

urlpatterns = [
    path('about', views.about, name='about'),
    path('product', views.product, name='product'),
    path('review', views.review, name='review'),
    path('dashboard', views.dashboard, name='dashboard'),
]

# /about/ -> /about (쿼리스트링 유지)
urlpatterns += [
    path(
        f'{name}/',
        RedirectView.as_view(pattern_name=name, permanent=True, query_string=True),
    )
    for name in PAGE_NAMES
]
