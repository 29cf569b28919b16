"""
URL 설정

프로젝트의 URL 패턴을 정의합니다.
"""
from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from django.http import JsonResponse


def health_check(request):
    """배포 플랫폼 healthcheck 엔드포인트"""
    return JsonResponse({'status': 'ok'})


# 관리자 패널 표시 이름
admin.site.site_header = f'{settings.SITE_NAME} 관리자'
admin.site.site_title = settings.SITE_NAME
admin.site.index_title = '관리 메뉴'

urlpatterns = [
    # Healthcheck
    path('health/', health_check, name='health_check'),

    # Django 관리자 (CRUD 패널)
    path('admin/', admin.site.urls),

    # 정적 페이지 (about, product, review, dashboard)
    path('', include('apps.pages.urls')),
]

handler404 = 'apps.pages.views.page_not_found'
handler500 = 'apps.pages.views.server_error'

# 개발 환경에서 정적 파일 서빙
if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)

    # Debug Toolbar
    try:
        import debug_toolbar
        urlpatterns = [
            path('__debug__/', include(debug_toolbar.urls)),
        ] + urlpatterns
    except ImportError:
        pass
