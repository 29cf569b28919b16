"""
정적 페이지 뷰

각 뷰는 요청만 받아 지정된 템플릿을 그대로 렌더링합니다.
컨텍스트 데이터, 쿼리 파라미터 처리는 없습니다.
"""
from django.conf import settings
from django.http import HttpResponseServerError
from django.shortcuts import render
from django.template import loader
from django.views.decorators.http import require_safe


@require_safe
def about(request):
    """회사 소개 페이지"""
    return render(request, 'pages/about.html')


@require_safe
def product(request):
    """제품 소개 페이지"""
    return render(request, 'pages/product.html')


@require_safe
def review(request):
    """고객 후기 페이지"""
    return render(request, 'pages/review.html')


@require_safe
def dashboard(request):
    """대시보드 페이지"""
    return render(request, 'pages/dashboard.html')


# ============================================================================
# 에러 핸들러 (config.urls의 handler404 / handler500)
# ============================================================================

def page_not_found(request, exception):
    """404 페이지

    요청 경로는 django.request 로거가 WARNING으로 기록한다.
    """
    return render(request, '404.html', {'request_path': request.path}, status=404)


def server_error(request):
    """500 페이지

    컨텍스트 프로세서가 실패 원인일 수 있으므로 요청 컨텍스트 없이 렌더링한다.
    예외 자체는 django.request 로거가 기록한다.
    """
    template = loader.get_template('500.html')
    return HttpResponseServerError(template.render({'site_name': settings.SITE_NAME}))
