"""
템플릿 컨텍스트 프로세서
"""
from django.conf import settings


def site(request):
    """모든 템플릿에 사이트 이름을 제공한다."""
    return {'site_name': settings.SITE_NAME}
