#!/usr/bin/env python
"""
환경변수 기반 superuser 자동 생성 스크립트

관리자 패널(/admin/) 첫 로그인 계정을 배포 시점에 만듭니다.
환경변수가 없으면 아무것도 하지 않고 정상 종료합니다.
"""
import logging
import os
import sys

# 프로젝트 루트를 Python 경로에 추가
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, BASE_DIR)

logger = logging.getLogger(__name__)


def ensure_superuser(username, email, password):
    """superuser가 없으면 생성한다.

    Args:
        username: 로그인 아이디
        email: 이메일 주소
        password: 비밀번호

    Returns:
        bool: 새로 생성했으면 True
    """
    from django.contrib.auth import get_user_model

    User = get_user_model()

    if not username or not password:
        logger.warning('DJANGO_SUPERUSER_USERNAME과 DJANGO_SUPERUSER_PASSWORD가 설정되지 않았습니다.')
        return False

    if User.objects.filter(username=username).exists():
        logger.info('Superuser %s already exists', username)
        return False

    User.objects.create_superuser(username=username, email=email or '', password=password)
    logger.info('Superuser %s created successfully', username)
    return True


def main():
    import django

    # Django 설정 로드
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.production')
    django.setup()

    ensure_superuser(
        os.environ.get('DJANGO_SUPERUSER_USERNAME'),
        os.environ.get('DJANGO_SUPERUSER_EMAIL'),
        os.environ.get('DJANGO_SUPERUSER_PASSWORD'),
    )


if __name__ == '__main__':
    main()
