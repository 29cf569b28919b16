#!/usr/bin/env python
"""Django 관리 명령어 유틸리티 (runserver, migrate, collectstatic 등)."""
import os
import sys


def main():
    """관리 작업을 실행합니다."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.production')
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Django를 가져올 수 없습니다. 가상 환경을 활성화한 뒤 "
            "pip install -e . 으로 의존성을 설치하세요."
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
