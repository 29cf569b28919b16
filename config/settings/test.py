"""
Django 테스트 환경 설정

pytest 실행 시 사용되는 설정입니다.
외부 서비스 없이 메모리 SQLite로 동작합니다.
"""
from .base import *

DEBUG = False

SECRET_KEY = 'django-insecure-test-only'

ALLOWED_HOSTS = ['testserver', 'localhost', '127.0.0.1']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

# 빠른 테스트를 위한 비밀번호 해셔
PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

SITE_NAME = 'Showcase'
