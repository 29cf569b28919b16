"""
Django 기본 설정

모든 환경에서 공통으로 사용되는 설정입니다.
환경별 설정은 local.py, production.py, test.py에서 오버라이드합니다.
"""
import os
from pathlib import Path
import environ

# 환경 변수 로드
env = environ.Env(
    DEBUG=(bool, False),
    ALLOWED_HOSTS=(list, ['localhost', '127.0.0.1']),
)

# 프로젝트 루트 디렉토리
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# .env 파일 로드 (파일이 있을 경우만)
env_file = os.path.join(BASE_DIR, '.env')
if os.path.exists(env_file):
    environ.Env.read_env(env_file)

# 보안 키 (배포 환경에서는 환경변수로 설정 필요)
SECRET_KEY = env('SECRET_KEY', default='django-insecure-change-this-in-production')

# 디버그 모드
DEBUG = env('DEBUG')

# 허용된 호스트
ALLOWED_HOSTS = env('ALLOWED_HOSTS')

# 사이트 이름 (레이아웃, 관리자 헤더에 표시)
SITE_NAME = env('SITE_NAME', default='Showcase')


# ============================================================================
# 애플리케이션 정의
# ============================================================================

DJANGO_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
]

THIRD_PARTY_APPS = []

LOCAL_APPS = [
    'apps.pages',
]

INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + LOCAL_APPS


# ============================================================================
# 미들웨어
# ============================================================================

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]


# ============================================================================
# URL 설정
# ============================================================================

ROOT_URLCONF = 'config.urls'


# ============================================================================
# 템플릿 설정
# ============================================================================

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
                'apps.pages.context_processors.site',
            ],
        },
    },
]


# ============================================================================
# WSGI/ASGI
# ============================================================================

WSGI_APPLICATION = 'config.wsgi.application'
ASGI_APPLICATION = 'config.asgi.application'


# ============================================================================
# 데이터베이스 (관리자 패널의 사용자/세션 저장용)
# ============================================================================

DATABASES = {
    'default': env.db('DATABASE_URL', default='sqlite:///db.sqlite3'),
}


# ============================================================================
# 비밀번호 유효성 검사
# ============================================================================

AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
        'OPTIONS': {
            'min_length': 8,
        },
    },
    {
        'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator',
    },
]


# ============================================================================
# 국제화
# ============================================================================

LANGUAGE_CODE = 'ko-kr'

TIME_ZONE = env('TIME_ZONE', default='Asia/Seoul')

USE_I18N = True

USE_TZ = True


# ============================================================================
# 정적 파일 (CSS, JavaScript, Images)
# ============================================================================

STATIC_URL = '/static/'
STATICFILES_DIRS = [BASE_DIR / 'static']
STATIC_ROOT = BASE_DIR / 'staticfiles'


# ============================================================================
# 기본 기본키 필드 타입
# ============================================================================

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'
