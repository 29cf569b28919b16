"""pytest 공용 fixture."""
import pytest


PAGE_ROUTES = [
    ('about', '/about', 'pages/about.html'),
    ('product', '/product', 'pages/product.html'),
    ('review', '/review', 'pages/review.html'),
    ('dashboard', '/dashboard', 'pages/dashboard.html'),
]


@pytest.fixture
def staff_user(django_user_model):
    """관리자 패널 접근이 가능한 staff 사용자"""
    return django_user_model.objects.create_user(
        username='staff', password='pass-1234', is_staff=True,
    )
