"""
Pytest configuration and fixtures
Provides a fresh store per test, test client, and common test records
"""
import os
import sys
import pytest
from typing import Generator
from fastapi.testclient import TestClient

# Add parent directory to path to import backend modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import create_app
from core.security import create_user_token, hash_password
from models.user import User, UserType
from models.video import Category, Video
from services.aggregation import CatalogAggregator
from services.seed import seed_categories
from services.storage import MemStorage


TEST_PASSWORD = "secret123"


@pytest.fixture(scope="session")
def password_hash() -> str:
    """Password hash shared by all test users"""
    return hash_password(TEST_PASSWORD)


@pytest.fixture(scope="function")
def store() -> MemStorage:
    """
    Fresh store for each test, with the fixed categories seeded
    """
    storage = MemStorage()
    seed_categories(storage)
    return storage


@pytest.fixture
def catalog(store: MemStorage) -> CatalogAggregator:
    return CatalogAggregator(store)


@pytest.fixture(scope="function")
def client(store: MemStorage) -> Generator[TestClient, None, None]:
    """
    Create FastAPI test client bound to the test store (no demo data)
    """
    app = create_app(store=store, seed_demo=False)

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def technology(store: MemStorage) -> Category:
    return store.get_category_by_name("technology")


@pytest.fixture
def professional(store: MemStorage, password_hash: str) -> User:
    """
    Create a test professional
    """
    return store.create_user(
        email="pro@example.com",
        username="prouser",
        password=password_hash,
        name="Paula Professional",
        user_type=UserType.PROFESSIONAL,
        bio="Software engineer with ten years in industry.",
        experience=10,
        profile_image="https://example.com/paula.jpg",
    )


@pytest.fixture
def student(store: MemStorage, password_hash: str) -> User:
    """
    Create a test student
    """
    return store.create_user(
        email="student@example.com",
        username="studentuser",
        password=password_hash,
        name="Sam Student",
        user_type=UserType.STUDENT,
    )


@pytest.fixture
def other_student(store: MemStorage, password_hash: str) -> User:
    return store.create_user(
        email="other@example.com",
        username="otherstudent",
        password=password_hash,
        name="Olga Student",
        user_type=UserType.STUDENT,
    )


@pytest.fixture
def test_video(store: MemStorage, professional: User, technology: Category) -> Video:
    """
    Create a test video owned by the professional
    """
    return store.create_video(
        title="A day as a software engineer",
        description="What the job really looks like.",
        video_url="https://player.example.com/video/1",
        price=29.99,
        duration=1104,
        user_id=professional.id,
        category_id=technology.id,
    )


@pytest.fixture
def professional_headers(professional: User) -> dict:
    return get_auth_header(create_user_token(professional))


@pytest.fixture
def student_headers(student: User) -> dict:
    return get_auth_header(create_user_token(student))


# Helper functions for tests
def get_auth_header(token: str) -> dict:
    """Helper to create authorization header"""
    return {"Authorization": f"Bearer {token}"}


def create_video_in_store(store: MemStorage, owner: User, category: Category, title: str, price: float = 10.0) -> Video:
    """Helper to create a video with default fields"""
    return store.create_video(
        title=title,
        description=f"{title} description",
        video_url=f"https://player.example.com/{title.lower().replace(' ', '-')}",
        price=price,
        duration=600,
        user_id=owner.id,
        category_id=category.id,
    )


def rate(store: MemStorage, user: User, video: Video, stars: int, comment: str = None):
    """Helper to purchase and rate a video as the given student"""
    if not store.get_user_purchase_by_video_id(user.id, video.id):
        store.create_purchase(user_id=user.id, video_id=video.id, amount=video.price, payment_method="pix")
    return store.upsert_rating(user.id, video.id, stars, comment)
