from typing import Generator
import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient
from faker import Faker

from main import app
from models.base import Base
from models import Customer, Template, Page, PageElement, ElementType
from db.session import get_db
from services.render_cache import MemoryRenderCache, get_render_cache

fake = Faker()

# Test database setup
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={
        "check_same_thread": False,
    },
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """Create a test database session."""
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def render_cache() -> MemoryRenderCache:
    """Fresh render cache so cached pages never leak between tests."""
    return MemoryRenderCache(ttl_seconds=60)


@pytest.fixture(scope="function")
def client(db_session: Session, render_cache: MemoryRenderCache) -> Generator[TestClient, None, None]:
    """Create a test client with database session and render cache overrides."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_render_cache] = lambda: render_cache
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_customer(db_session: Session) -> Customer:
    customer = Customer(
        name=fake.company(),
        email=f"{fake.user_name()}@acme.io",
    )
    db_session.add(customer)
    db_session.commit()
    db_session.refresh(customer)
    return customer


@pytest.fixture
def sample_template(db_session: Session) -> Template:
    template = Template(
        name="Landing",
        description=fake.sentence(),
        html_content="<h1>{{title}}</h1><p>{{description}}</p>",
        css_content="h1 { color: var(--primary); }",
    )
    db_session.add(template)
    db_session.commit()
    db_session.refresh(template)
    return template


@pytest.fixture
def sample_page(db_session: Session, sample_template: Template, sample_customer: Customer) -> Page:
    """A published page on sample_template with both elements filled in."""
    page = Page(
        template_id=sample_template.id,
        customer_id=sample_customer.id,
        name="Spring Sale",
        slug="spring-sale",
        is_published=True,
        elements=[
            PageElement(element_key="title", type=ElementType.TEXT, content="Welcome", label="Title"),
            PageElement(element_key="description", type=ElementType.TEXT, content="Big discounts", label="Description"),
        ],
    )
    db_session.add(page)
    db_session.commit()
    db_session.refresh(page)
    return page
