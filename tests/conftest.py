"""Test configuration and fixtures for entityprops."""

from dotenv import load_dotenv
import pytest
from sqlalchemy import create_engine, insert
from sqlalchemy.orm import Session

from entityprops import PropertyCache, ResolverConfig, set_config
from tests.models import AuthorModel, Base, BookModel

# Try to load environment variables from .env file
load_dotenv()


@pytest.fixture(scope="session", autouse=True)
def resolver_config():
    """Pin the default resolver settings regardless of the environment."""
    config = ResolverConfig()
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture
def annotation_cache():
    """Fresh annotation cache, isolated from the process-wide one."""
    return PropertyCache('test-annotations')


@pytest.fixture(scope="function")
def engine():
    """In-memory SQLite engine with the test schema created."""
    engine = create_engine("sqlite://", future=True)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def populated_db(engine):
    with engine.begin() as conn:
        conn.execute(insert(AuthorModel), [
            {'id': 1, 'name': 'Karel Capek', 'web': None},
            {'id': 2, 'name': 'Jaroslav Hasek', 'web': 'https://example.org/hasek'},
        ])
        conn.execute(insert(BookModel), [
            {
                'id': 1, 'author_id': 1, 'book_title': 'R.U.R.', 'written': '1920',
                'available': True, 'isbn': '978-80-00-00001-1', 'tags': 'drama, robots',
            },
            {
                'id': 2, 'author_id': 2, 'book_title': 'The Good Soldier Svejk', 'written': '1923',
                'available': False, 'isbn': None, 'tags': None,
            },
        ])
    return engine


@pytest.fixture
def db_session(populated_db):
    with Session(populated_db) as session:
        yield session
