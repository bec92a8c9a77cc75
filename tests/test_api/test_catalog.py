# tests/test_api/test_catalog.py
from core.sa.models import BookInstance, LoanStatus


def test_root_redirects_to_catalog(client):
    response = client.get("/", follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"] == "/catalog/"


def test_index_empty(client):
    response = client.get("/catalog/")
    assert response.status_code == 200
    assert response.context["data"] == {
        "book_count": 0,
        "book_instance_count": 0,
        "book_instance_available_count": 0,
        "author_count": 0,
        "genre_count": 0,
    }


def test_index_counts(client, db_session, sample_book_instance, sample_book):
    db_session.add(BookInstance(
        book=sample_book,
        imprint="Gollancz, 2017.",
        status=LoanStatus.AVAILABLE.value,
    ))
    db_session.commit()

    response = client.get("/catalog/")
    data = response.context["data"]
    assert data["book_count"] == 1
    assert data["book_instance_count"] == 2
    assert data["book_instance_available_count"] == 1
    assert data["author_count"] == 1
    assert data["genre_count"] == 1
    assert "<strong>Copies available:</strong> 1" in response.text


def test_unknown_path_renders_error_page(client):
    response = client.get("/catalog/nowhere")
    assert response.status_code == 404
    assert response.template.name == "error.html"
    assert response.context["status_code"] == 404
