# tests/test_api/test_books.py
from core.sa.models import Book, BookInstance, Genre


def _book_data(author_id, **overrides):
    data = {
        "title": "The Wise Man's Fear",
        "author": str(author_id),
        "summary": "Day two of Kvothe's story.",
        "isbn": "9780756407919",
    }
    data.update(overrides)
    return data


def test_book_list(client, sample_book):
    response = client.get("/catalog/books")
    assert response.status_code == 200
    assert [book.title for book in response.context["book_list"]] == ["The Name of the Wind"]
    assert "Rothfuss, Patrick" in response.text


def test_book_detail(client, sample_book, sample_book_instance):
    response = client.get(f"/catalog/book/{sample_book.id}")
    assert response.status_code == 200
    assert response.context["title"] == "The Name of the Wind"
    assert [copy.id for copy in response.context["book_instances"]] == [sample_book_instance.id]
    assert "Fantasy" in response.text


def test_book_detail_not_found(client):
    response = client.get("/catalog/book/4242")
    assert response.status_code == 404
    assert response.context["message"] == "Book not found"


def test_book_create_form_lists_choices(client, sample_author, sample_genre):
    response = client.get("/catalog/book/create")
    assert response.status_code == 200
    assert [author.id for author in response.context["authors"]] == [sample_author.id]
    assert [genre.id for genre in response.context["genres"]] == [sample_genre.id]
    assert response.context["selected_genres"] == []


def test_book_create_with_genres(client, db_session, sample_author, sample_genre):
    horror = Genre(name="Horror")
    db_session.add(horror)
    db_session.commit()

    data = _book_data(sample_author.id)
    data["genre"] = [str(horror.id), str(sample_genre.id)]
    response = client.post("/catalog/book/create", data=data, follow_redirects=False)

    books = db_session.query(Book).all()
    assert len(books) == 1
    book = books[0]
    assert response.status_code == 303
    assert response.headers["location"] == f"/catalog/book/{book.id}"
    assert book.author_id == sample_author.id
    assert {genre.name for genre in book.genres} == {"Fantasy", "Horror"}


def test_book_create_escapes_text(client, db_session, sample_author):
    response = client.post(
        "/catalog/book/create",
        data=_book_data(sample_author.id, title="Tom & Jerry"),
        follow_redirects=False,
    )
    assert response.status_code == 303
    book = db_session.query(Book).one()
    assert book.title == "Tom &amp; Jerry"

    detail = client.get(response.headers["location"])
    assert "Tom &amp; Jerry" in detail.text
    assert "&amp;amp;" not in detail.text


def test_book_create_missing_fields_keeps_selection(client, db_session, sample_author, sample_genre):
    data = _book_data(sample_author.id, title="", summary="")
    data["genre"] = str(sample_genre.id)
    response = client.post("/catalog/book/create", data=data)

    assert response.status_code == 200
    assert response.template.name == "book_form.html"
    assert {error["param"] for error in response.context["errors"]} == {"title", "summary"}
    assert response.context["selected_author"] == str(sample_author.id)
    assert response.context["selected_genres"] == [str(sample_genre.id)]
    assert "checked" in response.text
    assert db_session.query(Book).count() == 0


def test_book_create_unknown_author(client, db_session):
    response = client.post("/catalog/book/create", data=_book_data(777))
    assert response.status_code == 200
    assert [error["msg"] for error in response.context["errors"]] == ["Author does not exist."]
    assert db_session.query(Book).count() == 0


def test_book_update_form_marks_genres(client, sample_book, sample_genre):
    response = client.get(f"/catalog/book/{sample_book.id}/update")
    assert response.status_code == 200
    assert response.context["title"] == "Update Book"
    assert response.context["selected_author"] == str(sample_book.author_id)
    assert response.context["selected_genres"] == [str(sample_genre.id)]


def test_book_update_replaces_genres(client, db_session, sample_book, sample_author):
    book_id = sample_book.id
    response = client.post(
        f"/catalog/book/{book_id}/update",
        data=_book_data(sample_author.id, title="The Name of the Wind"),
        follow_redirects=False,
    )
    assert response.status_code == 303
    assert response.headers["location"] == f"/catalog/book/{book_id}"

    db_session.expire_all()
    book = db_session.get(Book, book_id)
    assert book.summary == "Day two of Kvothe&#39;s story."
    assert book.genres == []
    assert db_session.query(Book).count() == 1


def test_book_update_not_found(client, sample_author):
    response = client.post("/catalog/book/4242/update", data=_book_data(sample_author.id))
    assert response.status_code == 404


def test_book_delete_refused_with_copies(client, db_session, sample_book, sample_book_instance):
    book_id = sample_book.id
    response = client.post(f"/catalog/book/{book_id}/delete", data={"bookid": str(book_id)})

    assert response.status_code == 200
    assert response.template.name == "book_delete.html"
    assert len(response.context["book_instances"]) == 1
    db_session.expire_all()
    assert db_session.get(Book, book_id) is not None


def test_book_delete(client, db_session, sample_book, sample_genre):
    book_id = sample_book.id
    response = client.post(
        f"/catalog/book/{book_id}/delete",
        data={"bookid": str(book_id)},
        follow_redirects=False,
    )
    assert response.status_code == 303
    assert response.headers["location"] == "/catalog/books"
    db_session.expire_all()
    assert db_session.get(Book, book_id) is None
    # The genre itself survives
    assert db_session.get(Genre, sample_genre.id) is not None


def test_book_delete_form_missing_redirects(client):
    response = client.get("/catalog/book/4242/delete", follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"] == "/catalog/books"


def test_book_delete_malformed_body_id(client, db_session, sample_book):
    response = client.post(
        f"/catalog/book/{sample_book.id}/delete",
        data={"bookid": "abc"},
        follow_redirects=False,
    )
    assert response.status_code == 303
    assert db_session.query(Book).count() == 1
    assert db_session.query(BookInstance).count() == 0


def test_book_create_oversized_author_id(client, db_session):
    response = client.post("/catalog/book/create", data=_book_data("99999999999999999999"))
    assert response.status_code == 200
    assert [error["msg"] for error in response.context["errors"]] == ["Invalid author."]
    assert db_session.query(Book).count() == 0


def test_book_create_repeated_title_rerenders_first_value(client, db_session, sample_author, sample_genre):
    data = _book_data(sample_author.id, title=["First", "Second"])
    data["genre"] = [str(sample_genre.id)]
    response = client.post("/catalog/book/create", data=data)

    assert response.status_code == 200
    assert [error["param"] for error in response.context["errors"]] == ["title"]
    assert response.context["book"]["title"] == "First"
    assert 'value="First"' in response.text
    assert "[" not in response.context["book"]["title"]
    assert response.context["selected_genres"] == [str(sample_genre.id)]
    assert db_session.query(Book).count() == 0
