# tests/test_api/test_genres.py
from core.sa.models import Genre


def test_genre_list_sorted(client, db_session):
    db_session.add_all([Genre(name="Poetry"), Genre(name="Fantasy")])
    db_session.commit()

    response = client.get("/catalog/genres")
    assert response.status_code == 200
    assert [genre.name for genre in response.context["genre_list"]] == ["Fantasy", "Poetry"]


def test_genre_detail(client, sample_book, sample_genre):
    response = client.get(f"/catalog/genre/{sample_genre.id}")
    assert response.status_code == 200
    assert [book.id for book in response.context["genre_books"]] == [sample_book.id]


def test_genre_detail_not_found(client):
    response = client.get("/catalog/genre/31337")
    assert response.status_code == 404
    assert response.context["message"] == "Genre not found"


def test_genre_create(client, db_session):
    response = client.post("/catalog/genre/create", data={"name": " Science Fiction "}, follow_redirects=False)

    genre = db_session.query(Genre).one()
    assert response.status_code == 303
    assert response.headers["location"] == f"/catalog/genre/{genre.id}"
    assert genre.name == "Science Fiction"


def test_genre_create_duplicate_redirects_to_existing(client, db_session, sample_genre):
    response = client.post("/catalog/genre/create", data={"name": "Fantasy"}, follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"] == f"/catalog/genre/{sample_genre.id}"
    assert db_session.query(Genre).count() == 1


def test_genre_create_too_short(client, db_session):
    response = client.post("/catalog/genre/create", data={"name": "Sf"})
    assert response.status_code == 200
    assert response.context["genre"]["name"] == "Sf"
    assert [error["msg"] for error in response.context["errors"]] == [
        "Genre name must contain at least 3 characters"
    ]
    assert db_session.query(Genre).count() == 0


def test_genre_update(client, db_session, sample_genre):
    genre_id = sample_genre.id
    response = client.post(f"/catalog/genre/{genre_id}/update", data={"name": "High Fantasy"}, follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"] == f"/catalog/genre/{genre_id}"
    db_session.refresh(sample_genre)
    assert sample_genre.name == "High Fantasy"


def test_genre_update_to_existing_name(client, db_session, sample_genre):
    poetry = Genre(name="Poetry")
    db_session.add(poetry)
    db_session.commit()

    response = client.post(f"/catalog/genre/{poetry.id}/update", data={"name": "Fantasy"})
    assert response.status_code == 200
    assert response.context["title"] == "Update Genre"
    assert [error["msg"] for error in response.context["errors"]] == ["Genre with that name already exists."]
    db_session.refresh(poetry)
    assert poetry.name == "Poetry"


def test_genre_update_not_found(client):
    response = client.post("/catalog/genre/31337/update", data={"name": "Drama"})
    assert response.status_code == 404


def test_genre_delete_refused_while_used(client, db_session, sample_book, sample_genre):
    genre_id = sample_genre.id
    response = client.post(f"/catalog/genre/{genre_id}/delete", data={"genreid": str(genre_id)})
    assert response.status_code == 200
    assert response.template.name == "genre_delete.html"
    assert [book.id for book in response.context["genre_books"]] == [sample_book.id]
    db_session.expire_all()
    assert db_session.get(Genre, genre_id) is not None


def test_genre_delete(client, db_session, sample_genre):
    genre_id = sample_genre.id
    response = client.post(
        f"/catalog/genre/{genre_id}/delete",
        data={"genreid": str(genre_id)},
        follow_redirects=False,
    )
    assert response.status_code == 303
    assert response.headers["location"] == "/catalog/genres"
    db_session.expire_all()
    assert db_session.get(Genre, genre_id) is None


def test_genre_delete_form(client, sample_genre):
    response = client.get(f"/catalog/genre/{sample_genre.id}/delete")
    assert response.status_code == 200
    assert response.context["genre_books"] == []
    assert f'value="{sample_genre.id}"' in response.text


def test_genre_update_oversized_id(client):
    assert client.get("/catalog/genre/99999999999999999999/update").status_code == 404
    response = client.post("/catalog/genre/99999999999999999999/update", data={"name": "Drama"})
    assert response.status_code == 404
