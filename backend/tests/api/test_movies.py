import pytest
from fastapi.testclient import TestClient
from pytest_mock import MockerFixture
from sqlalchemy.exc import OperationalError

from app.core.config import settings

MOVIES_URL = f"{settings.API_V1_STR}/peliculas/"


def test_create_movie(client: TestClient) -> None:
    data = {"title": "Dune", "director": "Villeneuve", "time": 155}

    response = client.post(MOVIES_URL, json=data)

    assert response.status_code == 201
    content = response.json()
    assert isinstance(content["id"], int)
    assert content["title"] == "Dune"
    assert content["director"] == "Villeneuve"
    assert content["time"] == 155

    response = client.get(f"{MOVIES_URL}{content['id']}")

    assert response.status_code == 200
    assert response.json() == content


def test_create_movie_round_trips_every_field(client: TestClient) -> None:
    data = {
        "title": "Alien",
        "director": "Ridley Scott",
        "time": 117,
        "trailer": "https://example.com/alien/trailer",
        "posterImage": "https://example.com/alien/poster.jpg",
        "screenshot": "https://example.com/alien/still.jpg",
        "synopsis": "In space no one can hear you scream.",
        "rating": 8.5,
    }

    created = client.post(MOVIES_URL, json=data).json()
    response = client.get(f"{MOVIES_URL}{created['id']}")

    assert response.status_code == 200
    content = response.json()
    for key, value in data.items():
        assert content[key] == value


def test_create_movie_without_title(client: TestClient) -> None:
    response = client.post(MOVIES_URL, json={"director": "Nobody"})

    assert response.status_code == 400
    content = response.json()
    assert content["uri"] == MOVIES_URL
    assert "title" in content["message"]


@pytest.mark.parametrize("rating", ["NaN", "Infinity", "-Infinity"])
def test_create_movie_non_finite_rating(client: TestClient, rating: str) -> None:
    response = client.post(
        MOVIES_URL,
        content=f'{{"title": "Dune", "rating": {rating}}}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    content = response.json()
    assert set(content) == {"message", "uri"}
    assert content["uri"] == MOVIES_URL
    assert "rating" in content["message"]

    response = client.get(MOVIES_URL)

    assert response.status_code == 204


def test_read_movie_invalid_id(client: TestClient) -> None:
    response = client.get(f"{MOVIES_URL}abc")

    assert response.status_code == 400
    assert response.json() == {
        "message": "Invalid ID: 'abc'. IDs must be positive integers.",
        "uri": f"{MOVIES_URL}abc",
    }


def test_read_movie_not_found(client: TestClient) -> None:
    response = client.get(f"{MOVIES_URL}424242")

    assert response.status_code == 404
    assert response.json() == {
        "message": "Movie with ID 424242 not found.",
        "uri": f"{MOVIES_URL}424242",
    }


def test_read_movies_empty(client: TestClient) -> None:
    response = client.get(MOVIES_URL)

    assert response.status_code == 204
    assert response.content == b""


def test_read_movies(client: TestClient, movie_factory) -> None:
    movie_ids = [movie_factory().id for _ in range(3)]

    response = client.get(MOVIES_URL)

    assert response.status_code == 200
    assert [movie["id"] for movie in response.json()] == movie_ids


def test_update_movie_overwrites_all_fields(client: TestClient, movie_factory) -> None:
    movie = movie_factory(director="Somebody", rating=7.0)
    movie_id = movie.id

    response = client.put(f"{MOVIES_URL}{movie_id}", json={"title": "New title"})

    assert response.status_code == 200
    assert response.json() == {
        "id": movie_id,
        "title": "New title",
        "director": None,
        "time": None,
        "trailer": None,
        "posterImage": None,
        "screenshot": None,
        "synopsis": None,
        "rating": None,
    }
    assert client.get(f"{MOVIES_URL}{movie_id}").json()["title"] == "New title"


def test_update_movie_not_found(client: TestClient) -> None:
    response = client.put(f"{MOVIES_URL}424242", json={"title": "Ghost"})

    assert response.status_code == 404


def test_update_movie_invalid_id(client: TestClient) -> None:
    response = client.put(f"{MOVIES_URL}-3", json={"title": "Ghost"})

    assert response.status_code == 400


def test_failed_update_keeps_earlier_writes(
    client: TestClient, mocker: MockerFixture
) -> None:
    response = client.post(MOVIES_URL, json={"title": "Dune"})
    movie_id = response.json()["id"]
    mocker.patch(
        "app.crud.movie.save_movie",
        side_effect=OperationalError("UPDATE peliculas", {}, Exception("disk full")),
    )

    response = client.put(f"{MOVIES_URL}{movie_id}", json={"title": "Dune: Part Two"})

    assert response.status_code == 500
    assert response.json()["message"] == "Database error. Could not update the movie."

    response = client.get(f"{MOVIES_URL}{movie_id}")

    assert response.status_code == 200
    assert response.json()["title"] == "Dune"


def test_delete_movie(client: TestClient, movie_factory) -> None:
    movie_id = movie_factory().id

    response = client.delete(f"{MOVIES_URL}{movie_id}")

    assert response.status_code == 200
    assert response.json() == {"message": f"Movie with ID {movie_id} deleted successfully"}
    assert client.get(f"{MOVIES_URL}{movie_id}").status_code == 404


def test_delete_movie_not_found(client: TestClient, movie_factory) -> None:
    movie_id = movie_factory().id

    response = client.delete(f"{MOVIES_URL}{movie_id + 1000}")

    assert response.status_code == 404
    assert client.get(f"{MOVIES_URL}{movie_id}").status_code == 200


def test_delete_movie_with_screenings(client: TestClient, screening_factory) -> None:
    movie_id = screening_factory().movie_id

    response = client.delete(f"{MOVIES_URL}{movie_id}")

    assert response.status_code == 409
    assert client.get(f"{MOVIES_URL}{movie_id}").status_code == 200


def test_delete_movie_zero_id(client: TestClient) -> None:
    response = client.delete(f"{MOVIES_URL}0")

    assert response.status_code == 400
