"""Tests for building list requests from filter criteria."""

from __future__ import annotations

import pytest

from filmshelf.models.movie import MovieFilters
from filmshelf.services.movies.query import build_list_request, movie_path


class TestBuildListRequest:
    def test_no_filters_sends_no_params(self):
        request = build_list_request(MovieFilters())
        assert request.url == "/api/movies"
        assert request.params == {}

    def test_none_behaves_like_empty_filters(self):
        assert build_list_request(None).params == {}

    @pytest.mark.parametrize("blank", ["", " ", "\t  \n"])
    def test_blank_values_are_omitted(self, blank: str):
        request = build_list_request(MovieFilters(query=blank, genre=blank))
        assert "q" not in request.params
        assert "genre" not in request.params

    def test_query_only(self):
        request = build_list_request(MovieFilters(query="arrival"))
        assert request.params == {"q": "arrival"}

    def test_genre_only(self):
        request = build_list_request(MovieFilters(genre="Sci-Fi"))
        assert request.params == {"genre": "Sci-Fi"}

    def test_values_pass_through_verbatim(self):
        request = build_list_request(MovieFilters(query="  the  Matrix ", genre="Action, Drama"))
        assert request.params == {"q": "  the  Matrix ", "genre": "Action, Drama"}

    def test_base_url_is_joined(self):
        request = build_list_request(MovieFilters(), base_url="http://localhost:8000/")
        assert request.url == "http://localhost:8000/api/movies"


def test_movie_path():
    assert movie_path("65f1c2") == "/api/movies/65f1c2"
    assert movie_path(42) == "/api/movies/42"


@pytest.mark.parametrize(
    ("movie_id", "expected"),
    [("a?b", "/api/movies/a%3Fb"), ("a#b", "/api/movies/a%23b"), ("x/y", "/api/movies/x%2Fy")],
)
def test_movie_path_escapes_opaque_ids(movie_id: str, expected: str):
    assert movie_path(movie_id) == expected
