"""
Tests for the filter engine.
Run: pytest tests/test_filters.py
"""

from src.filters import apply_filters, default_filters, normalize_filters
from src.models import ALL, FilterSpec, Movie


def movie(name, year, genre='Drama', rating='R'):
	return Movie(name=name, year=year, genre=genre, rating=rating, box_office=10.0)


DATASET = (
	movie('a', 1995, 'Action', 'PG-13'),
	movie('b', 2005, 'Drama', 'R'),
	movie('c', 2000, 'Action', 'R'),
	movie('d', 1988, 'Comedy', 'PG'),
)


def test_year_ceiling_is_inclusive():
	movies = (movie('x', 1995), movie('y', 2005), movie('z', 2000))
	spec = FilterSpec(genre=ALL, rating=ALL, max_year=2000)
	assert [m.year for m in apply_filters(movies, spec)] == [1995, 2000]


def test_unconstrained_returns_everything_in_order():
	assert apply_filters(DATASET, FilterSpec()) == DATASET
	assert apply_filters(DATASET, FilterSpec(genre=ALL, rating=ALL, max_year=ALL)) == DATASET


def test_constraints_are_conjunctive():
	spec = FilterSpec(genre='Action', rating='R')
	assert [m.name for m in apply_filters(DATASET, spec)] == ['c']

	spec = FilterSpec(genre='Action', max_year=1999)
	assert [m.name for m in apply_filters(DATASET, spec)] == ['a']


def test_filtering_is_idempotent_and_pure():
	spec = FilterSpec(rating='R')
	snapshot = tuple(DATASET)
	first = apply_filters(DATASET, spec)
	second = apply_filters(DATASET, spec)
	assert first == second
	assert apply_filters(first, spec) == first
	assert DATASET == snapshot


def test_no_match_gives_empty_view():
	assert apply_filters(DATASET, FilterSpec(genre='Western')) == ()


def test_normalize_filters_from_ui_values():
	spec = normalize_filters({'genre': 'Drama', 'rating': ' ', 'maxYear': '2001'})
	assert spec == FilterSpec(genre='Drama', rating=None, max_year=2001)

	spec = normalize_filters({'genre': ALL, 'rating': ALL, 'max_year': 'later'})
	assert spec.max_year is None
	assert spec.is_unconstrained()


def test_default_filters_use_latest_year():
	spec = default_filters(DATASET)
	assert spec == FilterSpec(genre=ALL, rating=ALL, max_year=2005)
	assert apply_filters(DATASET, spec) == DATASET
	assert default_filters([]).max_year is None
