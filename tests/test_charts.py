"""
Tests for the Altair chart builders.
Run: pytest tests/test_charts.py
"""

from src.charts import (
	genre_bar_chart,
	movie_info_rows,
	movie_option_labels,
	scatter_chart,
	timeline_chart,
	to_vega_spec,
	top_movies_chart,
)
from src.models import Movie
from src.sample_data import SampleGenerator


def mark_type(spec):
	mark = spec['mark']
	return mark['type'] if isinstance(mark, dict) else mark


def chart_rows(spec):
	# Inline data ends up in the top-level "datasets" mapping
	return list(spec['datasets'].values())[0]


def movie(name, genre, box_office, year=2000, imdb_score=None):
	return Movie(name=name, year=year, genre=genre, rating='PG', box_office=box_office, imdb_score=imdb_score)


VIEW = [
	movie('Alpha', 'Action', 100.0, 1999, 7.0),
	movie('Beta', 'Drama', 50.0, 2001, None),
	movie('A Remarkably Long Movie Title Indeed', 'Action', 30.0, 1999, 8.2),
]


def test_empty_view_builds_no_charts():
	assert genre_bar_chart([]) is None
	assert timeline_chart([]) is None
	assert scatter_chart([]) is None
	assert top_movies_chart([]) is None


def test_genre_chart_rows_sorted_by_total():
	spec = to_vega_spec(genre_bar_chart(VIEW))
	assert mark_type(spec) == 'bar'
	assert spec['encoding']['x']['field'] == 'genre'
	assert [r['genre'] for r in chart_rows(spec)] == ['Action', 'Drama']
	assert [r['total'] for r in chart_rows(spec)] == [130.0, 50.0]


def test_timeline_counts_per_year():
	spec = to_vega_spec(timeline_chart(VIEW))
	assert mark_type(spec) == 'line'
	assert chart_rows(spec) == [{'year': 1999, 'count': 2}, {'year': 2001, 'count': 1}]


def test_scatter_only_plots_scored_movies():
	spec = to_vega_spec(scatter_chart(VIEW))
	assert mark_type(spec) == 'circle'
	assert sorted(r['name'] for r in chart_rows(spec)) == ['A Remarkably Long Movie Title Indeed', 'Alpha']


def test_scatter_without_scores_is_none():
	assert scatter_chart([movie('Beta', 'Drama', 50.0)]) is None


def test_top_movies_truncates_and_orders():
	spec = to_vega_spec(top_movies_chart(VIEW, n=2))
	rows = chart_rows(spec)
	assert [r['name'] for r in rows] == ['Alpha', 'Beta']
	assert spec['title'] == 'Top 2 Movies by Box Office'

	spec = to_vega_spec(top_movies_chart(VIEW))
	assert chart_rows(spec)[-1]['display_name'] == 'A Remarkably Long Movi...'


def test_top_movies_default_is_ten():
	spec = to_vega_spec(top_movies_chart(SampleGenerator(seed=4).generate()))
	assert len(chart_rows(spec)) == 10


def test_movie_info_rows_formatting():
	m = Movie(name='Avatar', year=2009, genre='Sci-Fi', rating='PG-13', box_office=2923.71,
		budget=237.0, director='James Cameron', country='USA', runtime=162, imdb_score=7.86)
	info = dict(movie_info_rows(m))
	assert info['Box Office'] == '$2923.7M'
	assert info['Budget'] == '$237.0M'
	assert info['Runtime'] == '162 min'
	assert info['IMDB Score'] == '7.9'

	bare = dict(movie_info_rows(Movie(name='X', year=2000, genre=None, rating=None, box_office=1.0)))
	assert bare['IMDB Score'] == 'N/A'
	assert bare['Runtime'] == 'N/A'
	assert bare['Genre'] == 'N/A'


def test_option_labels_keep_duplicate_titles_apart():
	view = [
		movie('Solaris', 'Sci-Fi', 20.0, 1972),
		movie('Solaris', 'Sci-Fi', 30.0, 2002),
		Movie(name='Undated', year=None, genre=None, rating=None, box_office=1.0),
	]
	labels = movie_option_labels(view)
	assert labels == ['Solaris (1972)', 'Solaris (2002)', 'Undated']
	# the picker hands back a position, so the second duplicate resolves to its own record
	position = labels.index('Solaris (2002)')
	assert view[position].box_office == 30.0
