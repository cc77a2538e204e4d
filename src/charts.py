"""
Chart builders for the dashboard (Altair -> Vega-Lite).
Each builder takes a filtered view and returns an alt.Chart, or None when the
view has nothing to plot so the UI can show its "no data" message.
"""

# Typing helpers for clear signatures
from typing import Any, Dict, Iterable, List, Optional, Tuple  # type hints

# Third-party charting and tabular data
import altair as alt  # declarative charts
import pandas as pd  # chart data frames

# Project modules
from .aggregations import (  # reducers feeding each chart
	TOP_N,
	display_name,
	extent,
	scored_movies,
	sorted_genre_totals,
	sorted_year_counts,
	top_n_by_revenue,
)
from .models import Movie  # canonical record

alt.data_transformers.disable_max_rows()  # datasets are small; never refuse them

BAR_COLOR = '#667eea'  # bar fill
LINE_COLOR = '#764ba2'  # timeline stroke
CHART_WIDTH = 420  # pixels
CHART_HEIGHT = 300  # pixels


def to_vega_spec(chart: alt.Chart) -> Dict[str, Any]:
	"""Convert an Altair chart into a Vega-Lite spec dict (JSON-serializable)."""
	return chart.to_dict()


def genre_bar_chart(view: Iterable[Movie]) -> Optional[alt.Chart]:
	"""Total box office per genre, largest genre first."""
	rows = [
		{'genre': genre or 'Unknown', 'total': total}  # label the no-genre group
		for genre, total in sorted_genre_totals(view)
	]
	if not rows:  # empty view
		return None
	df = pd.DataFrame(rows)  # chart data
	return alt.Chart(df).mark_bar(color=BAR_COLOR).encode(
		x=alt.X('genre:N', sort=None, title='Genre', axis=alt.Axis(labelAngle=-45)),  # keep descending order
		y=alt.Y('total:Q', title='Total Box Office (Millions $)'),
		tooltip=[
			alt.Tooltip('genre:N', title='Genre'),
			alt.Tooltip('total:Q', title='Total Box Office', format='$,.1f'),
		],
	).properties(title='Box Office by Genre', width=CHART_WIDTH, height=CHART_HEIGHT)


def timeline_chart(view: Iterable[Movie]) -> Optional[alt.Chart]:
	"""Number of releases per year as a line with points."""
	counts = sorted_year_counts(view)  # ascending by year
	if not counts:  # empty view
		return None
	df = pd.DataFrame(counts, columns=['year', 'count'])  # chart data
	first, last = counts[0][0], counts[-1][0]  # x-axis domain
	return alt.Chart(df).mark_line(color=LINE_COLOR, point=True).encode(
		x=alt.X('year:Q', title='Year', scale=alt.Scale(domain=[first, last]), axis=alt.Axis(format='d')),  # no thousands separator
		y=alt.Y('count:Q', title='Number of Movies'),
		tooltip=[alt.Tooltip('year:Q', title='Year', format='d'), alt.Tooltip('count:Q', title='Movies')],
	).properties(title='Movies Released per Year', width=CHART_WIDTH, height=CHART_HEIGHT)


def scatter_chart(view: Iterable[Movie]) -> Optional[alt.Chart]:
	"""IMDB score against box office, colored by genre."""
	scored = scored_movies(view)  # only movies with a score can be placed
	if not scored:
		return None
	df = pd.DataFrame([
		{
			'name': m.name,
			'genre': m.genre or 'Unknown',
			'imdb_score': m.imdb_score,
			'box_office': m.box_office,
		}
		for m in scored
	])
	x_min, x_max = extent(scored, 'imdb_score')  # score axis bounds
	y_min, y_max = extent(scored, 'box_office')  # revenue axis bounds
	return alt.Chart(df).mark_circle(size=60, opacity=0.7).encode(
		x=alt.X('imdb_score:Q', title='IMDB Score', scale=alt.Scale(domain=[x_min, x_max], nice=True, zero=False)),
		y=alt.Y('box_office:Q', title='Box Office (Millions $)', scale=alt.Scale(domain=[y_min, y_max], nice=True, zero=False)),
		color=alt.Color('genre:N', title='Genre'),
		tooltip=[
			alt.Tooltip('name:N', title='Movie'),
			alt.Tooltip('genre:N', title='Genre'),
			alt.Tooltip('imdb_score:Q', title='IMDB Score', format='.1f'),
			alt.Tooltip('box_office:Q', title='Box Office', format='$,.1f'),
		],
	).properties(title='IMDB Score vs Box Office', width=CHART_WIDTH, height=CHART_HEIGHT)


def top_movies_chart(view: Iterable[Movie], n: int = TOP_N) -> Optional[alt.Chart]:
	"""Horizontal bars for the `n` highest-grossing movies."""
	top = top_n_by_revenue(view, n)  # highest first
	if not top:
		return None
	df = pd.DataFrame([
		{'name': m.name, 'display_name': display_name(m.name), 'box_office': m.box_office}  # short label, full name in tooltip
		for m in top
	])
	return alt.Chart(df).mark_bar(color=BAR_COLOR).encode(
		x=alt.X('box_office:Q', title='Box Office (Millions $)', scale=alt.Scale(domainMin=0)),
		y=alt.Y('display_name:N', sort=None, title=None),  # keep ranking order
		tooltip=[
			alt.Tooltip('name:N', title='Movie'),
			alt.Tooltip('box_office:Q', title='Box Office', format='$,.1f'),
		],
	).properties(title=f'Top {n} Movies by Box Office', width=CHART_WIDTH, height=CHART_HEIGHT)


def movie_option_labels(view: Iterable[Movie]) -> List[str]:
	"""One "Name (Year)" label per movie, in view order, for the detail picker."""
	return [f"{m.name} ({m.year})" if m.year is not None else m.name for m in view]


def movie_info_rows(movie: Movie) -> List[Tuple[str, str]]:
	"""Label/value pairs for the movie detail panel."""
	return [
		('Name', movie.name),
		('Year', str(movie.year) if movie.year is not None else 'N/A'),
		('Genre', movie.genre or 'N/A'),
		('Rating', movie.rating or 'N/A'),
		('Box Office', f"${movie.box_office:.1f}M"),  # millions, one decimal
		('Budget', f"${movie.budget:.1f}M"),
		('Director', movie.director or 'N/A'),
		('Country', movie.country or 'N/A'),
		('Runtime', f"{movie.runtime} min" if movie.runtime is not None else 'N/A'),
		('IMDB Score', f"{movie.imdb_score:.1f}" if movie.imdb_score else 'N/A'),
	]
