"""
Aggregation helpers used by the charts.
Every function is a pure reducer over a filtered view; an empty view gives an
empty result (or None for extents) instead of an error.
"""

# Standard libs for numeric checks and typing
import math  # finite-number checks
from typing import Dict, Iterable, List, Optional, Tuple  # type hints

# Project modules
from .models import Movie  # canonical record

TOP_N = 10  # size of the ranking chart
NAME_MAX_LENGTH = 25  # longest title shown untruncated


def genre_totals(view: Iterable[Movie]) -> Dict[Optional[str], float]:
	"""Total box office per genre, in first-seen order."""
	totals: Dict[Optional[str], float] = {}  # genre -> running sum
	for movie in view:
		totals[movie.genre] = totals.get(movie.genre, 0.0) + movie.box_office  # accumulate
	return totals


def sorted_genre_totals(view: Iterable[Movie]) -> List[Tuple[Optional[str], float]]:
	"""Genre totals, largest first (bar chart order)."""
	return sorted(genre_totals(view).items(), key=lambda item: item[1], reverse=True)  # descending by total


def year_counts(view: Iterable[Movie]) -> Dict[int, int]:
	"""Number of releases per year."""
	counts: Dict[int, int] = {}  # year -> number of movies
	for movie in view:
		if movie.year is None:  # cannot place it on the timeline
			continue
		counts[movie.year] = counts.get(movie.year, 0) + 1  # tally
	return counts


def sorted_year_counts(view: Iterable[Movie]) -> List[Tuple[int, int]]:
	"""Year counts in ascending year order (timeline order)."""
	return sorted(year_counts(view).items())  # tuples sort by year first


def top_n_by_revenue(view: Iterable[Movie], n: int = TOP_N) -> List[Movie]:
	"""The `n` highest-grossing movies, highest first. Ties keep their input order."""
	if n <= 0:  # nothing requested
		return []
	return sorted(view, key=lambda m: m.box_office, reverse=True)[:n]  # stable sort, then slice


def extent(view: Iterable[Movie], field: str) -> Optional[Tuple[float, float]]:
	"""
	(min, max) of a numeric attribute such as "year", "box_office" or "imdb_score".
	Missing values are ignored; returns None when there is nothing to measure.
	"""
	values = [getattr(m, field) for m in view]  # unknown field raises AttributeError
	values = [v for v in values if v is not None]  # skip missing
	if not values:
		return None  # empty view or all values missing
	return min(values), max(values)


def scored_movies(view: Iterable[Movie]) -> List[Movie]:
	"""Movies with a usable IMDB score (scatter plot input)."""
	return [m for m in view if m.imdb_score and math.isfinite(m.imdb_score)]  # 0 / None / NaN excluded


def distinct_values(view: Iterable[Movie], field: str) -> List[str]:
	"""Sorted distinct non-empty values of a text attribute (filter options)."""
	return sorted({getattr(m, field) for m in view if getattr(m, field)})  # set removes duplicates


def display_name(name: str, max_length: int = NAME_MAX_LENGTH) -> str:
	# "A very long movie title here" -> "A very long movie titl..."
	if len(name) > max_length:
		return name[:max_length - 3] + '...'  # keep total length at max_length
	return name
