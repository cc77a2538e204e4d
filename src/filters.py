"""
Filter engine.
Applies the user's genre / rating / year-ceiling selection to the working dataset.
"""

# Typing helpers for clear signatures
from typing import Any, Iterable, Mapping, Optional, Tuple  # type hints

# Console logging
from loguru import logger  # console logger

# Project modules
from .models import ALL, FilterSpec, Movie  # sentinel + filter value + record


def _constrains(value) -> bool:
	"""True when a filter dimension actually restricts the data."""
	return value is not None and value != ALL  # None / "all" mean "anything"


def apply_filters(movies: Iterable[Movie], spec: FilterSpec) -> Tuple[Movie, ...]:
	"""
	Return the movies that satisfy every constrained dimension of `spec`.
	The input is never modified and the original order is kept.
	"""
	filtered = tuple(movies)  # fresh sequence; the working dataset stays untouched
	total = len(filtered)  # for the debug summary

	# Genre: exact match
	if _constrains(spec.genre):
		filtered = tuple(m for m in filtered if m.genre == spec.genre)

	# Rating: exact match
	if _constrains(spec.rating):
		filtered = tuple(m for m in filtered if m.rating == spec.rating)

	# Year ceiling: inclusive
	if _constrains(spec.max_year):
		filtered = tuple(m for m in filtered if m.year is not None and m.year <= spec.max_year)

	logger.debug(f"[Filters] {spec} kept {len(filtered)} of {total} movies")  # trace
	return filtered  # derived view


def _as_choice(value: Any) -> Optional[str]:
	if value is None:  # nothing selected
		return None
	s = str(value).strip()  # select boxes may hand over non-str values
	return s or None  # blank means no selection


def _as_year(value: Any) -> Optional[int]:
	if value is None or value == ALL:  # unconstrained
		return None
	try:
		return int(float(str(value).strip()))  # accepts 2001, "2001", "2001.0"
	except (TypeError, ValueError):
		return None  # unparsable ceiling is ignored


def normalize_filters(raw: Mapping[str, Any]) -> FilterSpec:
	"""Build a FilterSpec from loosely-typed UI values (select boxes, a slider)."""
	max_year = raw.get('max_year', raw.get('maxYear'))  # accept both spellings
	return FilterSpec(
		genre=_as_choice(raw.get('genre')),  # exact genre or "all"
		rating=_as_choice(raw.get('rating')),  # exact rating or "all"
		max_year=_as_year(max_year),  # int ceiling or None
	)


def default_filters(movies: Iterable[Movie]) -> FilterSpec:
	"""The reset state: every genre and rating, year ceiling at the latest release."""
	years = [m.year for m in movies if m.year is not None]  # known years only
	return FilterSpec(genre=ALL, rating=ALL, max_year=max(years) if years else None)
