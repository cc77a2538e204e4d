"""
Data models for the Movie Dashboard.
Defines the core data structures used throughout the system.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass  # auto-generates __init__, __repr__, etc.
# Import typing helpers for precise and self-documenting types
from typing import Optional, Tuple  # optional values and fixed-size tuples

# Sentinel the UI uses for "no constraint on this dimension"
ALL = 'all'


@dataclass(frozen=True)
class Movie:
	"""
	Canonical movie record after normalization.
	Records in the working dataset always have a positive box office and a year.
	"""
	name: str  # display title (not validated)
	year: Optional[int]  # release year, None when missing or unparsable
	genre: Optional[str]  # free-form category
	rating: Optional[str]  # age rating such as "PG-13" (free-form)
	box_office: float  # revenue in millions, 0.0 when missing
	budget: float = 0.0  # production budget in millions, 0.0 when missing
	director: Optional[str] = None  # director's name
	country: Optional[str] = None  # production country
	runtime: Optional[int] = None  # minutes
	imdb_score: Optional[float] = None  # usually on a 0-10 scale


@dataclass(frozen=True)
class FilterSpec:
	"""
	The user's current filter selection.
	None or "all" on a dimension means that dimension is not constrained.
	"""
	genre: Optional[str] = None  # exact genre to keep
	rating: Optional[str] = None  # exact rating to keep
	max_year: Optional[int] = None  # inclusive release-year ceiling

	def is_unconstrained(self) -> bool:
		"""True when no dimension restricts the dataset."""
		return (
			_is_open(self.genre)
			and _is_open(self.rating)
			and _is_open(self.max_year)
		)


def _is_open(value) -> bool:
	return value is None or value == ALL


@dataclass(frozen=True)
class LoadResult:
	"""Working dataset plus the source it came from ("embedded", "external" or "sample")."""
	movies: Tuple[Movie, ...]
	source: str

	@property
	def is_sample(self) -> bool:
		return self.source == 'sample'

	def __len__(self) -> int:
		return len(self.movies)
