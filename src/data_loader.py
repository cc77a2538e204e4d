"""
Data loading and preprocessing module.
Turns raw movie rows (embedded JSONL, CSV file or URL) into canonical Movie records
and falls back to synthetic data when nothing usable is available.
"""

# Standard libs for JSON parsing, numeric checks, typing, and paths
import io  # wrap downloaded CSV text
import json  # read JSON lines
import math  # finite-number checks
from pathlib import Path  # filesystem-safe paths
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple  # type hints

# Third-party: tabular parsing and HTTP fetch
import pandas as pd  # CSV parsing
import requests  # one-shot download of a remote CSV

# Project modules
from .aggregations import distinct_values  # dropdown option lists
from .models import LoadResult, Movie  # canonical record + loader output
from .sample_data import SampleGenerator  # terminal fallback

# Console logging
from loguru import logger  # console logger


# Default locations; all of them can be overridden through DataLoader(...)
DATA_DIR = Path(__file__).resolve().parents[1] / 'data'
DEFAULT_EMBEDDED_PATH = DATA_DIR / 'movie_data.jsonl'
DEFAULT_CSV_SOURCE = str(DATA_DIR / 'movie_data.csv')
FETCH_TIMEOUT_S = 10.0

# Candidate source keys per canonical field, in priority order (capitalized first)
FIELD_KEYS: Dict[str, Tuple[str, ...]] = {
	'name': ('Name', 'name'),
	'year': ('Year', 'year'),
	'genre': ('Genre', 'genre'),
	'rating': ('Rating', 'rating'),
	'box_office': ('BoxOffice', 'boxOffice', 'boxoffice'),
	'budget': ('Budget', 'budget'),
	'director': ('Director', 'director'),
	'country': ('Country', 'country'),
	'runtime': ('Runtime', 'runtime'),
	'imdb_score': ('IMDB_Score', 'imdbScore', 'imdb_score'),
}


def _is_missing(value: Any) -> bool:
	"""None, blank strings and NaN all count as "not provided"."""
	if value is None:
		return True
	if isinstance(value, str):
		return not value.strip()
	if isinstance(value, float):
		return math.isnan(value)
	return False


def _resolve(raw: Mapping[str, Any], field: str) -> Any:
	"""Return the first present value among the candidate keys of `field`."""
	for key in FIELD_KEYS[field]:
		value = raw.get(key)
		if not _is_missing(value):
			return value
	return None


def _to_number(value: Any) -> Optional[float]:
	"""Parse a number from text or a numeric value; None when unparsable or not finite."""
	if _is_missing(value) or isinstance(value, bool):
		return None
	try:
		number = float(str(value).strip())
	except (TypeError, ValueError):
		return None
	return number if math.isfinite(number) else None


def _to_text(value: Any) -> Optional[str]:
	if value is None:
		return None
	return str(value).strip()


def _to_int(value: Any) -> Optional[int]:
	number = _to_number(value)
	return int(number) if number is not None else None


def normalize_record(raw: Mapping[str, Any]) -> Movie:
	"""
	Convert one raw row into a Movie.
	Either casing of a field name is accepted; malformed numbers fall back to
	per-field defaults instead of rejecting the row.
	"""
	box_office = _to_number(_resolve(raw, 'box_office'))
	budget = _to_number(_resolve(raw, 'budget'))
	return Movie(
		name=_to_text(_resolve(raw, 'name')) or '',
		year=_to_int(_resolve(raw, 'year')),
		genre=_to_text(_resolve(raw, 'genre')),
		rating=_to_text(_resolve(raw, 'rating')),
		box_office=box_office if box_office is not None else 0.0,
		budget=budget if budget is not None else 0.0,
		director=_to_text(_resolve(raw, 'director')),
		country=_to_text(_resolve(raw, 'country')),
		runtime=_to_int(_resolve(raw, 'runtime')),
		imdb_score=_to_number(_resolve(raw, 'imdb_score')),
	)


def quality_filter(movies: Iterable[Movie]) -> Tuple[Movie, ...]:
	"""Keep movies with a positive box office and a known year, preserving order."""
	movies = list(movies)
	kept = tuple(m for m in movies if m.box_office > 0 and m.year is not None)
	if len(kept) != len(movies):
		logger.debug(f"[DataLoader] Quality filter dropped {len(movies) - len(kept)} of {len(movies)} records")
	return kept


def process_records(rows: Iterable[Mapping[str, Any]]) -> Tuple[Movie, ...]:
	"""Normalize every raw row, then apply the quality filter."""
	return quality_filter(normalize_record(row) for row in rows)


class DataLoader:
	"""
	Produces the working dataset using this precedence:
	embedded records -> external CSV (path or URL) -> synthetic sample data.
	The result is never empty.
	"""

	def __init__(
		self,
		embedded_records: Optional[Sequence[Mapping[str, Any]]] = None,  # preloaded raw rows
		embedded_path: Optional[str] = str(DEFAULT_EMBEDDED_PATH),  # bundled JSONL file
		csv_source: Optional[str] = DEFAULT_CSV_SOURCE,  # local path or http(s) URL
		timeout: float = FETCH_TIMEOUT_S,  # seconds for the remote fetch
		sample_generator: Optional[SampleGenerator] = None,  # injectable for tests
	):
		self.embedded_records = embedded_records
		self.embedded_path = embedded_path
		self.csv_source = csv_source
		self.timeout = timeout
		self.sample_generator = sample_generator or SampleGenerator()

	def load(self) -> LoadResult:
		"""Run the precedence chain and return the first non-empty working dataset."""
		rows = self._embedded_rows()
		if rows:
			movies = process_records(rows)
			logger.info(f"[DataLoader] Data loaded from embedded source: {len(movies)} movies")
			if movies:
				return LoadResult(movies=movies, source='embedded')

		if self.csv_source:
			try:
				rows = self.read_csv(self.csv_source)
				if not rows:
					raise ValueError('CSV file is empty')
				movies = process_records(rows)
				logger.info(f"[DataLoader] Data loaded from CSV {self.csv_source}: {len(movies)} movies")
				if movies:
					return LoadResult(movies=movies, source='external')
			except (requests.RequestException, OSError, ValueError) as e:
				logger.error(f"[DataLoader] Error loading CSV {self.csv_source}: {e}")

		logger.warning("[DataLoader] Using sample data as fallback")
		return LoadResult(movies=tuple(self.sample_generator.generate()), source='sample')

	def _embedded_rows(self) -> List[Dict[str, Any]]:
		if self.embedded_records:
			return [dict(row) for row in self.embedded_records]
		if not self.embedded_path:
			return []
		try:
			return self.read_jsonl(self.embedded_path)
		except FileNotFoundError:
			logger.debug(f"[DataLoader] No embedded dataset at {self.embedded_path}")
			return []
		except (OSError, ValueError) as e:  # unreadable file, directory, bad encoding
			logger.error(f"[DataLoader] Error loading embedded dataset {self.embedded_path}: {e}")
			return []

	def read_jsonl(self, filepath: str) -> List[Dict[str, Any]]:
		"""
		Read raw rows from a JSON Lines file, one JSON object per line.
		Blank lines are ignored; malformed lines are skipped with a warning.
		"""
		filepath = Path(filepath)  # normalize path
		if not filepath.exists():
			raise FileNotFoundError(f"Movie data file not found: {filepath}")

		logger.info(f"[DataLoader] Loading embedded movies from {filepath}...")
		rows = []  # accumulator for raw rows
		with open(filepath, 'r', encoding='utf-8') as f:
			for line_num, line in enumerate(f, 1):  # line numbers for diagnostics
				line = line.strip()
				if not line:
					continue
				try:
					data = json.loads(line)
				except json.JSONDecodeError as e:
					logger.warning(f"[DataLoader] Skipping invalid JSON at line {line_num}: {e}")
					continue
				if not isinstance(data, dict):
					logger.warning(f"[DataLoader] Skipping non-object JSON at line {line_num}")
					continue
				rows.append(data)
		return rows

	def read_csv(self, source: str) -> List[Dict[str, Any]]:
		"""
		Read raw rows from a CSV file path or an http(s) URL.
		Every column is kept as text; coercion happens in normalize_record.
		"""
		if source.startswith(('http://', 'https://')):
			logger.info(f"[DataLoader] Fetching CSV from {source}...")
			response = requests.get(source, timeout=self.timeout)
			response.raise_for_status()  # HTTP errors become RequestException
			buffer = io.StringIO(response.text)
			df = pd.read_csv(buffer, dtype=str, keep_default_na=False)
		else:
			path = Path(source)
			if not path.exists():
				raise FileNotFoundError(f"Movie data file not found: {path}")
			df = pd.read_csv(path, dtype=str, keep_default_na=False)
		return df.to_dict(orient='records')

	def get_all_genres(self, movies: Iterable[Movie]) -> List[str]:
		"""Return a sorted list of all unique genres in the dataset."""
		return distinct_values(movies, 'genre')

	def get_all_ratings(self, movies: Iterable[Movie]) -> List[str]:
		"""Return a sorted list of all unique ratings in the dataset."""
		return distinct_values(movies, 'rating')
