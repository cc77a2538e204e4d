"""
Synthetic movie data used when no real dataset can be loaded.
Keeps the dashboard usable without a data file; the numbers are not meant to be realistic.
"""

from typing import List, Optional  # type hints

import numpy as np  # seedable random generator

from loguru import logger  # console logging

from .models import Movie  # canonical record

SAMPLE_SIZE = 50

GENRES = ['Action', 'Sci-Fi', 'Drama', 'Comedy', 'Horror', 'Animation', 'Fantasy', 'Crime', 'War', 'Musical']
RATINGS = ['G', 'PG', 'PG-13', 'R']
DIRECTORS = ['Christopher Nolan', 'Steven Spielberg', 'Quentin Tarantino', 'Martin Scorsese', 'James Cameron']
COUNTRIES = ['USA', 'UK', 'Australia', 'New Zealand']
BASE_TITLES = [
	'The Dark Knight', 'Inception', 'Interstellar', 'The Matrix', 'Pulp Fiction',
	'Forrest Gump', 'Titanic', 'Avatar', 'Jurassic Park', 'Star Wars',
	'The Avengers', 'Black Panther', 'The Lion King', 'Toy Story', 'Frozen',
]


class SampleGenerator:
	"""
	Builds canonical Movie records from fixed vocabularies and random numeric ranges.
	Pass a seed (or a ready numpy Generator) to get reproducible output.
	"""

	def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
		# An explicit generator wins over a seed
		self.rng = rng if rng is not None else np.random.default_rng(seed)

	def _choice(self, values: List[str]) -> str:
		return values[int(self.rng.integers(0, len(values)))]

	def generate(self, count: int = SAMPLE_SIZE) -> List[Movie]:
		"""Return `count` synthetic movies with distinct names ("<title> <index>")."""
		movies = []  # accumulator
		for i in range(count):
			movies.append(Movie(
				name=f"{self._choice(BASE_TITLES)} {i + 1}",  # index keeps names unique
				year=int(self.rng.integers(1970, 2020)),  # [1970, 2019]
				genre=self._choice(GENRES),
				rating=self._choice(RATINGS),
				box_office=50 + float(self.rng.random()) * 2000,  # [50, 2050)
				budget=10 + float(self.rng.random()) * 200,  # [10, 210)
				director=self._choice(DIRECTORS),
				country=self._choice(COUNTRIES),
				runtime=90 + int(self.rng.integers(0, 90)),  # [90, 179]
				imdb_score=6 + float(self.rng.random()) * 3,  # [6.0, 9.0)
			))
		logger.debug(f"[Sample] Generated {len(movies)} synthetic movies")
		return movies
