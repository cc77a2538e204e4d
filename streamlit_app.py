"""
Streamlit UI for the Movie Box-Office Dashboard.
Loads the dataset once (embedded JSONL -> CSV -> sample data), lets the user filter
by genre, rating and release-year ceiling, and renders four Altair charts.

Run UI:                streamlit run streamlit_app.py
"""

# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives

# Local imports for loading, filtering, and charting
from src.aggregations import distinct_values, extent  # option lists + year slider bounds
from src.charts import (  # Altair chart builders
	genre_bar_chart,
	movie_info_rows,
	movie_option_labels,
	scatter_chart,
	timeline_chart,
	top_movies_chart,
)
from src.data_loader import DataLoader  # loads and normalizes movies
from src.filters import apply_filters, default_filters, normalize_filters  # filter engine
from src.models import ALL, LoadResult  # sentinel + loader output

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Movie Box-Office Dashboard", layout="wide")  # wide layout

# Main page title
st.title("🎬 Movie Box-Office Dashboard")  # friendly header


# Cache the loaded dataset so the one-shot fetch happens once per process
@st.cache_resource(show_spinner=True)
def load_dataset() -> LoadResult:
	"""Load the working dataset through the loader's fallback chain."""
	return DataLoader().load()


result = load_dataset()  # working dataset, read-only from here on
movies = result.movies  # tuple of Movie records

# Advisory notice when the synthetic fallback is in effect
if result.is_sample:
	st.warning(
		"CSV file not loaded: the dashboard is using sample data. "
		"Put the movie data in data/movie_data.jsonl or data/movie_data.csv to see real figures."
	)

genres = [ALL] + distinct_values(movies, 'genre')  # genre dropdown options
ratings = [ALL] + distinct_values(movies, 'rating')  # rating dropdown options
defaults = default_filters(movies)  # reset state
year_min, year_max = extent(movies, 'year')  # never None: the loader result is non-empty


def reset_filters():
	"""Put every control back to its default value."""
	st.session_state['genre'] = ALL
	st.session_state['rating'] = ALL
	st.session_state['max_year'] = defaults.max_year


# Seed the widget state once so the reset callback can overwrite it later
if 'max_year' not in st.session_state:
	reset_filters()

# Sidebar contains the filter controls
with st.sidebar:
	st.header("Filters")  # section label
	genre = st.selectbox("Genre", genres, key='genre')  # exact genre or "all"
	rating = st.selectbox("Rating", ratings, key='rating')  # exact rating or "all"
	if year_min < year_max:
		max_year = st.slider("Max year", min_value=year_min, max_value=year_max, key='max_year')
	else:
		max_year = year_max  # a single release year leaves nothing to slide
		st.caption(f"All movies released in {year_max}")
	st.button("Reset filters", on_click=reset_filters)  # restores defaults
	st.markdown("---")  # separator
	st.caption(f"Source: {result.source} ({len(movies)} movies)")  # data origin

# Recompute the filtered view on every interaction
spec = normalize_filters({'genre': genre, 'rating': rating, 'max_year': max_year})
view = apply_filters(movies, spec)

if not view:
	st.info("No data available for selected filters")  # empty state
else:
	# Two-by-two grid of charts
	row1 = st.columns(2)
	row2 = st.columns(2)
	charts = [
		(row1[0], genre_bar_chart(view)),
		(row1[1], timeline_chart(view)),
		(row2[0], scatter_chart(view)),
		(row2[1], top_movies_chart(view)),
	]
	for column, chart in charts:
		with column:
			if chart is None:
				st.caption("No data available for this chart")
			else:
				st.altair_chart(chart, width="stretch")

	st.divider()  # visual separator

	# Movie detail panel; options are positions so duplicate titles stay distinct
	st.subheader("Movie details")
	labels = movie_option_labels(view)  # "Name (Year)" per movie
	position = st.selectbox("Select a movie", range(len(view)), format_func=lambda i: labels[i])
	movie = view[position]  # selected record
	for label, value in movie_info_rows(movie):
		st.write(f"**{label}:** {value}")
