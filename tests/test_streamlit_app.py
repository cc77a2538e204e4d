"""
Smoke tests for the Streamlit dashboard page.
No data file is bundled, so the page runs on the sample dataset.
Run: pytest tests/test_streamlit_app.py
"""

from pathlib import Path

from streamlit.testing.v1 import AppTest

ROOT = Path(__file__).resolve().parents[1]
APP_PATH = str(ROOT / 'streamlit_app.py')


def run_app():
	return AppTest.from_file(APP_PATH, default_timeout=60).run()


def movie_picker(at):
	return [s for s in at.selectbox if s.label == 'Select a movie'][0]


def test_dashboard_renders_with_sample_data():
	at = run_app()
	assert not at.exception
	assert len(at.warning) == 1  # sample-data notice
	assert at.selectbox(key='genre').value == 'all'
	assert at.selectbox(key='rating').value == 'all'
	assert len(movie_picker(at).options) == 50


def test_movie_picker_selects_by_position():
	at = run_app()
	picker = movie_picker(at)
	label = picker.options[1]
	at = picker.set_value(1).run()
	assert not at.exception
	name = label.rsplit(' (', 1)[0]
	assert any(md.value == f"**Name:** {name}" for md in at.markdown)


def test_reset_restores_default_filters():
	at = run_app()
	genre = at.selectbox(key='genre')
	at = genre.set_value(genre.options[1]).run()
	assert at.selectbox(key='genre').value != 'all'
	at = at.button[0].click().run()
	assert not at.exception
	assert at.selectbox(key='genre').value == 'all'
