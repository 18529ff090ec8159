"""Tests for the Streamlit page, driven through AppTest."""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests
import streamlit as st
from streamlit.testing.v1 import AppTest

from voice_map.ui import main_view
from voice_map.visualization.overlay import NO_SELECTION, HoverState

APP_PATH = Path(__file__).parent.parent / "app.py"
BASE_PAIRS = 8  # rows in data/embeddings.csv


@pytest.fixture
def app():
    st.cache_data.clear()
    st.cache_resource.clear()
    return AppTest.from_file(str(APP_PATH), default_timeout=30)


def _ok_response():
    response = MagicMock()
    response.json.return_value = {"active": {"x": 1, "y": 1}, "passive": {"x": 2, "y": 2}}
    return response


def _chart(at):
    return json.loads(at.get("plotly_chart")[0].proto.spec)


def _series_lengths(at):
    return [len(trace["x"]) for trace in _chart(at)["data"]]


def _markdown(at):
    return [m.value for m in at.markdown]


@patch("requests.post")
def test_no_query_renders_base_chart(mock_post, app):
    at = app.run()

    assert not at.exception
    assert _series_lengths(at) == [BASE_PAIRS, BASE_PAIRS]
    assert not _chart(at)["layout"].get("shapes")
    mock_post.assert_not_called()


@patch("requests.post")
def test_lookup_needs_both_query_params(mock_post, app):
    app.query_params["active"] = "foo"
    at = app.run()

    mock_post.assert_not_called()
    assert _series_lengths(at) == [BASE_PAIRS, BASE_PAIRS]


@patch("requests.post")
def test_query_pair_extends_chart_once(mock_post, app):
    mock_post.return_value = _ok_response()
    app.query_params["active"] = "foo"
    app.query_params["passive"] = "bar"

    at = app.run()

    assert not at.exception
    assert _series_lengths(at) == [BASE_PAIRS + 1, BASE_PAIRS + 1]
    assert mock_post.call_count == 1

    # Reruns reuse the stored outcome
    at.run()
    assert mock_post.call_count == 1
    assert _series_lengths(at) == [BASE_PAIRS + 1, BASE_PAIRS + 1]


@patch("requests.post")
def test_form_prefilled_from_query_params(mock_post, app):
    mock_post.return_value = _ok_response()
    app.query_params["active"] = "foo"
    app.query_params["passive"] = "bar"

    at = app.run()

    assert [t.value for t in at.text_input] == ["foo", "bar"]


@patch("requests.post")
def test_failed_lookup_shows_banner_and_base_chart(mock_post, app):
    mock_post.side_effect = requests.ConnectionError("down")
    app.query_params["active"] = "foo"
    app.query_params["passive"] = "bar"

    at = app.run()

    assert not at.exception
    assert any("Could not embed your sentences" in m and "down" in m for m in _markdown(at))
    assert _series_lengths(at) == [BASE_PAIRS, BASE_PAIRS]


@patch("requests.post")
def test_selection_survives_unrelated_rerun(mock_post, app):
    app.session_state["hover_state"] = HoverState(index=0)
    at = app.run()

    assert "### Selected Pair" in _markdown(at)
    assert len(_chart(at)["layout"]["shapes"]) == 1

    # Submitting the empty sidebar form is not a chart event
    at.button[0].click().run()

    assert at.session_state["hover_state"] == HoverState(index=0)
    assert "### Selected Pair" in _markdown(at)
    assert len(_chart(at)["layout"]["shapes"]) == 1


class _FakeSessionState(dict):
    """Dict with attribute access, standing in for st.session_state."""

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError as e:
            raise AttributeError(name) from e

    def __setattr__(self, name, value):
        self[name] = value


def test_chart_select_callback_updates_state(monkeypatch):
    fake = _FakeSessionState(
        sentences={"selection": {"points": [{"curve_number": 1, "point_index": 2}]}},
        hover_state=NO_SELECTION,
    )
    monkeypatch.setattr(st, "session_state", fake)

    main_view.on_chart_select()
    assert fake["hover_state"] == HoverState(index=2)

    fake["sentences"] = {"selection": {"points": []}}
    main_view.on_chart_select()
    assert fake["hover_state"] == NO_SELECTION
