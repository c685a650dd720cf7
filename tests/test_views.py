# tests/test_views.py

from datetime import date
from unittest.mock import MagicMock

import pytest

from data.insights import NO_SALES_MESSAGE
from views import assistant, history


@pytest.fixture
def fake_st():
    fake = MagicMock()
    fake.session_state = {}
    return fake


class TestAssistant:
    @pytest.fixture
    def client(self, monkeypatch):
        client = MagicMock()
        client.is_configured.return_value = True
        client.generate.return_value = "## Relatório"
        monkeypatch.setattr(assistant, "get_insight_client", lambda cfg: client)
        return client

    @pytest.fixture(autouse=True)
    def quiet_intro(self, monkeypatch):
        monkeypatch.setattr(assistant, "render_page_intro", lambda *a, **k: None)

    def test_click_only_raises_flag_and_reruns(self, monkeypatch, fake_st, client, app_config, sample_sales):
        monkeypatch.setattr(assistant, "st", fake_st)
        fake_st.button.return_value = True

        assistant.render(app_config, None, sample_sales)

        assert fake_st.button.call_args.kwargs["disabled"] is False
        assert fake_st.session_state["analysis_running"] is True
        fake_st.rerun.assert_called_once()
        client.generate.assert_not_called()

    def test_running_pass_disables_button_then_clears_flag(self, monkeypatch, fake_st, client, app_config, sample_sales):
        monkeypatch.setattr(assistant, "st", fake_st)
        fake_st.session_state.update(analysis="", analysis_running=True)
        fake_st.button.return_value = False

        assistant.render(app_config, None, sample_sales)

        assert fake_st.button.call_args.kwargs["disabled"] is True
        client.generate.assert_called_once_with(sample_sales)
        assert fake_st.session_state == {"analysis": "## Relatório", "analysis_running": False}
        fake_st.rerun.assert_called_once()

    def test_click_without_sales_shows_message_without_request(self, monkeypatch, fake_st, client, app_config):
        monkeypatch.setattr(assistant, "st", fake_st)
        fake_st.button.return_value = True

        assistant.render(app_config, None, [])

        assert fake_st.session_state["analysis"] == NO_SALES_MESSAGE
        assert fake_st.session_state["analysis_running"] is False
        fake_st.rerun.assert_not_called()
        client.generate.assert_not_called()

    def test_unconfigured_client_shows_callout(self, monkeypatch, fake_st, client, app_config, sample_sales):
        monkeypatch.setattr(assistant, "st", fake_st)
        callout = MagicMock()
        monkeypatch.setattr(assistant, "render_callout", callout)
        client.is_configured.return_value = False

        assistant.render(app_config, None, sample_sales)

        assert callout.call_args.args[0] == "IA Indisponível"
        fake_st.button.assert_not_called()

    def test_finish_clears_flag_when_request_raises(self, sample_sales):
        state = {"analysis": "old", "analysis_running": True}
        client = MagicMock()
        client.generate.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError):
            assistant.finish_analysis(state, client, sample_sales)
        assert state == {"analysis": "old", "analysis_running": False}


class TestHistory:
    @pytest.fixture
    def patched(self, monkeypatch, fake_st):
        c1, c2, c3 = MagicMock(), MagicMock(), MagicMock()
        c1.date_input.return_value = None
        c2.date_input.return_value = None
        fake_st.columns.return_value = [c1, c2, c3]
        monkeypatch.setattr(history, "st", fake_st)
        monkeypatch.setattr(history, "render_page_intro", lambda *a, **k: None)
        monkeypatch.setattr(history, "_render_import", MagicMock())
        edit = MagicMock()
        monkeypatch.setattr(history, "_render_edit", edit)
        return c3, edit

    def test_edit_section_skipped_when_filters_match_nothing(self, patched, app_config, sample_sales):
        c3, edit = patched
        c3.selectbox.return_value = "Ninguém"

        history.render(app_config, None, sample_sales)

        edit.assert_not_called()

    def test_edit_section_offers_only_filtered_sales(self, patched, app_config, sample_sales):
        c3, edit = patched
        c3.selectbox.return_value = "Ana Silva"

        history.render(app_config, None, sample_sales)

        edit.assert_called_once()
        assert [s.id for s in edit.call_args.args[2]] == ["a", "c"]

    def test_date_filter_narrows_edit_choices(self, patched, fake_st, app_config, sample_sales):
        c3, edit = patched
        c3.selectbox.return_value = "Todos"
        c1, _, _ = fake_st.columns.return_value
        c1.date_input.return_value = date(2024, 5, 12)

        history.render(app_config, None, sample_sales)

        assert [s.id for s in edit.call_args.args[2]] == ["b", "c"]
