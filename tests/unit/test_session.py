"""Unit tests for the debouncer and the interactive search session."""

import threading

import pytest
from financial_search.config import Settings
from financial_search.core.debounce import Debouncer
from financial_search.core.engine import filter_by_query
from financial_search.core.results import Category
from financial_search.core.session import SearchSession


class TestDebouncer:
    """Test cases for the Debouncer class."""

    def test_flush_runs_latest_call_only(self):
        calls = []
        debouncer = Debouncer(delay=60)

        debouncer.call(calls.append, "j")
        debouncer.call(calls.append, "jo")
        debouncer.call(calls.append, "joh")

        assert debouncer.pending
        debouncer.flush()

        assert calls == ["joh"]
        assert not debouncer.pending

    def test_cancel(self):
        calls = []
        debouncer = Debouncer(delay=60)

        debouncer.call(calls.append, "x")
        debouncer.cancel()

        assert debouncer.flush() is None
        assert calls == []

    def test_fires_after_delay(self):
        fired = threading.Event()
        calls = []
        debouncer = Debouncer(delay=0.01)

        def record(value):
            calls.append(value)
            fired.set()

        debouncer.call(record, "first")
        debouncer.call(record, "second")

        assert fired.wait(timeout=2.0)
        assert calls == ["second"]

    def test_flush_reraises(self):
        debouncer = Debouncer(delay=60)

        def boom():
            raise RuntimeError("boom")

        debouncer.call(boom)
        with pytest.raises(RuntimeError):
            debouncer.flush()


class TestSearchSession:
    """Test cases for the SearchSession class."""

    @pytest.fixture
    def selected(self):
        return []

    @pytest.fixture
    def session(self, selected):
        accounts = [
            {"id": "a1", "accountNumber": "ACC001", "accountHolder": "John Smith",
             "balance": 10, "type": "checking"},
            {"id": "a2", "accountNumber": "ACC002", "accountHolder": "Sarah Johnson",
             "balance": 20, "type": "savings"},
        ]
        customers = [
            {"id": "c1", "name": "John Smith", "email": "john.smith@email.com",
             "phone": "(555) 123-4567", "customerId": "CUST-10001"},
        ]
        return SearchSession(
            accounts=accounts,
            customers=customers,
            on_select=selected.append,
            debounce_delay=60,
            blur_delay=60,
        )

    def test_initial_state(self, session):
        assert session.query == ""
        assert session.results.total == 0
        assert not session.is_open
        assert session.selected_index == -1
        assert session.status_message == ""

    def test_typing_is_debounced(self, session):
        session.set_query("j")
        session.set_query("jo")
        session.set_query("john")

        assert session.results.total == 0
        session.input_debouncer.flush()

        assert session.results.total == 3
        assert session.is_open
        assert session.status_message == "3 results found"

    def test_no_results_message(self, session):
        session.set_query("zzz")
        session.input_debouncer.flush()

        assert session.is_open
        assert session.status_message == "No results found"

    def test_single_result_message(self, session):
        session.set_query("sarah")
        session.perform_search()

        assert session.status_message == "1 result found"

    def test_keyboard_navigation(self, session):
        session.set_query("john")
        session.perform_search()

        assert session.key_down("ArrowDown")
        assert session.selected_index == 0
        session.key_down("ArrowDown")
        session.key_down("ArrowDown")
        session.key_down("ArrowDown")
        assert session.selected_index == 2

        session.key_down("ArrowUp")
        session.key_down("ArrowUp")
        session.key_down("ArrowUp")
        session.key_down("ArrowUp")
        assert session.selected_index == -1

    def test_enter_selects_highlighted_result(self, session, selected):
        session.set_query("john")
        session.perform_search()

        session.key_down("ArrowDown")
        session.key_down("ArrowDown")
        session.key_down("ArrowDown")
        session.key_down("Enter")

        assert len(selected) == 1
        assert selected[0].type is Category.CUSTOMER
        assert selected[0].data["id"] == "c1"
        assert not session.is_open
        assert session.selected_index == -1

    def test_enter_without_selection(self, session, selected):
        session.set_query("john")
        session.perform_search()

        assert session.key_down("Enter")
        assert selected == []
        assert session.is_open

    def test_arrow_down_opens_closed_panel(self, session):
        session.set_query("john")
        session.perform_search()
        session.key_down("Escape")
        assert not session.is_open

        assert session.key_down("ArrowDown")
        assert session.is_open
        assert session.selected_index == 0

    def test_keys_ignored_when_closed(self, session):
        assert not session.key_down("Enter")
        assert not session.key_down("ArrowUp")

    def test_unknown_key(self, session):
        session.set_query("john")
        session.perform_search()
        assert not session.key_down("Tab")

    def test_hover_and_selected_result(self, session):
        session.set_query("john")
        session.perform_search()

        session.hover(1)
        assert session.selected_result == session.results.result_at(1)
        assert session.results.index_of(session.selected_result) == 1

    def test_focus_and_blur(self, session):
        session.focus()
        assert not session.is_open

        session.set_query("john")
        session.perform_search()
        session.key_down("ArrowDown")

        session.blur()
        assert session.is_open
        session.blur_debouncer.flush()
        assert not session.is_open
        assert session.selected_index == -1

        session.focus()
        assert session.is_open

    def test_clear(self, session):
        session.set_query("john")
        session.perform_search()
        session.set_query("johns")

        session.clear()

        assert session.query == ""
        assert session.results.total == 0
        assert not session.is_open
        assert not session.input_debouncer.pending

    def test_clear_during_search_drops_stale_results(self, session, monkeypatch):
        started = threading.Event()
        release = threading.Event()

        def slow_filter(*args, **kwargs):
            started.set()
            assert release.wait(timeout=5.0)
            return filter_by_query(*args, **kwargs)

        monkeypatch.setattr("financial_search.core.session.filter_by_query", slow_filter)

        session.set_query("sarah")
        worker = threading.Thread(target=session.input_debouncer.flush)
        worker.start()
        assert started.wait(timeout=5.0)

        session.clear()
        release.set()
        worker.join(timeout=5.0)

        assert not worker.is_alive()
        assert session.query == ""
        assert session.results.total == 0
        assert not session.is_open
        assert session.status_message == ""

    def test_new_query_during_search_keeps_latest(self, session, monkeypatch):
        started = threading.Event()
        release = threading.Event()

        def slow_filter(query, *args, **kwargs):
            if query == "sarah":
                started.set()
                assert release.wait(timeout=5.0)
            return filter_by_query(query, *args, **kwargs)

        monkeypatch.setattr("financial_search.core.session.filter_by_query", slow_filter)

        session.set_query("sarah")
        worker = threading.Thread(target=session.input_debouncer.flush)
        worker.start()
        assert started.wait(timeout=5.0)

        session.set_query("john")
        session.perform_search()
        release.set()
        worker.join(timeout=5.0)

        assert session.query == "john"
        assert session.results.total == 3
        assert session.status_message == "3 results found"

    def test_set_records(self, session):
        session.set_records(accounts=[])
        session.set_query("john")
        session.perform_search()

        assert session.results.accounts == []
        assert len(session.results.customers) == 1

    def test_from_settings(self):
        settings = Settings(debounce_delay_ms=300, blur_delay_ms=50, max_per_category=2)

        session = SearchSession.from_settings(settings)

        assert session.input_debouncer.delay == pytest.approx(0.3)
        assert session.blur_debouncer.delay == pytest.approx(0.05)
        assert session.max_per_category == 2
