"""Tests for search, filter and sort."""

from datetime import date, datetime, timedelta, timezone

import pytest

from duelist.core.tasks import Task
from duelist.core.view import (
    SortKey,
    StatusFilter,
    ViewState,
    filter_by_status,
    project,
    search_tasks,
    sort_tasks,
)


@pytest.fixture
def today():
    return date(2025, 1, 15)


@pytest.fixture
def t0():
    return datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_tasks(today, t0):
    """One of each status, plus an overdue task that is completed."""
    return [
        Task(id=1, text="Write report", due_date=today, created_at=t0),
        Task(id=2, text="Pay rent", due_date=today - timedelta(days=1), created_at=t0 + timedelta(hours=1)),
        Task(id=3, text="Book flights", due_date=today + timedelta(days=7), created_at=t0 + timedelta(hours=2),
             completed=True),
        Task(id=4, text="Renew passport", due_date=today - timedelta(days=30), created_at=t0 + timedelta(hours=3),
             completed=True),
        Task(id=5, text="call the BANK", due_date=today + timedelta(days=2), created_at=t0 + timedelta(hours=4)),
    ]


def ids(tasks):
    return [t.id for t in tasks]


class TestSearch:
    def test_empty_search_keeps_everything(self, sample_tasks):
        assert ids(search_tasks(sample_tasks, "")) == [1, 2, 3, 4, 5]

    def test_substring_match(self, sample_tasks):
        assert ids(search_tasks(sample_tasks, "re")) == [1, 2, 4]

    def test_case_insensitive_both_ways(self, sample_tasks):
        assert ids(search_tasks(sample_tasks, "bank")) == [5]
        assert ids(search_tasks(sample_tasks, "PASSPORT")) == [4]

    def test_no_match(self, sample_tasks):
        assert search_tasks(sample_tasks, "groceries") == []

    def test_returns_new_list(self, sample_tasks):
        result = search_tasks(sample_tasks, "")
        result.pop()
        assert len(sample_tasks) == 5


class TestFilterByStatus:
    def test_all(self, sample_tasks, today):
        assert ids(filter_by_status(sample_tasks, StatusFilter.ALL, today)) == [1, 2, 3, 4, 5]

    def test_completed(self, sample_tasks, today):
        assert ids(filter_by_status(sample_tasks, StatusFilter.COMPLETED, today)) == [3, 4]

    def test_active_includes_due_today(self, sample_tasks, today):
        assert ids(filter_by_status(sample_tasks, StatusFilter.ACTIVE, today)) == [1, 5]

    def test_overdue_excludes_completed(self, sample_tasks, today):
        assert ids(filter_by_status(sample_tasks, StatusFilter.OVERDUE, today)) == [2]

    def test_accepts_plain_strings(self, sample_tasks, today):
        assert ids(filter_by_status(sample_tasks, "overdue", today)) == [2]

    @pytest.mark.parametrize("offset", [-60, -1, 0, 1, 60])
    def test_statuses_partition_collection(self, sample_tasks, today, offset):
        as_of = today + timedelta(days=offset)
        completed = set(ids(filter_by_status(sample_tasks, StatusFilter.COMPLETED, as_of)))
        active = set(ids(filter_by_status(sample_tasks, StatusFilter.ACTIVE, as_of)))
        overdue = set(ids(filter_by_status(sample_tasks, StatusFilter.OVERDUE, as_of)))

        assert completed.isdisjoint(active)
        assert completed.isdisjoint(overdue)
        assert active.isdisjoint(overdue)
        assert completed | active | overdue == set(ids(sample_tasks))


class TestSortTasks:
    @pytest.fixture
    def fruit(self, t0):
        a = Task(id=1, text="Banana", due_date=None, created_at=t0)
        b = Task(id=2, text="apple", due_date=None, created_at=t0 + timedelta(minutes=1))
        return [a, b]

    def test_alphabetical_ignores_case(self, fruit):
        assert ids(sort_tasks(fruit, SortKey.ALPHABETICAL)) == [2, 1]

    def test_newest(self, fruit):
        assert ids(sort_tasks(fruit, SortKey.NEWEST)) == [2, 1]

    def test_oldest(self, fruit):
        assert ids(sort_tasks(fruit, SortKey.OLDEST)) == [1, 2]

    def test_alphabetical_lowercase_before_uppercase_on_tie(self, t0):
        tasks = [
            Task(id=1, text="Apple", due_date=None, created_at=t0),
            Task(id=2, text="apple", due_date=None, created_at=t0),
        ]
        assert ids(sort_tasks(tasks, SortKey.ALPHABETICAL)) == [2, 1]

    def test_alphabetical_ignores_accents(self, t0):
        tasks = [
            Task(id=1, text="zebra", due_date=None, created_at=t0),
            Task(id=2, text="Éclair", due_date=None, created_at=t0),
            Task(id=3, text="dentist", due_date=None, created_at=t0),
        ]
        assert ids(sort_tasks(tasks, SortKey.ALPHABETICAL)) == [3, 2, 1]

    def test_due_date_ascending_missing_last(self, today, t0):
        tasks = [
            Task(id=1, text="a", due_date=None, created_at=t0),
            Task(id=2, text="b", due_date=today + timedelta(days=3), created_at=t0),
            Task(id=3, text="c", due_date=today - timedelta(days=3), created_at=t0),
            Task(id=4, text="d", due_date=today, created_at=t0),
        ]
        assert ids(sort_tasks(tasks, SortKey.DUE_DATE)) == [3, 4, 2, 1]

    def test_due_date_accepts_plain_string(self, today, t0):
        tasks = [
            Task(id=1, text="a", due_date=today + timedelta(days=1), created_at=t0),
            Task(id=2, text="b", due_date=today, created_at=t0),
        ]
        assert ids(sort_tasks(tasks, "dueDate")) == [2, 1]

    @pytest.mark.parametrize("key", list(SortKey))
    def test_ties_keep_incoming_order(self, today, t0, key):
        tasks = [Task(id=i, text="same", due_date=today, created_at=t0) for i in range(1, 6)]
        assert ids(sort_tasks(tasks, key)) == [1, 2, 3, 4, 5]

    def test_does_not_mutate_input(self, fruit):
        sort_tasks(fruit, SortKey.NEWEST)
        assert ids(fruit) == [1, 2]


class TestProject:
    def test_default_view_is_everything_newest_first(self, sample_tasks, today):
        assert ids(project(sample_tasks, as_of=today)) == [5, 4, 3, 2, 1]

    def test_search_then_filter_then_sort(self, sample_tasks, today):
        view = ViewState(search_text="RE", status_filter=StatusFilter.ALL, sort_key=SortKey.ALPHABETICAL)
        assert ids(project(sample_tasks, view, as_of=today)) == [2, 4, 1]

        view = ViewState(search_text="re", status_filter=StatusFilter.COMPLETED, sort_key=SortKey.OLDEST)
        assert ids(project(sample_tasks, view, as_of=today)) == [4]

    def test_does_not_reorder_collection(self, sample_tasks, today):
        project(sample_tasks, ViewState(sort_key=SortKey.ALPHABETICAL), as_of=today)
        assert ids(sample_tasks) == [1, 2, 3, 4, 5]
