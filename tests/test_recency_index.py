import datetime as dt

from earbud_tracker.record_store import RecencyIndex, RecordStore


def create_six(store):
    return [store.create(f"Brand {n}", "Black", f"Room {n}") for n in range(1, 7)]


def test_most_recent_returns_newest_first(store):
    r1, r2, r3, r4, r5, r6 = create_six(store)

    assert list(store.recent(5)) == [r6, r5, r4, r3, r2]


def test_found_records_are_skipped_and_backfilled(store):
    r1, r2, r3, r4, r5, r6 = create_six(store)

    store.mark_found(r6.id)

    assert list(store.recent(5)) == [r5, r4, r3, r2, r1]


def test_status_is_read_at_traversal_time(store):
    r1, r2, r3 = (store.create("Sony", "Black", "Desk") for _ in range(3))
    view = store.recent(2)

    assert list(view) == [r3, r2]
    store.mark_found(r2.id)
    assert list(view) == [r3, r1]


def test_view_is_lazy_and_restartable(store):
    records = create_six(store)
    view = store.recent(3)

    iterator = iter(view)
    assert next(iterator) is records[-1]
    assert list(view) == records[::-1][:3]
    assert list(view) == records[::-1][:3]


def test_fewer_qualifying_than_limit_returns_all(store):
    r1, r2 = store.create("A", "B", "C"), store.create("D", "E", "F")
    store.mark_found(r1.id)

    assert list(store.recent(5)) == [r2]


def test_zero_or_negative_limit_yields_nothing(store):
    create_six(store)

    assert list(store.recent(0)) == []
    assert list(store.recent(-1)) == []


def test_empty_store_has_no_recent_reports(store):
    assert list(store.recent(5)) == []


def test_equal_timestamps_break_ties_by_insertion_order():
    frozen = dt.datetime(2024, 5, 1, 12, 0, 0)
    store = RecordStore(clock=lambda: frozen)

    first, second, third = (store.create(str(n), "Black", "Hall") for n in range(3))

    assert list(store.recent(3)) == [third, second, first]


def test_out_of_order_timestamps_are_sorted():
    stamps = iter([
        dt.datetime(2024, 5, 1, 10),
        dt.datetime(2024, 5, 1, 8),
        dt.datetime(2024, 5, 1, 12),
    ])
    store = RecordStore(clock=lambda: next(stamps))

    ten, eight, noon = (store.create(str(n), "Black", "Hall") for n in range(3))

    assert list(store.recent(3)) == [noon, ten, eight]


def test_custom_recency_key(clock):
    # Order by location name instead of report time
    store = RecordStore(clock=clock, recency_key=lambda record: record.location)
    cafe = store.create("A", "Black", "Cafe")
    zoo = store.create("B", "Black", "Zoo")
    bus = store.create("C", "Black", "Bus")

    assert list(store.recent(3)) == [zoo, cafe, bus]


def test_index_holds_ids_resolved_through_the_store(store):
    record = store.create("Sony", "Black", "Desk")
    resolved = []

    def resolve(record_id):
        resolved.append(record_id)
        return store.get(record_id)

    index = RecencyIndex(resolve)
    index.record_created(record)

    assert list(index.most_recent(1)) == [record]
    assert resolved == [record.id]
    assert len(index) == 1
