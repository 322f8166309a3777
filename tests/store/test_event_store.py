"""
Tests — EventStore append, lookup, status toggle, ownership.
"""

from __future__ import annotations

import pytest

from eventlog.config import StoreConfig
from eventlog.store import (
    EventStore,
    InvalidInput,
    LoggedEvent,
    NotFound,
    StoreStats,
    Unauthorized,
)

OWNER = "owner-1"
ALICE = "alice"
BOB = "bob"


@pytest.fixture
def store():
    return EventStore(OWNER)


# ══════════════════════════════════════════════════════════════
# CONSTRUCTION
# ══════════════════════════════════════════════════════════════


class TestConstruction:
    def test_starts_empty(self, store):
        assert store.count == 0
        assert len(store) == 0
        assert store.owner == OWNER
        assert store.stats() == StoreStats(total=0, active=0, owner=OWNER)

    @pytest.mark.parametrize("owner", ["", "   ", None, "0x0000000000"])
    def test_rejects_zero_owner(self, owner):
        with pytest.raises(InvalidInput):
            EventStore(owner)

    def test_instances_are_independent(self):
        first = EventStore(OWNER)
        second = EventStore(OWNER)
        first.append(ALICE, "only in first", "misc", 1)

        assert first.count == 1
        assert second.count == 0
        assert second.events_by_user(ALICE) == ()
        assert second.events_by_category("misc") == ()


# ══════════════════════════════════════════════════════════════
# APPEND
# ══════════════════════════════════════════════════════════════


class TestAppend:
    def test_ids_are_sequential_from_zero(self, store):
        ids = [store.append(ALICE, f"msg {i}", "", i) for i in range(5)]
        assert ids == [0, 1, 2, 3, 4]
        assert store.count == 5

    def test_record_fields(self, store):
        event_id = store.append(ALICE, "hello", "greet", 100)
        record = store.get(event_id)

        assert record == LoggedEvent(
            id=0,
            submitter=ALICE,
            message="hello",
            category="greet",
            timestamp=100,
            is_active=True,
        )

    def test_indexes_user_and_category_once(self, store):
        event_id = store.append(ALICE, "hello", "greet", 100)
        assert store.events_by_user(ALICE).count(event_id) == 1
        assert store.events_by_category("greet").count(event_id) == 1

    def test_empty_category_not_indexed(self, store):
        store.append(ALICE, "untagged", "", 1)
        assert store.events_by_category("") == ()
        assert store.count_by_category("") == 0
        assert store.events_by_user(ALICE) == (0,)

    def test_none_category_is_uncategorized(self, store):
        event_id = store.append(ALICE, "untagged", None, 1)
        assert store.get(event_id).category == ""
        assert store.events_by_category("") == ()

    def test_index_order_is_creation_order(self, store):
        store.append(ALICE, "a", "x", 1)
        store.append(BOB, "b", "x", 2)
        store.append(ALICE, "c", "y", 3)
        store.append(ALICE, "d", "x", 4)

        assert store.events_by_user(ALICE) == (0, 2, 3)
        assert store.events_by_user(BOB) == (1,)
        assert store.events_by_category("x") == (0, 1, 3)
        assert store.events_by_category("y") == (2,)
        assert store.count_by_user(ALICE) == 3
        assert store.count_by_category("x") == 3

    def test_empty_message_rejected_without_mutation(self, store):
        with pytest.raises(InvalidInput):
            store.append(ALICE, "", "greet", 1)
        assert store.count == 0
        assert store.events_by_user(ALICE) == ()
        assert store.events_by_category("greet") == ()

    def test_message_limit_is_inclusive(self, store):
        store.append(ALICE, "a" * 500, "", 1)
        with pytest.raises(InvalidInput):
            store.append(ALICE, "a" * 501, "", 2)
        assert store.count == 1

    def test_message_limit_counts_utf8_bytes(self, store):
        # 'é' is two bytes in UTF-8: 250 chars == 500 bytes
        store.append(ALICE, "é" * 250, "", 1)
        with pytest.raises(InvalidInput):
            store.append(ALICE, "é" * 250 + "a", "", 2)

    def test_char_semantics_from_config(self):
        store = EventStore(OWNER, config=StoreConfig(length_semantics="chars"))
        store.append(ALICE, "é" * 500, "", 1)
        with pytest.raises(InvalidInput):
            store.append(ALICE, "é" * 501, "", 2)

    def test_timestamps_need_not_be_monotonic(self, store):
        store.append(ALICE, "later", "", 500)
        store.append(ALICE, "earlier", "", 100)
        assert store.get(1).timestamp == 100

    @pytest.mark.parametrize("timestamp", ["100", 1.5, None, True])
    def test_non_integer_timestamp_rejected(self, store, timestamp):
        with pytest.raises(InvalidInput):
            store.append(ALICE, "hello", "", timestamp)
        assert store.count == 0

    @pytest.mark.parametrize("caller", ["", None, "  "])
    def test_zero_caller_rejected(self, store, caller):
        with pytest.raises(Unauthorized):
            store.append(caller, "hello", "", 1)
        assert store.count == 0


# ══════════════════════════════════════════════════════════════
# POINT LOOKUPS
# ══════════════════════════════════════════════════════════════


class TestLookup:
    def test_get_out_of_range(self, store):
        store.append(ALICE, "hello", "", 1)
        with pytest.raises(NotFound) as exc_info:
            store.get(1)
        assert exc_info.value.event_id == 1

    def test_get_negative_id_is_not_found(self, store):
        store.append(ALICE, "hello", "", 1)
        with pytest.raises(NotFound):
            store.get(-1)

    def test_snapshot_is_read_only(self, store):
        store.append(ALICE, "hello", "", 1)
        record = store.get(0)
        with pytest.raises(AttributeError):
            record.message = "changed"

    def test_is_active_out_of_range_is_false(self, store):
        assert store.is_active(0) is False
        store.append(ALICE, "hello", "", 1)
        assert store.is_active(0) is True
        assert store.is_active(1) is False
        assert store.is_active(-1) is False

    def test_unknown_keys_return_empty(self, store):
        assert store.events_by_user("nobody") == ()
        assert store.events_by_category("none") == ()
        assert store.count_by_user("nobody") == 0
        assert store.count_by_category("none") == 0

    def test_index_results_are_copies(self, store):
        store.append(ALICE, "hello", "x", 1)
        ids = store.events_by_user(ALICE)
        store.append(ALICE, "again", "x", 2)
        assert ids == (0,)


# ══════════════════════════════════════════════════════════════
# STATUS TOGGLE
# ══════════════════════════════════════════════════════════════


class TestToggleStatus:
    def test_submitter_flips_flag(self, store):
        store.append(ALICE, "hello", "", 1)
        assert store.toggle_status(ALICE, 0) is False
        assert store.is_active(0) is False
        assert store.get(0).is_active is False

    def test_double_toggle_restores(self, store):
        store.append(ALICE, "hello", "", 1)
        store.toggle_status(ALICE, 0)
        assert store.toggle_status(ALICE, 0) is True
        assert store.is_active(0) is True

    def test_non_submitter_rejected(self, store):
        store.append(ALICE, "hello", "", 1)
        with pytest.raises(Unauthorized):
            store.toggle_status(BOB, 0)
        assert store.is_active(0) is True

    def test_owner_is_not_submitter(self, store):
        store.append(ALICE, "hello", "", 1)
        with pytest.raises(Unauthorized):
            store.toggle_status(OWNER, 0)

    def test_missing_event(self, store):
        with pytest.raises(NotFound):
            store.toggle_status(ALICE, 0)

    def test_only_flag_changes(self, store):
        store.append(ALICE, "hello", "greet", 7)
        before = store.get(0)
        store.toggle_status(ALICE, 0)
        after = store.get(0)

        assert after.id == before.id
        assert after.submitter == before.submitter
        assert after.message == before.message
        assert after.category == before.category
        assert after.timestamp == before.timestamp
        assert before.is_active is True


# ══════════════════════════════════════════════════════════════
# OWNERSHIP
# ══════════════════════════════════════════════════════════════


class TestTransferOwnership:
    def test_non_owner_rejected(self, store):
        with pytest.raises(Unauthorized):
            store.transfer_ownership(ALICE, BOB)
        assert store.owner == OWNER

    @pytest.mark.parametrize("new_owner", ["", None, "0x000000"])
    def test_zero_identity_rejected(self, store, new_owner):
        with pytest.raises(InvalidInput):
            store.transfer_ownership(OWNER, new_owner)
        assert store.owner == OWNER

    def test_transfer_to_self_rejected(self, store):
        with pytest.raises(InvalidInput):
            store.transfer_ownership(OWNER, OWNER)

    def test_transfer_moves_authority(self, store):
        store.transfer_ownership(OWNER, ALICE)
        assert store.owner == ALICE
        assert store.stats().owner == ALICE

        with pytest.raises(Unauthorized):
            store.transfer_ownership(OWNER, BOB)

        store.transfer_ownership(ALICE, BOB)
        assert store.owner == BOB


# ══════════════════════════════════════════════════════════════
# END-TO-END SCENARIO
# ══════════════════════════════════════════════════════════════


class TestScenario:
    def test_hello_world(self, store):
        assert store.append(ALICE, "hello", "greet", 100) == 0
        assert store.append(ALICE, "world", "", 200) == 1

        assert store.events_by_category("greet") == (0,)
        assert store.events_by_category("") == ()
        assert store.latest(5) == (1, 0)
        assert store.by_time_range(0, 150) == (0,)
        assert store.stats() == StoreStats(total=2, active=2, owner=OWNER)

        assert store.toggle_status(ALICE, 0) is False
        assert store.stats() == StoreStats(total=2, active=1, owner=OWNER)
