from collections import defaultdict

from timebox.engine import ColumnScope, PackingOrder, pack_columns, pack_columns_by_cluster, packing_order, overlaps
from timebox.engine.columns import assign_columns, overlap_clusters


def test_scenario_two_columns(make_activity):
    first = make_activity("09:00", "10:00")
    second = make_activity("09:30", "10:30")
    third = make_activity("11:00", "12:00")

    slots = pack_columns([first, second, third])

    assert [slots[item.id].column for item in (first, second, third)] == [0, 1, 0]
    assert {slot.total_columns for slot in slots.values()} == {2}


def test_empty_day():
    assert pack_columns([]) == {}


def test_columns_never_hold_overlaps(make_activity):
    activities = [
        make_activity("08:00", "09:30"),
        make_activity("09:00", "10:00"),
        make_activity("09:15", "11:00"),
        make_activity("10:00", "10:30"),
        make_activity("10:45", "12:00"),
        make_activity("08:30", "08:45"),
    ]
    slots = pack_columns(activities)
    by_column = defaultdict(list)
    for activity in activities:
        by_column[slots[activity.id].column].append(activity)
    for members in by_column.values():
        for index, first in enumerate(members):
            for second in members[index + 1 :]:
                assert not overlaps(first, second)
    assert {slot.total_columns for slot in slots.values()} == {len(by_column)}


def test_packer_keeps_caller_order(make_activity):
    late = make_activity("10:00", "11:00")
    early_long = make_activity("09:00", "12:00")
    early_short = make_activity("09:00", "09:30")

    slots = pack_columns([late, early_long, early_short])

    assert slots[late.id].column == 0
    assert slots[early_long.id].column == 1
    assert slots[early_short.id].column == 0
    assert slots[late.id].total_columns == 2


def test_packing_order_by_start(make_activity):
    late = make_activity("10:00", "11:00", title="b")
    early = make_activity("09:00", "09:30", title="a")
    tie = make_activity("09:00", "09:30", title="0")
    assert packing_order([late, early, tie], PackingOrder.START) == [tie, early, late]
    assert packing_order([late, early, tie], PackingOrder.INPUT) == [late, early, tie]
    assert packing_order([late, early], "start") == [early, late]


def test_isolated_activity_narrowed_by_day_count(make_activity):
    pair = [make_activity("09:00", "10:00"), make_activity("09:30", "10:30")]
    alone = make_activity("14:00", "15:00")

    day_slots = pack_columns(pair + [alone])
    cluster_slots = pack_columns_by_cluster(pair + [alone])

    assert day_slots[alone.id].total_columns == 2
    assert cluster_slots[alone.id].total_columns == 1
    assert cluster_slots[alone.id].column == 0
    assert [cluster_slots[item.id].total_columns for item in pair] == [2, 2]


def test_overlap_clusters_follow_chains(make_activity):
    first = make_activity("09:00", "10:00")
    bridge = make_activity("09:45", "11:15")
    last = make_activity("11:00", "12:00")
    other = make_activity("15:00", "16:00")
    clusters = overlap_clusters([first, other, bridge, last])
    assert clusters == [[first, bridge, last], [other]]


def test_assign_columns_scope(make_activity):
    pair = [make_activity("09:00", "10:00"), make_activity("09:30", "10:30")]
    alone = make_activity("14:00", "15:00")
    activities = pair + [alone]
    assert assign_columns(activities)[alone.id].total_columns == 2
    assert assign_columns(activities, scope=ColumnScope.CLUSTER)[alone.id].total_columns == 1
    assert assign_columns(activities, scope="cluster")[alone.id].total_columns == 1


def test_degenerate_intervals_share_first_column(make_activity):
    inverted = make_activity("11:00", "10:00")
    zero = make_activity("09:00", "09:00")
    normal = make_activity("08:00", "12:00")
    slots = pack_columns([normal, inverted, zero])
    assert {slot.column for slot in slots.values()} == {0}
    assert {slot.total_columns for slot in slots.values()} == {1}
