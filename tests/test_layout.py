from datetime import date

import pytest

from timebox.engine import ColumnScope, GridConfig, PackingOrder, layout_day, layout_week

DAY = date(2024, 3, 1)


def test_layout_day_scenario(make_activity):
    activities = [
        make_activity("11:00", "12:00", day=DAY, title="c"),
        make_activity("09:30", "10:30", day=DAY, title="b"),
        make_activity("09:00", "10:00", day=DAY, title="a"),
        make_activity("09:00", "10:00", day=date(2024, 3, 2)),
    ]
    layout = layout_day(activities, DAY, GridConfig())

    assert [block.activity.title for block in layout.blocks] == ["a", "b", "c"]
    assert [block.column for block in layout.blocks] == [0, 1, 0]
    assert layout.total_columns == 2
    assert layout.blocks[0].top == pytest.approx(3 * 48)
    assert layout.blocks[0].height == pytest.approx(48)


def test_layout_day_input_order(make_activity):
    activities = [
        make_activity("10:00", "11:00", day=DAY, title="late"),
        make_activity("09:00", "12:00", day=DAY, title="long"),
    ]
    layout = layout_day(activities, DAY, GridConfig(), order=PackingOrder.INPUT)
    assert [(block.activity.title, block.column) for block in layout.blocks] == [("late", 0), ("long", 1)]


def test_layout_day_cluster_scope(make_activity):
    activities = [
        make_activity("09:00", "10:00", day=DAY),
        make_activity("09:30", "10:30", day=DAY),
        make_activity("14:00", "15:00", day=DAY, title="alone"),
    ]
    layout = layout_day(activities, DAY, GridConfig(), scope=ColumnScope.CLUSTER)
    widths = {block.activity.title: block.total_columns for block in layout.blocks}
    assert widths["alone"] == 1
    assert layout.total_columns == 2


def test_block_fractions_and_css_box(make_activity):
    activities = [make_activity("09:00", "10:00", day=DAY), make_activity("09:30", "10:30", day=DAY)]
    second = layout_day(activities, DAY, GridConfig()).blocks[1]
    assert second.left_fraction == 0.5
    assert second.width_fraction == 0.5
    assert second.css_box() == {
        "top": "168px",
        "height": "48px",
        "left": "calc(50% + 8px)",
        "width": "calc((100% - 12px) / 2)",
    }


def test_empty_day_layout():
    layout = layout_day([], DAY, GridConfig())
    assert layout.blocks == []
    assert layout.total_columns == 0
    assert len(layout) == 0


def test_layout_week_returns_seven_days(make_activity):
    activities = [
        make_activity(day=date(2024, 2, 25)),
        make_activity(day=date(2024, 3, 2)),
        make_activity(day=date(2024, 3, 3)),
    ]
    layouts = layout_week(activities, DAY, GridConfig())
    assert [layout.day for layout in layouts][0] == date(2024, 2, 25)
    assert [len(layout) for layout in layouts] == [1, 0, 0, 0, 0, 0, 1]
