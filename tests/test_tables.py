from tourism_atlas.data.aggregation import build_activities
from tourism_atlas.data.records import Category, HotelRecord, RestaurantRecord
from tourism_atlas.ui.components.charts import counts_frame
from tourism_atlas.ui.components.kpi import KpiCard, _format_value
from tourism_atlas.ui.components.tables import display_frame


def test_display_frame_fills_placeholders_and_status_text() -> None:
    activities = build_activities(
        {
            Category.HOTEL: [HotelRecord(name="H", city="طرابلس", status="active", date="2024-01-01")],
            Category.RESTAURANT: [RestaurantRecord(name="R")],
        }
    )

    df = display_frame(activities)

    assert list(df.columns) == ["النوع", "الاسم", "المدينة", "التصنيف", "الحالة", "التاريخ"]
    assert df.iloc[0].tolist() == ["فندق", "H", "طرابلس", "غير مصنف", "نشط", "2024-01-01"]
    assert df.iloc[1].tolist() == ["مطعم", "R", "غير محدد", "متنوع", "قيد المراجعة", "غير محدد"]


def test_counts_frame_uses_statistic_labels() -> None:
    df = counts_frame({Category.HOTEL: 3, Category.BEACH: 0})
    assert df.to_dict("records") == [
        {"category": "الفنادق", "count": 3},
        {"category": "الشواطئ", "count": 0},
    ]


def test_kpi_card_value_is_grouped_count() -> None:
    assert _format_value(KpiCard(label="الفنادق", value=1234)) == "1,234"
    assert _format_value(KpiCard(label="الشواطئ")) == "–"
