"""
Report aggregation over a settled snapshot

Revenue, occupancy, popularity and timeline figures only count live (non-cancelled)
bookings. The status breakdown keeps cancelled ones so the audit trail adds up.
"""

from collections import Counter, defaultdict
from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, Iterable, List, Sequence, Set

from src.service.accommodation.domain.entity.accommodation_entity import (
    ROOM_TYPE_ORDER,
    Accommodation,
    RoomType,
)
from src.service.accommodation.domain.entity.booking_entity import BookingStatus, PaymentStatus
from src.service.accommodation.domain.value_object.money import ZERO, percentage, to_money
from src.service.accommodation.domain.value_object.report import (
    AccommodationReport,
    BookingReportRow,
    EventBreakdownItem,
    OccupancyRate,
    ReportFilter,
    RevenueSummary,
    RoomTypePopularity,
    StatusBreakdownItem,
    TimelineBucket,
)


RECENT_BOOKINGS_LIMIT = 5
_STATUS_ORDER = {status: index for index, status in enumerate(BookingStatus)}
_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _money_sum(values: Iterable[Decimal]) -> Decimal:
    return to_money(sum(values, ZERO))


def summarize_revenue(rows: Sequence[BookingReportRow]) -> RevenueSummary:
    live = [row for row in rows if row.is_active]
    collected = _money_sum(
        row.total_price for row in live if row.payment_status == PaymentStatus.COMPLETED
    )
    total = _money_sum(row.total_price for row in live)
    return RevenueSummary(
        total_bookings=len(live),
        total_revenue=total,
        collected_revenue=collected,
        pending_revenue=to_money(total - collected),
    )


def break_down_by_status(rows: Sequence[BookingReportRow]) -> List[StatusBreakdownItem]:
    counts: Counter[BookingStatus] = Counter()
    revenue: Dict[BookingStatus, Decimal] = defaultdict(lambda: ZERO)
    for row in rows:
        counts[row.status] += 1
        revenue[row.status] += row.total_price

    items = [
        StatusBreakdownItem(status=status, count=count, revenue=to_money(revenue[status]))
        for status, count in counts.items()
    ]
    return sorted(items, key=lambda item: (-item.count, _STATUS_ORDER[item.status]))


def compute_occupancy(
    *, accommodations: Iterable[Accommodation], rows: Sequence[BookingReportRow]
) -> List[OccupancyRate]:
    """booked_rooms / total_rooms * 100 per accommodation, both counted as distinct rooms"""
    live_by_accommodation: Dict[int, List[BookingReportRow]] = defaultdict(list)
    for row in rows:
        if row.is_active:
            live_by_accommodation[row.accommodation_id].append(row)

    rates: List[OccupancyRate] = []
    for accommodation in accommodations:
        if accommodation.id is None:
            continue
        room_ids: Set[int] = {room.id for room in accommodation.rooms if room.id is not None}
        live = live_by_accommodation.get(accommodation.id, [])
        booked_room_ids = {row.room_id for row in live if row.room_id in room_ids}
        rates.append(
            OccupancyRate(
                id=accommodation.id,
                name=accommodation.name,
                location=accommodation.location,
                total_rooms=len(room_ids),
                booked_rooms=len(booked_room_ids),
                occupancy_rate=percentage(len(booked_room_ids), len(room_ids)),
                total_revenue=_money_sum(row.total_price for row in live),
                rate_per_night=to_money(accommodation.price_per_night),
                total_nights_booked=sum(row.nights for row in live),
            )
        )
    return sorted(rates, key=lambda rate: (-rate.occupancy_rate, rate.id))


def compute_room_type_popularity(
    *, accommodations: Iterable[Accommodation], rows: Sequence[BookingReportRow]
) -> List[RoomTypePopularity]:
    """Only room types that have at least one live booking are listed"""
    rooms_per_type: Dict[RoomType, Set[int]] = defaultdict(set)
    for accommodation in accommodations:
        for room in accommodation.rooms:
            if room.id is not None:
                rooms_per_type[room.room_type].add(room.id)

    bookings_per_type: Counter[RoomType] = Counter(row.room_type for row in rows if row.is_active)
    items = [
        RoomTypePopularity(
            room_type=room_type,
            total_rooms=len(rooms_per_type[room_type]),
            bookings=bookings,
            popularity_percent=percentage(bookings, len(rooms_per_type[room_type])),
        )
        for room_type, bookings in bookings_per_type.items()
    ]
    return sorted(items, key=lambda item: (-item.bookings, ROOM_TYPE_ORDER[item.room_type]))


def build_timeline(rows: Sequence[BookingReportRow]) -> List[TimelineBucket]:
    counts: Counter[str] = Counter()
    revenue: Dict[str, Decimal] = defaultdict(lambda: ZERO)
    for row in rows:
        if not row.is_active:
            continue
        month = row.check_in_date.strftime('%Y-%m')
        counts[month] += 1
        revenue[month] += row.total_price

    return [
        TimelineBucket(month=month, bookings=counts[month], revenue=to_money(revenue[month]))
        for month in sorted(counts)
    ]


def break_down_by_event(rows: Sequence[BookingReportRow]) -> List[EventBreakdownItem]:
    titles: Dict[int, str | None] = {}
    counts: Counter[int] = Counter()
    revenue: Dict[int, Decimal] = defaultdict(lambda: ZERO)
    for row in rows:
        if not row.is_active:
            continue
        titles[row.event_id] = row.event_title
        counts[row.event_id] += 1
        revenue[row.event_id] += row.total_price

    items = [
        EventBreakdownItem(
            event_id=event_id,
            event_title=titles[event_id],
            booking_count=count,
            total_revenue=to_money(revenue[event_id]),
        )
        for event_id, count in counts.items()
    ]
    return sorted(items, key=lambda item: (-item.total_revenue, item.event_id))


def pick_recent(
    rows: Sequence[BookingReportRow], limit: int = RECENT_BOOKINGS_LIMIT
) -> List[BookingReportRow]:
    ordered = sorted(rows, key=lambda row: (row.created_at or _EPOCH, row.id), reverse=True)
    return ordered[:limit]


def aggregate_report(
    *,
    report_filter: ReportFilter,
    accommodations: Sequence[Accommodation],
    rows: Iterable[BookingReportRow],
) -> AccommodationReport:
    """
    Build the full report from a consistent snapshot

    Args:
        report_filter: Window applied to every section
        accommodations: Accommodations with their rooms loaded (occupancy denominators)
        rows: Candidate bookings; rows outside the window are ignored

    Returns:
        AccommodationReport with every section computed from the same rows
    """
    in_window = [row for row in rows if report_filter.matches(row)]
    scoped_accommodations = [
        accommodation
        for accommodation in accommodations
        if report_filter.accommodation_id is None
        or accommodation.id == report_filter.accommodation_id
    ]
    return AccommodationReport(
        summary=summarize_revenue(in_window),
        status_breakdown=break_down_by_status(in_window),
        occupancy_rates=compute_occupancy(accommodations=scoped_accommodations, rows=in_window),
        room_type_popularity=compute_room_type_popularity(
            accommodations=scoped_accommodations, rows=in_window
        ),
        booking_timeline=build_timeline(in_window),
        event_breakdown=break_down_by_event(in_window),
        recent_bookings=pick_recent(in_window),
    )
