from prometheus_client import Counter, Histogram


class BookingMetrics:
    """
    Accommodation booking metrics collector

    Tracks booking outcomes (created / conflict) and ledger activity, exposed at /metrics.
    """

    def __init__(self):
        # ========== Booking Metrics ==========
        self.booking_requests = Counter(
            'accommodation_booking_requests_total',
            'Total booking create attempts',
            ['result'],  # result: created/conflict
        )

        self.booking_create_duration = Histogram(
            'accommodation_booking_create_duration_seconds',
            'Booking create unit-of-work duration',
            buckets=[0.005, 0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0],
        )

        self.booking_status_changes = Counter(
            'accommodation_booking_status_changes_total',
            'Booking lifecycle transitions',
            ['to_status'],
        )

        # ========== Payment Metrics ==========
        self.payments_recorded = Counter(
            'accommodation_payments_recorded_total',
            'Payments appended to booking ledgers',
            ['payment_method', 'payment_status'],
        )

    # ========== Helper Methods ==========

    def record_booking_created(self, *, duration: float) -> None:
        self.booking_requests.labels(result='created').inc()
        self.booking_create_duration.observe(duration)

    def record_booking_conflict(self) -> None:
        self.booking_requests.labels(result='conflict').inc()

    def record_status_change(self, *, to_status: str) -> None:
        self.booking_status_changes.labels(to_status=to_status).inc()

    def record_payment(self, *, payment_method: str, payment_status: str) -> None:
        self.payments_recorded.labels(
            payment_method=payment_method, payment_status=payment_status
        ).inc()


# Global metrics instance
metrics = BookingMetrics()
