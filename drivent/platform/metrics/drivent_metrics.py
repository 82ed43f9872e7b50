from prometheus_client import Counter, Histogram


class DriventMetrics:
    """
    Business metrics exposed on /metrics

    Tracks the registration funnel: sign-up -> enrollment -> ticket -> payment -> booking
    """

    def __init__(self) -> None:
        self.users_created = Counter('drivent_users_created_total', 'Total user sign-ups')

        self.sign_ins = Counter(
            'drivent_sign_ins_total',
            'Sign-in attempts',
            ['result'],  # result: success/invalid_credentials
        )

        self.enrollments_upserted = Counter(
            'drivent_enrollments_upserted_total',
            'Enrollment creations and updates',
            ['operation'],  # operation: create/update
        )

        self.tickets_reserved = Counter(
            'drivent_tickets_reserved_total', 'Tickets reserved', ['ticket_type_id']
        )

        self.payments_processed = Counter(
            'drivent_payments_processed_total', 'Payments processed', ['card_issuer']
        )

        self.payment_value = Histogram(
            'drivent_payment_value',
            'Value of processed payments',
            buckets=[50, 100, 250, 500, 1000, 2500, 5000],
        )

        self.booking_operations = Counter(
            'drivent_booking_operations_total',
            'Booking operations',
            ['operation', 'result'],  # operation: create/change/cancel
        )

    # ========== Helper Methods ==========

    def record_sign_in(self, *, success: bool) -> None:
        self.sign_ins.labels(result='success' if success else 'invalid_credentials').inc()

    def record_payment(self, *, card_issuer: str, value: int) -> None:
        self.payments_processed.labels(card_issuer=card_issuer).inc()
        self.payment_value.observe(value)

    def record_booking(self, *, operation: str, result: str) -> None:
        self.booking_operations.labels(operation=operation, result=result).inc()


# Global metrics instance
metrics = DriventMetrics()
