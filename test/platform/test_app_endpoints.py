import pytest


pytestmark = pytest.mark.unit


class TestOperationalEndpoints:
    def test_health(self, client):
        response = client.get('/health')

        assert response.status_code == 200
        assert response.json() == {'status': 'healthy', 'service': 'Event Accommodation Service'}

    def test_metrics_exposes_booking_collectors(self, client):
        response = client.get('/metrics')

        assert response.status_code == 200
        assert 'accommodation_booking_requests_total' in response.text
        assert 'accommodation_payments_recorded_total' in response.text

    def test_unknown_route_is_404(self, client):
        assert client.get('/api/nothing-here').status_code == 404
