# API Route Constants

# Base API
API_BASE = '/api'

# Accommodation routes
ACCOMMODATION_BASE = f'{API_BASE}/accommodation'
ACCOMMODATION_LIST = ACCOMMODATION_BASE
ACCOMMODATION_CREATE = ACCOMMODATION_BASE
ACCOMMODATION_GET = f'{ACCOMMODATION_BASE}/{{accommodation_id}}'
ACCOMMODATION_UPDATE = f'{ACCOMMODATION_BASE}/{{accommodation_id}}'
ACCOMMODATION_DELETE = f'{ACCOMMODATION_BASE}/{{accommodation_id}}'
ACCOMMODATION_AVAILABILITY_SUMMARY = f'{ACCOMMODATION_BASE}/availability/summary'
ACCOMMODATION_AVAILABLE_ROOMS = f'{ACCOMMODATION_BASE}/{{accommodation_id}}/available-rooms'

# Room routes
ROOM_CREATE = f'{ACCOMMODATION_BASE}/{{accommodation_id}}/rooms'
ROOM_UPDATE = f'{ACCOMMODATION_BASE}/rooms/{{room_id}}'
ROOM_DELETE = f'{ACCOMMODATION_BASE}/rooms/{{room_id}}'
ROOM_CONFLICT = f'{ACCOMMODATION_BASE}/rooms/{{room_id}}/conflict'

# Booking routes
BOOKING_BASE = f'{ACCOMMODATION_BASE}/bookings'
BOOKING_CREATE = BOOKING_BASE
BOOKING_LIST = BOOKING_BASE
BOOKING_MY_BOOKINGS = f'{BOOKING_BASE}/my'
BOOKING_GET = f'{BOOKING_BASE}/{{booking_id}}'
BOOKING_STATUS = f'{BOOKING_BASE}/{{booking_id}}/status'
BOOKING_CANCEL = f'{BOOKING_BASE}/{{booking_id}}/cancel'
BOOKING_PAYMENTS = f'{BOOKING_BASE}/{{booking_id}}/payments'

# Report routes
REPORT_GET = f'{ACCOMMODATION_BASE}/reports'
