# Test Utility Constants

from datetime import date


# Test users (identities come from the bearer token, no user table here)
ADMIN_USER_ID = 1
ORGANIZER_USER_ID = 2
PARTICIPANT_USER_ID = 3
ANOTHER_PARTICIPANT_USER_ID = 4

ADMIN_EMAIL = 'admin@test.com'
ORGANIZER_EMAIL = 'organizer@test.com'
PARTICIPANT_EMAIL = 'participant@test.com'
ANOTHER_PARTICIPANT_EMAIL = 'another_participant@test.com'

# Inventory
DEFAULT_ACCOMMODATION_NAME = 'Harbour View Hotel'
DEFAULT_LOCATION = 'Keelung'
DEFAULT_PRICE_PER_NIGHT = '100.00'
DEFAULT_EVENT_TITLE = 'PyCon Taiwan'

# Fixed "today" for date rules; stays below are all after it
TODAY = date(2025, 5, 1)
