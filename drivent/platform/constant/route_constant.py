# Common
HEALTH = '/health'
METRICS = '/metrics'

# User & Auth
USER_BASE = '/users'
AUTH_BASE = '/auth'
AUTH_SIGN_IN = f'{AUTH_BASE}/sign-in'

# Event
EVENT_BASE = '/event'

# Enrollment
ENROLLMENT_BASE = '/enrollments'
ENROLLMENT_CEP = f'{ENROLLMENT_BASE}/cep'

# Ticket
TICKET_BASE = '/tickets'
TICKET_TYPES = f'{TICKET_BASE}/types'

# Payment
PAYMENT_BASE = '/payments'
PAYMENT_PROCESS = f'{PAYMENT_BASE}/process'

# Hotel
HOTEL_BASE = '/hotels'

# Booking
BOOKING_BASE = '/booking'
