DEFAULT_API_URL = "http://localhost:5000/api"

NEARBY_PROFESSIONALS_PATH = "/users/nearby/professionals"
NEARBY_AMBULANCES_PATH = "/users/nearby/ambulances"

BOOKING_PATH = "/appointments/book"

IP_LOCATION_URL = "http://ip-api.com/json/"
