"""Constants for the Google Maps Platform adapters.

API documentation:
- Places Text Search: https://developers.google.com/maps/documentation/places/web-service/search-text
- Directions: https://developers.google.com/maps/documentation/directions/get-directions
- Geocoding: https://developers.google.com/maps/documentation/geocoding/requests-reverse-geocoding
"""

GOOGLE_MAPS_BASE_URL = "https://maps.googleapis.com/maps/api"
PLACES_TEXT_SEARCH_URL = f"{GOOGLE_MAPS_BASE_URL}/place/textsearch/json"
DIRECTIONS_URL = f"{GOOGLE_MAPS_BASE_URL}/directions/json"
GEOCODE_URL = f"{GOOGLE_MAPS_BASE_URL}/geocode/json"

# Handoff target opened in the system browser / maps app
MAPS_DIRECTIONS_HANDOFF_URL = "https://www.google.com/maps/dir/"

# Response status values
STATUS_OK = "OK"
STATUS_ZERO_RESULTS = "ZERO_RESULTS"
STATUS_NOT_FOUND = "NOT_FOUND"

# Directions travel mode
MODE_DRIVING = "driving"

# Address component types used for reverse geocoded display names
LOCALITY_TYPES = ("locality", "postal_town", "administrative_area_level_3")
REGION_TYPE = "administrative_area_level_1"
COUNTRY_TYPE = "country"

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}
