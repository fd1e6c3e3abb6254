"""Internal constants shared across the library."""

BASE_URL = "https://platform.antares.id:8443"
CSE_PATH = "/~/antares-cse/antares-id"
DEFAULT_APPLICATION = "ParkiranSistem"
DEFAULT_DEVICE = "slotParkir"

#: Header carrying the Antares access key (oneM2M originator).
ORIGIN_HEADER = "X-M2M-Origin"
#: Top-level key of a oneM2M content instance response.
CONTENT_INSTANCE_KEY = "m2m:cin"

#: Number of parking slots in the lot.
CAPACITY = 10

DEFAULT_POLL_INTERVAL = 3.0
DEFAULT_REQUEST_TIMEOUT = 10.0

#: Record name the daily baseline is stored under.
BASELINE_KEY = "dailyOffset"

# ------------------------------------------------------------------
# Wire keys of the device payload
# ------------------------------------------------------------------

KEY_VEHICLES_IN = "carMasuk"
KEY_VEHICLES_OUT = "carKeluar"
KEY_SLOTS_REMAINING = "slotTersisa"
