"""Internal constants shared across the library."""

API_BASE = "https://api.translink.ca/rttiapi/v1"
USER_AGENT = "pyrtti"
REQUEST_TIMEOUT_S = 10.0

# ------------------------------------------------------------------
# Public relays, tried after a custom relay in this order
# ------------------------------------------------------------------

ALLORIGINS_GET = "https://api.allorigins.win/get?disableCache=true&url={url}"
ALLORIGINS_RAW = "https://api.allorigins.win/raw?disableCache=true&url={url}"
CORSPROXY = "https://corsproxy.io/?url={url}"

# Envelope status codes that still carry an upstream body worth parsing.
# RTTI answers application errors (bad key, no buses) with HTTP 500.
PASS_THROUGH_STATUS_CODES: frozenset[int] = frozenset({200, 500})

# ------------------------------------------------------------------
# RTTI vendor error codes
# ------------------------------------------------------------------

NO_BUSES_FOUND_CODES: frozenset[str] = frozenset({"3005", "1012"})
ROUTE_NOT_FOUND_CODES: frozenset[str] = frozenset({"3002"})
INVALID_API_KEY_CODES: frozenset[str] = frozenset({"1002"})

# ------------------------------------------------------------------
# Simulation
# ------------------------------------------------------------------

SIMULATED_ROUTES: tuple[str, ...] = ("099", "019", "005", "R4", "Seabus")
SIMULATION_TIME_SCALE_S = 15.0
SIMULATION_FALLBACK_PATH = "099"
