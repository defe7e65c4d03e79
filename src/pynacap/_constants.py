"""Internal constants shared across the library."""

BINDING_ID = "netatmo"
VENDOR = "Netatmo"

# ------------------------------------------------------------------
# Thing property keys
# ------------------------------------------------------------------

PROPERTY_THING_TYPE_VERSION = "thingTypeVersion"
PROPERTY_MODEL_ID = "modelId"
PROPERTY_VENDOR = "vendor"
PROPERTY_FIRMWARE_VERSION = "firmwareVersion"
PROPERTY_REFRESH_PERIOD = "refreshPeriod"

# ------------------------------------------------------------------
# Thing status reasons (translation keys)
# ------------------------------------------------------------------

STATUS_DEVICE_NOT_CONNECTED = "@text/device-not-connected"

# ------------------------------------------------------------------
# Refresh timing (seconds)
# ------------------------------------------------------------------

PROBING_INTERVAL = 120.0
OFFLINE_INTERVAL = 15 * 60.0
