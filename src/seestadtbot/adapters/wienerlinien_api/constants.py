"""Constants for the Wiener Linien real-time API adapter.

Open Government Data, no API key required.
See https://www.data.gv.at/katalog/dataset/wiener-linien-echtzeitdaten-via-datendrehscheibe-wien
"""

MONITOR_RBL_PARAM = "rbl"
ELEVATOR_STOP_PARAM = "relatedStop"

DEFAULT_HEADERS = {
    "Accept": "application/json",
}
