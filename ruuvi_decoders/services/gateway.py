"""Gateway service: turns Ruuvi Gateway advertisement events into flat JSON-ready dicts."""

import logging
from collections import Counter

from ruuvi_decoders.air_quality import calculate_air_quality
from ruuvi_decoders.decoder import decode, extract_ruuvi_from_ble
from ruuvi_decoders.errors import DecodeError
from ruuvi_decoders.schemas import GatewayEvent
from ruuvi_decoders.utils.timestamps import from_epoch_seconds, utc_now

logger = logging.getLogger(__name__)


class GatewayProcessor:
    """Processes gateway events into decoded measurement dicts.

    Keeps running counters; an instance is meant to be owned by one consumer.
    """

    def __init__(self, min_rssi: int | None = None) -> None:
        self.min_rssi = min_rssi
        self.total_events = 0
        self.ruuvi_events = 0
        self.decoded_events = 0
        self.errors: Counter[str] = Counter()

    def process_event(self, event: GatewayEvent) -> dict | None:
        """Process a single gateway event.

        Returns the measurement dict or None if the event is filtered out,
        carries no Ruuvi payload, or fails to decode.
        """
        self.total_events += 1

        # 1. Signal strength filter
        if self.min_rssi is not None and event.rssi < self.min_rssi:
            logger.debug("Dropping event from %s: rssi %d below %d",
                         event.gw_mac, event.rssi, self.min_rssi)
            return None

        # 2. Locate the Ruuvi payload behind the manufacturer marker
        payload_hex = extract_ruuvi_from_ble(event.data)
        if payload_hex is None:
            return None
        self.ruuvi_events += 1

        # 3. Decode (length and format checks happen here)
        try:
            record = decode(payload_hex)
        except DecodeError as exc:
            self.errors[type(exc).__name__] += 1
            logger.warning("Failed to decode Ruuvi payload via %s: %s", event.gw_mac, exc)
            return None
        self.decoded_events += 1

        # 4. Gateway timestamp if present, else receive time
        if event.ts is not None:
            observed_at = from_epoch_seconds(event.ts)
        elif event.gwts is not None:
            observed_at = from_epoch_seconds(event.gwts)
        else:
            observed_at = utc_now()

        # 5. Flatten record and gateway metadata
        msg = record.model_dump()
        msg.update({
            "gw_mac": event.gw_mac,
            "rssi": event.rssi,
            "observed_at": observed_at,
            "air_quality": calculate_air_quality(record),
        })
        return msg
