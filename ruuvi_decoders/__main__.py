"""Entry point: python -m ruuvi_decoders [decode|extract|gateway] <argument>"""

import json
import sys

import structlog
from pydantic import ValidationError

from ruuvi_decoders.config import Settings
from ruuvi_decoders.decoder import decode, extract_ruuvi_from_ble
from ruuvi_decoders.errors import DecodeError
from ruuvi_decoders.logging_config import configure_logging
from ruuvi_decoders.schemas import GatewayEvent, ruuvi_data_adapter
from ruuvi_decoders.services.gateway import GatewayProcessor

USAGE = "Usage: python -m ruuvi_decoders [decode|extract|gateway] <argument>"

log = structlog.get_logger()


def run_decode(hex_data: str) -> int:
    try:
        record = decode(hex_data)
    except DecodeError as exc:
        log.error("decode failed", error=str(exc), kind=type(exc).__name__)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(ruuvi_data_adapter.dump_json(record).decode())
    return 0


def run_extract(ble_data: str) -> int:
    payload = extract_ruuvi_from_ble(ble_data)
    if payload is None:
        print("Error: no Ruuvi manufacturer data found", file=sys.stderr)
        return 1
    print(payload)
    return 0


def run_gateway(event_json: str, settings: Settings) -> int:
    try:
        event = GatewayEvent.model_validate_json(event_json)
    except ValidationError as exc:
        print(f"Error: invalid gateway event: {exc}", file=sys.stderr)
        return 1

    processor = GatewayProcessor(min_rssi=settings.MIN_RSSI)
    msg = processor.process_event(event)
    if msg is None:
        print("Error: event produced no measurement", file=sys.stderr)
        return 1
    print(json.dumps(msg))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        print(USAGE, file=sys.stderr)
        return 1

    settings = Settings()
    configure_logging(settings.SERVICE_NAME, settings.LOG_LEVEL)

    command, argument = args
    if command == "decode":
        return run_decode(argument)
    elif command == "extract":
        return run_extract(argument)
    elif command == "gateway":
        return run_gateway(argument, settings)
    else:
        print(f"Unknown command: {command}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
