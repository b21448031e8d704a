"""Pydantic v2 models for decoded Ruuvi records and gateway events."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, TypeAdapter

HexAddress = Annotated[str, StringConstraints(pattern=r"^([0-9a-f]{2})+$|^invalid$")]

MAX_EPOCH_SECONDS = 253402300799


# --- Decoded records ---


class DataFormatV5(BaseModel):
    """Data Format 5 (RAWv2), 24 bytes including the MAC address."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    format: Literal["V5"] = "V5"
    # Lowercase hex without separators, or "invalid" when all bytes are 0xFF
    mac_address: HexAddress
    # degC, -163.835..163.835
    temperature: float | None
    # %, 0..163.835
    humidity: float | None
    # Pa, 50000..115534
    pressure: float | None
    # mG
    acceleration_x: int | None = Field(ge=-32767, le=32767)
    acceleration_y: int | None = Field(ge=-32767, le=32767)
    acceleration_z: int | None = Field(ge=-32767, le=32767)
    # mV
    battery_voltage: int | None = Field(ge=1600, le=3646)
    # dBm, 2 dBm steps
    tx_power: int | None = Field(ge=-40, le=20)
    movement_counter: int | None = Field(ge=0, le=254)
    measurement_sequence: int | None = Field(ge=0, le=65534)


class DataFormatV6(BaseModel):
    """Data Format 6 (RAWv3), 20 bytes including a truncated 3-byte MAC."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    format: Literal["V6"] = "V6"
    temperature: float | None
    humidity: float | None
    # hPa
    pressure: float | None
    # ug/m3
    pm2_5: float | None
    # ppm
    co2: int | None = Field(ge=0, le=40000)
    voc_index: int | None = Field(ge=0, le=500)
    nox_index: int | None = Field(ge=0, le=500)
    # lux, logarithmic encoding on the wire
    luminosity: float | None
    reserved: int = Field(ge=0, le=255)
    measurement_sequence: int = Field(ge=0, le=255)
    flags: int = Field(ge=0, le=255)
    mac_address: HexAddress


class DataFormatE1(BaseModel):
    """Data Format E1 (Extended v1), 40 bytes including the MAC address."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    format: Literal["E1"] = "E1"
    temperature: float | None
    humidity: float | None
    pressure: float | None
    pm1_0: float | None
    pm2_5: float | None
    pm4_0: float | None
    pm10_0: float | None
    co2: int | None = Field(ge=0, le=65534)
    voc_index: int | None = Field(ge=0, le=500)
    nox_index: int | None = Field(ge=0, le=500)
    # lux, 0.01 lux resolution
    luminosity: float | None
    measurement_sequence: int | None = Field(ge=0, le=0xFFFFFE)
    flags: int = Field(ge=0, le=255)
    mac_address: HexAddress


RuuviData = Annotated[
    Union[DataFormatV5, DataFormatV6, DataFormatE1],
    Field(discriminator="format"),
]

ruuvi_data_adapter: TypeAdapter[RuuviData] = TypeAdapter(RuuviData)


# --- Gateway ---


class GatewayEvent(BaseModel):
    """One advertisement as relayed by a Ruuvi Gateway."""

    gw_mac: str
    rssi: int
    aoa: list[float] = []
    # Seconds since epoch, up to 9999-12-31T23:59:59Z
    gwts: int | None = Field(default=None, ge=0, le=MAX_EPOCH_SECONDS)
    ts: int | None = Field(default=None, ge=0, le=MAX_EPOCH_SECONDS)
    data: str
    coords: str | None = None
