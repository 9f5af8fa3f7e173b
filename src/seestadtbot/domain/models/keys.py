"""Enumerations for vehicle types, stations and lines.

Only the stations and lines around Aspern Seestadt are supported. The Wiener
Linien network has over 5,300 stations and more than 160 lines.
"""

from enum import StrEnum


class VehicleType(StrEnum):
    """Vehicle category a line belongs to."""

    BUS = "BUS"
    TRAM = "TRAM"
    UBAHN = "UBAHN"


class StationKey(StrEnum):
    """Three-letter keys of the known stations."""

    ASP = "ASP"
    HAU = "HAU"
    NOR = "NOR"
    # Planned stations without lines yet; the registry does not know them.
    IBS = "IBS"
    KRG = "KRG"
    SEE = "SEE"
    CTS = "CTS"
    MTP = "MTP"
    HAP = "HAP"
    JKG = "JKG"


class LineKey(StrEnum):
    """Keys of the supported lines. The value is the public line name."""

    WL_U2 = "U2"
    WL_98A = "98A"
    WL_97A = "97A"
    WL_93A = "93A"
    WL_89A = "89A"
    WL_88A = "88A"
    WL_88B = "88B"
    WL_84A = "84A"
    WL_26A = "26A"
