"""Helpers for normalising observer place inputs."""

import os
from typing import Any, Dict, Optional, Tuple

from timezonefinder import TimezoneFinder

_TF = TimezoneFinder()


DEF_LAT = float(os.getenv("DEFAULT_PLACE_LAT", "21.4225"))
DEF_LON = float(os.getenv("DEFAULT_PLACE_LON", "39.8262"))
DEF_TZ = os.getenv("DEFAULT_PLACE_TZ", "Asia/Riyadh")
DEF_LBL = os.getenv("DEFAULT_PLACE_LABEL", "Makkah, Saudi Arabia")


def clamp_lat_lon(lat: float, lon: float) -> Tuple[float, float]:
    """Clamp latitude/longitude to safe ranges."""

    lat = max(min(lat, 89.9), -89.9)
    lon = ((lon + 180.0) % 360.0) - 180.0  # wrap to [-180, 180)
    return lat, lon


def infer_tz(lat: float, lon: float) -> Optional[str]:
    """Infer timezone name for a coordinate pair."""

    return _TF.timezone_at(lng=lon, lat=lat)


def normalize_place(place: Optional[Dict[str, Any]]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Normalise place payload and capture metadata flags."""

    flags: Dict[str, Any] = {
        "place_defaults_used": False,
        "tz_inferred": False,
        "default_reason": None,
    }

    if not place or place.get("lat") is None or place.get("lon") is None:
        reason = "missing_place" if not place else "missing_latlon"
        flags.update({"place_defaults_used": True, "default_reason": reason})
        place = place or {}
        return {
            "lat": DEF_LAT,
            "lon": DEF_LON,
            "tz": place.get("tz") or DEF_TZ,
            "query": place.get("query") or DEF_LBL,
        }, flags

    lat, lon = clamp_lat_lon(float(place["lat"]), float(place["lon"]))
    tz = place.get("tz")

    if not tz:
        tz_guess = infer_tz(lat, lon)
        if tz_guess:
            tz = tz_guess
            flags["tz_inferred"] = True
        else:
            tz = "UTC"
        flags["default_reason"] = "missing_tz"

    eff_lbl = place.get("query") or f"{lat:.4f}, {lon:.4f}"
    return {"lat": lat, "lon": lon, "tz": tz, "query": eff_lbl}, flags
