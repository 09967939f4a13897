"""Visitor geolocation from edge-proxy headers, with an optional GeoIP fallback."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import unquote

import geoip2.database
import geoip2.errors

from tracker.core.config import settings
from tracker.services.client_context import ClientContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeoInfo:
    country: str | None = None
    region: str | None = None
    city: str | None = None


@lru_cache(maxsize=1)
def _get_geoip_reader(path: str) -> geoip2.database.Reader | None:
    if not os.path.exists(path):
        logger.warning("GEOIP_DB_PATH %s does not exist, GeoIP lookup disabled", path)
        return None
    return geoip2.database.Reader(path)


def _header(context: ClientContext, name: str) -> str | None:
    value = context.headers.get(name.lower())
    if not value:
        return None
    return unquote(value).strip() or None


def lookup_ip(ip: str | None) -> GeoInfo:
    """Resolve an IP with the local MaxMind City database, if configured."""
    if not ip or not settings.GEOIP_DB_PATH:
        return GeoInfo()
    reader = _get_geoip_reader(settings.GEOIP_DB_PATH)
    if reader is None:
        return GeoInfo()
    try:
        resp = reader.city(ip)
    except (geoip2.errors.AddressNotFoundError, ValueError):
        return GeoInfo()
    return GeoInfo(
        country=resp.country.iso_code or resp.registered_country.iso_code,
        region=resp.subdivisions.most_specific.iso_code,
        city=resp.city.name,
    )


def resolve_geo(context: ClientContext) -> GeoInfo:
    """Location hints from headers first; GeoIP only when no country hint was sent."""
    country = _header(context, settings.GEO_COUNTRY_HEADER)
    if country is None:
        return lookup_ip(context.client_ip)
    return GeoInfo(
        country=country,
        region=_header(context, settings.GEO_REGION_HEADER),
        city=_header(context, settings.GEO_CITY_HEADER),
    )
