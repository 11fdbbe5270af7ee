# geo.py
"""
Cálculos sobre la esfera para la búsqueda por radio.

La distancia se convierte en un radio angular (radianes) dividiéndola por
el radio de la Tierra; un punto está dentro del casquete esférico si su
distancia de círculo máximo al centro, sobre esa misma esfera, no supera
la distancia pedida.
"""
import math
from typing import Optional, Tuple

from geopy.distance import great_circle

from eventfence.settings import settings


def angular_radius(distance: float, earth_radius: Optional[float] = None) -> float:
    """Radio angular en radianes para una distancia en km"""
    if distance < 0:
        raise ValueError("distance no puede ser negativa")
    return distance / (earth_radius or settings.earth_radius_km)


def within_distance(latitude: float, longitude: float,
                    center_lat: float, center_lon: float, distance: float,
                    earth_radius: Optional[float] = None) -> bool:
    """Distancia de círculo máximo al centro <= distance (km)"""
    if distance == 0:
        return latitude == center_lat and longitude == center_lon

    arc = great_circle(
        (center_lat, center_lon),
        (latitude, longitude),
        radius=earth_radius or settings.earth_radius_km,
    )
    return arc.km <= distance


def latitude_band(center_lat: float, radius: float) -> Tuple[float, float]:
    """Banda de latitudes que contiene todo el casquete (prefiltro en SQL)"""
    delta = math.degrees(radius)
    return max(-90.0, center_lat - delta), min(90.0, center_lat + delta)
