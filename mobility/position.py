#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Geographic position of a satellite."""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class GeoPosition:
    """
    Geographic position of a satellite.

    Attributes
    ----------
    latitude : float
        Latitude in degrees (-90 to 90, positive north)
    longitude : float
        Longitude in degrees (-180 to 180, positive east)
    altitude : float
        Altitude above Earth's surface in kilometers
    """
    latitude: float
    longitude: float
    altitude: float

    def to_array(self) -> np.ndarray:
        """Position as ``[latitude, longitude, altitude]``."""
        return np.array([self.latitude, self.longitude, self.altitude])

    def __repr__(self) -> str:
        return (f"GeoPosition(lat={self.latitude:.2f}°, "
                f"lon={self.longitude:.2f}°, alt={self.altitude:.1f} km)")
