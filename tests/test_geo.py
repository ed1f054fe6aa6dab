import os
import sys
from datetime import datetime, timedelta

import pytest

# Add src to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

from tripmemo.geo import haversine_distance_km, photo_distance_km, speed_kmh
from tripmemo.models import Photo

T0 = datetime(2024, 3, 6, 10, 7, 13)


class TestHaversine:
    """Great-circle distance."""

    def test_same_point_is_zero(self):
        assert haversine_distance_km(35.6762, 139.6503, 35.6762, 139.6503) == 0.0

    def test_one_degree_of_latitude(self):
        """One degree along a meridian is 6371 * pi / 180 km."""
        assert haversine_distance_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(111.195, abs=0.001)

    def test_tokyo_osaka(self):
        """Tokyo to Osaka is roughly 400 km as the crow flies."""
        distance = haversine_distance_km(35.6762, 139.6503, 34.6937, 135.5023)
        assert 390 < distance < 405

    def test_symmetric(self):
        a = haversine_distance_km(40.7128, -74.0060, 51.5074, -0.1278)
        b = haversine_distance_km(51.5074, -0.1278, 40.7128, -74.0060)
        assert a == pytest.approx(b)

    def test_antipodes(self):
        """Half the circumference between antipodal points."""
        assert haversine_distance_km(0.0, 0.0, 0.0, 180.0) == pytest.approx(20015.09, abs=0.01)


class TestSpeed:
    """Speed between two photos."""

    def test_speed_between_photos(self):
        a = Photo("a", T0, 0.0, 0.0)
        b = Photo("b", T0 + timedelta(hours=1), 1.0, 0.0)
        assert speed_kmh(a, b) == 111

    def test_missing_coordinates_is_zero(self):
        a = Photo("a", T0, 0.0, 0.0)
        b = Photo("b", T0 + timedelta(hours=1))
        assert speed_kmh(a, b) == 0

    def test_same_timestamp_is_zero(self):
        a = Photo("a", T0, 0.0, 0.0)
        b = Photo("b", T0, 1.0, 0.0)
        assert speed_kmh(a, b) == 0

    def test_backwards_in_time_is_zero(self):
        a = Photo("a", T0, 0.0, 0.0)
        b = Photo("b", T0 - timedelta(hours=1), 1.0, 0.0)
        assert speed_kmh(a, b) == 0

    def test_photo_distance(self):
        a = Photo("a", T0, 0.0, 0.0)
        b = Photo("b", T0, 1.0, 0.0)
        assert photo_distance_km(a, b) == pytest.approx(111.195, abs=0.001)
