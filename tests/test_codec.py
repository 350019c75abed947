"""Tests for the locator codec."""

import pytest

from maidenhead import (
    InvalidLocator,
    InvalidPrecision,
    OutOfRange,
    cell_bounds,
    coordinates_to_grid_code,
    grid_code_to_coordinates,
    to_lat_lon,
    valid,
)
from maidenhead.codec import DIVISORS, check_precision

ROUND_TRIP_POINTS = [
    (41.729167, -72.708333),
    (-33.8688, 151.2093),
    (51.5074, -0.1278),
    (64.1466, -21.9426),
    (-54.8019, -68.303),
    (0.0, 0.0),
    (12.3456, 178.9999),
    (-89.99, -179.99),
    (89.99, 179.99),
]


class TestValid:
    """Tests for valid."""

    @pytest.mark.parametrize(
        "locator",
        ["FN", "FN31", "FN31pr", "fn31PR", "FN31PR", "JN18eu12", "JN18eu12ab", "RR99xx99xx", "AA00aa00aa"],
    )
    def test_accepts(self, locator: str) -> None:
        assert valid(locator) is True

    @pytest.mark.parametrize(
        "locator",
        [
            "FNXX",
            "$%^#$%",
            "$%^#$%#$%",
            "",
            "F",
            "FN3",
            "SN",
            "FS31",
            "FN31py",
            "FN31pr1",
            "FN31prab",
            "FN31pr12ay",
            "FN31pr12ab34",
            " FN31",
            "FN31 ",
            "FN\n",
            "FN31\u212Ar",
            "\u212AN",
        ],
    )
    def test_rejects(self, locator: str) -> None:
        assert valid(locator) is False

    @pytest.mark.parametrize("locator", [None, 1234, b"FN31", ["F", "N"]])
    def test_rejects_non_strings(self, locator) -> None:
        assert valid(locator) is False


class TestGridCodeToCoordinates:
    """Tests for grid_code_to_coordinates and to_lat_lon."""

    def test_square_centre_is_exact(self) -> None:
        assert grid_code_to_coordinates("FN31") == (41.5, -73.0)
        assert to_lat_lon("FN31") == (41.5, -73.0)

    def test_field_centres(self) -> None:
        assert grid_code_to_coordinates("AA") == (-85.0, -170.0)
        assert grid_code_to_coordinates("RR") == (85.0, 170.0)
        assert grid_code_to_coordinates("JJ") == (5.0, 10.0)

    def test_subsquare_centre(self) -> None:
        lat, lon = grid_code_to_coordinates("FN31pr")
        assert lat == pytest.approx(41.729167, abs=1e-6)
        assert lon == pytest.approx(-72.708333, abs=1e-6)

    def test_case_insensitive(self) -> None:
        assert grid_code_to_coordinates("fn31PR") == grid_code_to_coordinates("FN31pr")

    def test_each_pair_narrows_towards_the_same_point(self) -> None:
        lat4, lon4 = grid_code_to_coordinates("FN31")
        lat6, lon6 = grid_code_to_coordinates("FN31pr")
        lat10, lon10 = grid_code_to_coordinates("FN31pr55aa")
        assert abs(lat6 - lat4) < 0.5
        assert abs(lon6 - lon4) < 1.0
        assert abs(lat10 - lat6) < 2.5 / 60 / 2
        assert abs(lon10 - lon6) < 5.0 / 60 / 2

    @pytest.mark.parametrize("locator", ["FNXX", "ZZ", "FN3", "", "$%", "FN31\u212Ar"])
    def test_invalid_locator_raises(self, locator: str) -> None:
        with pytest.raises(InvalidLocator) as excinfo:
            grid_code_to_coordinates(locator)
        assert excinfo.value.locator == locator


class TestCoordinatesToGridCode:
    """Tests for coordinates_to_grid_code."""

    def test_default_precision(self) -> None:
        assert coordinates_to_grid_code(41.729167, -72.708333) == "FN31pr"

    @pytest.mark.parametrize(
        ("precision", "expected"),
        [(1, "FN"), (2, "FN31"), (3, "FN31pr"), (4, "FN31pr55")],
    )
    def test_precisions(self, precision: int, expected: str) -> None:
        assert coordinates_to_grid_code(41.729167, -72.708333, precision) == expected

    def test_length_is_twice_precision(self) -> None:
        for precision in range(1, 6):
            assert len(coordinates_to_grid_code(-33.8688, 151.2093, precision)) == 2 * precision

    @pytest.mark.parametrize(
        ("lat", "lon", "expected"),
        [
            (48.86471, 2.37305, "JN18eu"),
            (41.93498, 12.43652, "JN61fw"),
            (39.9771, -75.1685, "FM29jx"),
            (-23.4028, -50.9766, "GG46mo"),
            (51.5074, -0.1278, "IO91wm"),
        ],
    )
    def test_known_locations(self, lat: float, lon: float, expected: str) -> None:
        assert coordinates_to_grid_code(lat, lon) == expected

    def test_letter_case(self) -> None:
        locator = coordinates_to_grid_code(41.729167, -72.708333, 5)
        assert locator[:2].isupper()
        assert locator[2:4].isdigit()
        assert locator[4:6].islower()
        assert locator[6:8].isdigit()
        assert locator[8:10].islower()

    def test_exact_boundaries_fall_in_the_upper_cell(self) -> None:
        assert coordinates_to_grid_code(0.0, 0.0, 2) == "JJ00"
        assert coordinates_to_grid_code(41.0, -74.0, 2) == "FN31"

    def test_grid_corners(self) -> None:
        assert coordinates_to_grid_code(-90, -180, 1) == "AA"
        assert coordinates_to_grid_code(90, 180, 1) == "RR"
        assert coordinates_to_grid_code(90, 180, 3) == "RR99xx"
        assert coordinates_to_grid_code(-90, 180) == "RA90xa"

    @pytest.mark.parametrize(("lat", "lon"), [(91, 0), (-90.5, 0), (0, 181), (0, -181)])
    def test_out_of_range(self, lat: float, lon: float) -> None:
        with pytest.raises(OutOfRange):
            coordinates_to_grid_code(lat, lon)

    @pytest.mark.parametrize("precision", [0, 6, -1, 2.5, "3", None, True])
    def test_invalid_precision(self, precision) -> None:
        with pytest.raises(InvalidPrecision):
            coordinates_to_grid_code(41.729167, -72.708333, precision)


class TestRoundTrip:
    """Decoding an encoded point gives its cell centre, and re-encoding is stable."""

    @pytest.mark.parametrize("precision", [1, 2, 3, 4, 5])
    @pytest.mark.parametrize(("lat", "lon"), ROUND_TRIP_POINTS)
    def test_round_trip(self, lat: float, lon: float, precision: int) -> None:
        locator = coordinates_to_grid_code(lat, lon, precision)
        centre_lat, centre_lon = grid_code_to_coordinates(locator)

        half_height = 10.0 / DIVISORS[precision - 1] / 2
        half_width = 20.0 / DIVISORS[precision - 1] / 2
        assert abs(centre_lat - lat) <= half_height + 2e-6
        assert abs(centre_lon - lon) <= half_width + 2e-6

        assert coordinates_to_grid_code(centre_lat, centre_lon, precision) == locator


class TestCellBounds:
    """Tests for cell_bounds."""

    def test_square(self) -> None:
        cell = cell_bounds("FN31")
        assert cell.locator == "FN31"
        assert cell.south == pytest.approx(41.0)
        assert cell.north == pytest.approx(42.0)
        assert cell.west == pytest.approx(-74.0)
        assert cell.east == pytest.approx(-72.0)
        assert (cell.latitude, cell.longitude) == (41.5, -73.0)

    def test_field(self) -> None:
        cell = cell_bounds("FN")
        assert cell.to_list() == pytest.approx([40.0, -80.0, 50.0, -60.0])
        assert cell.width == pytest.approx(20.0)
        assert cell.height == pytest.approx(10.0)

    def test_subsquare_size(self) -> None:
        cell = cell_bounds("FN31pr")
        assert cell.width == pytest.approx(5.0 / 60)
        assert cell.height == pytest.approx(2.5 / 60)

    def test_centre_matches_decoder(self) -> None:
        for locator in ("JN18eu", "RE78ir12", "GG46mo55xx"):
            cell = cell_bounds(locator)
            lat, lon = grid_code_to_coordinates(locator)
            assert cell.latitude == pytest.approx(lat)
            assert cell.longitude == pytest.approx(lon)

    def test_contains_encoded_point(self) -> None:
        cell = cell_bounds(coordinates_to_grid_code(-33.8688, 151.2093, 4))
        assert cell.contains(-33.8688, 151.2093)
        assert not cell.contains(-32.5, 151.2093)

    def test_invalid_locator_raises(self) -> None:
        with pytest.raises(InvalidLocator):
            cell_bounds("FN31p")


class TestCheckPrecision:
    """Tests for check_precision."""

    def test_accepts_supported_range(self) -> None:
        for precision in range(1, 6):
            assert check_precision(precision) == precision

    def test_error_carries_precision(self) -> None:
        with pytest.raises(InvalidPrecision) as excinfo:
            check_precision(6)
        assert excinfo.value.precision == 6
