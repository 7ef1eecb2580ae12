#
# XValues - Units Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from xvalues.units import (BANDS, KB, MB, GB, TB, PB, EB, U64_MAX,
                           MagnitudeBand, band_spec, check_u64, classify, max_band)


# Tests ----------------------------------------------------------------------------------------------------------------

class TestBandTable:

    def test_band_order(self):
        assert list(MagnitudeBand) == sorted(MagnitudeBand)
        assert MagnitudeBand.BYTE < MagnitudeBand.KILO < MagnitudeBand.EXA

    def test_multipliers_are_powers_of_1024(self):
        for band in MagnitudeBand:
            assert BANDS[band].multiplier == 1024 ** int(band)

    @pytest.mark.parametrize(
        "band, suffix, width_hex, width_dec",
        [
            pytest.param(MagnitudeBand.BYTE, "b", 4, 4, id="byte"),
            pytest.param(MagnitudeBand.KILO, "K", 8, 7, id="kilo"),
            pytest.param(MagnitudeBand.MEGA, "M", 8, 10, id="mega"),
            pytest.param(MagnitudeBand.GIGA, "G", 12, 13, id="giga"),
            pytest.param(MagnitudeBand.TERA, "T", 16, 16, id="tera"),
            pytest.param(MagnitudeBand.PETA, "P", 16, 19, id="peta"),
            pytest.param(MagnitudeBand.EXA, "E", 16, 20, id="exa"),
        ],
    )
    def test_band_spec(self, band, suffix, width_hex, width_dec):
        spec = band_spec(band)
        assert spec.suffix == suffix
        assert spec.width_hex == width_hex
        assert spec.width_dec == width_dec

    def test_band_spec_accepts_index(self):
        assert band_spec(2) is BANDS[MagnitudeBand.MEGA]

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            BANDS[MagnitudeBand.BYTE] = None


class TestClassify:

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(0, MagnitudeBand.BYTE, id="zero"),
            pytest.param(1023, MagnitudeBand.BYTE, id="below-kb"),
            pytest.param(KB, MagnitudeBand.KILO, id="kb"),
            pytest.param(MB - 1, MagnitudeBand.KILO, id="below-mb"),
            pytest.param(MB, MagnitudeBand.MEGA, id="mb"),
            pytest.param(GB, MagnitudeBand.GIGA, id="gb"),
            pytest.param(TB, MagnitudeBand.TERA, id="tb"),
            pytest.param(PB, MagnitudeBand.PETA, id="pb"),
            pytest.param(EB - 1, MagnitudeBand.PETA, id="below-eb"),
            pytest.param(EB, MagnitudeBand.EXA, id="eb"),
            pytest.param(U64_MAX, MagnitudeBand.EXA, id="u64-max"),
        ],
    )
    def test_boundaries(self, value, expected):
        assert classify(value) is expected

    def test_monotonic(self):
        samples = sorted({0, U64_MAX} | {m + d for m in (1, KB, MB, GB, TB, PB, EB) for d in (-1, 0, 1)})
        bands = [classify(v) for v in samples]
        assert bands == sorted(bands)

    def test_largest_multiplier_not_exceeding_value(self):
        for value in (1, 5, 1023, 1024, 3 * MB + 7, 5 * TB, 15 * EB):
            multiplier = BANDS[classify(value)].multiplier
            assert multiplier <= value < multiplier * 1024 or classify(value) is MagnitudeBand.EXA

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param(-1, id="negative"),
            pytest.param(U64_MAX + 1, id="above-u64"),
        ],
    )
    def test_out_of_range(self, value):
        with pytest.raises(ValueError, match="unsigned 64-bit"):
            classify(value)

    @pytest.mark.parametrize("value", [1.0, "1", True, None])
    def test_not_int(self, value):
        with pytest.raises(TypeError, match="must be an int"):
            classify(value)


class TestMaxBand:

    def test_empty(self):
        assert max_band([]) is MagnitudeBand.BYTE

    def test_widest_wins(self):
        assert max_band([1, MB, KB]) is MagnitudeBand.MEGA

    def test_generator(self):
        assert max_band(v for v in (GB, 8)) is MagnitudeBand.GIGA


class TestCheckU64:

    @pytest.mark.parametrize("value", [0, 1, U64_MAX])
    def test_in_range(self, value):
        assert check_u64(value) is None

    def test_out_of_range(self):
        with pytest.raises(ValueError, match="unsigned 64-bit"):
            check_u64(U64_MAX + 1)
