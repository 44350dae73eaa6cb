import pytest

from barchart.components.chart import BandScale, LinearScale, format_tick, linear_ticks, tick_step


class TestBandScale:
    def test_padding_and_centering(self):
        scale = BandScale(domain=("A", "B", "C", "D"), range_width=410, padding=0.1)

        assert scale.step == pytest.approx(100)
        assert scale.bandwidth == pytest.approx(90)
        assert scale("A") == pytest.approx(10)
        assert scale("D") == pytest.approx(310)
        assert scale.center("B") == pytest.approx(155)

    def test_single_band(self):
        scale = BandScale(domain=("only",), range_width=100, padding=0.1)

        assert scale("only") + scale.bandwidth / 2 == pytest.approx(50)

    def test_zero_padding_fills_range(self):
        scale = BandScale(domain=("A", "B"), range_width=100, padding=0.0)

        assert scale("A") == 0
        assert scale("B") == 50
        assert scale.bandwidth == 50

    def test_duplicate_takes_last_slot(self):
        scale = BandScale(domain=("A", "B", "A"), range_width=310, padding=0.1)

        assert scale("A") == pytest.approx(scale.offset + 2 * scale.step)

    def test_unknown_category(self):
        scale = BandScale(domain=("A",), range_width=100)

        with pytest.raises(KeyError, match="Unknown category"):
            scale("Z")


class TestLinearScale:
    def test_inverted_range(self):
        scale = LinearScale(domain_max=10, range_height=100)

        assert scale(0) == 100
        assert scale(5) == 50
        assert scale(10) == 0

    def test_degenerate_domain_maps_to_baseline(self):
        scale = LinearScale(domain_max=0, range_height=100)

        assert scale.is_degenerate
        assert scale(0) == 100
        assert scale.ticks() == [0.0]


class TestTicks:
    @pytest.mark.parametrize(
        "stop, expected_step",
        [(10, 1), (56, 5), (100, 10), (1, 0.1), (250, 20), (7, 0.5)],
    )
    def test_nice_steps(self, stop, expected_step):
        assert tick_step(0, stop, 10) == pytest.approx(expected_step)

    def test_ticks_cover_domain(self):
        assert linear_ticks(0, 56, 10) == [0, 5, 10, 15, 20, 25, 30, 35, 40, 45, 50, 55]

    def test_fractional_ticks_are_clean(self):
        assert linear_ticks(0, 1, 5) == [0, 0.2, 0.4, 0.6, 0.8, 1.0]

    def test_equal_bounds(self):
        assert linear_ticks(3, 3) == [3.0]

    def test_reversed_bounds(self):
        assert linear_ticks(10, 0, 2) == [10, 5, 0]

    def test_no_ticks_requested(self):
        assert linear_ticks(0, 10, 0) == []

    def test_format_tick(self):
        assert format_tick(5, 5) == "5"
        assert format_tick(2000, 1000) == "2,000"
        assert format_tick(0.2, 0.2) == "0.2"
        assert format_tick(0.05, 0.05) == "0.05"
