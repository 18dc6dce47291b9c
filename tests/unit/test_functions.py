"""Tests for unit and CSS function helpers."""

import pytest

from stylecraft import functions as fn
from stylecraft import units


class TestUnits:
    """Tests for unit helpers."""

    @pytest.mark.parametrize(
        ("result", "expected"),
        [
            (units.px(10), "10px"),
            (units.rem(1, 2.5), "1rem 2.5rem"),
            (units.em(0.5), "0.5em"),
            (units.perc(50, 75), "50% 75%"),
            (units.vw(100), "100vw"),
            (units.vh(100.0), "100vh"),
            (units.deg(45), "45deg"),
            (units.ms(150), "150ms"),
            (units.fr(1, 2), "1fr 2fr"),
        ],
    )
    def test_units(self, result, expected):
        assert result == expected


class TestColorFunctions:
    def test_rgb(self):
        assert fn.rgb(255, 0, 0) == "rgb(255, 0, 0)"
        assert fn.rgba(0, 0, 0, 0.5) == "rgba(0, 0, 0, 0.5)"

    def test_hsl(self):
        assert fn.hsl(210, 50, 40) == "hsl(210, 50%, 40%)"

    def test_oklch(self):
        assert fn.oklch(0.7, 0.1, 250) == "oklch(0.7 0.1 250)"

    def test_color_mix(self):
        assert fn.color_mix("in srgb", "red", "blue") == "color-mix(in srgb, red, blue)"
        assert fn.color_mix("in srgb", "red", "blue", 30) == "color-mix(in srgb, red, blue 30%)"


class TestLayoutFunctions:
    def test_math(self):
        assert fn.calc("100% - 2rem") == "calc(100% - 2rem)"
        assert fn.clamp("1rem", "5vw", "2rem") == "clamp(1rem, 5vw, 2rem)"
        assert fn.min_("10px", "5vw") == "min(10px, 5vw)"

    def test_grid(self):
        assert fn.repeat("auto-fill", fn.minmax("200px", "1fr")) == (
            "repeat(auto-fill, minmax(200px, 1fr))"
        )

    def test_transforms(self):
        assert fn.translate_x("10px") == "translateX(10px)"
        assert fn.scale(1.5) == "scale(1.5)"
        assert fn.scale(1, 2) == "scale(1, 2)"

    def test_drop_shadow(self):
        assert fn.drop_shadow("0", "1px", "2px", "black") == "drop-shadow(0 1px 2px black)"


class TestVar:
    def test_adds_prefix(self):
        assert fn.var_("theme-color") == "var(--theme-color)"

    def test_fallback(self):
        assert fn.var_("--gap", "1rem") == "var(--gap, 1rem)"

    def test_var_reference_is_hoistable(self, session):
        """Test helper output is recognized by the optimizer."""
        gap = fn.var_("gap", "1rem")
        session.create_style({"a": {"gap": gap, "rowGap": gap, "columnGap": gap}})
        assert session.optimize() == ["--gap"]
