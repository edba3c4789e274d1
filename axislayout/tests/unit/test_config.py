"""
Unit tests for configuration objects and axis presets
"""
import pytest

from axislayout import AxisPreset, ResolverConfig, ConfigurationError


@pytest.mark.unit
class TestResolverConfig:
    """Tests for ResolverConfig presets"""

    def test_defaults(self):
        """Defaults warn on duplicates with 1e-9 tolerances"""
        config = ResolverConfig()
        assert config.rel_tol == 1e-9
        assert config.abs_tol == 1e-9
        assert config.warn_on_duplicate_names

    def test_strict(self):
        """Strict preset tightens both tolerances"""
        config = ResolverConfig.strict()
        assert config.rel_tol < ResolverConfig().rel_tol
        assert config.abs_tol < ResolverConfig().abs_tol

    def test_quiet(self):
        """Quiet preset disables duplicate warnings only"""
        config = ResolverConfig.quiet()
        assert not config.warn_on_duplicate_names
        assert config.rel_tol == ResolverConfig().rel_tol


@pytest.mark.unit
class TestAxisPreset:
    """Tests for AxisPreset"""

    def test_horizontal_plot_share(self):
        """Plot area takes 75/109 of the horizontal axis"""
        layout = AxisPreset.horizontal().build(800).resolve()
        plot = layout.get_element("plot area")
        assert layout.total_relative_length == 109.0
        assert plot.length == pytest.approx(800 * 75.0 / 109.0)
        assert layout.elements[-1].end == pytest.approx(800.0)

    def test_build_is_unresolved(self):
        """build() only declares elements"""
        layout = AxisPreset.vertical().build(600)
        assert not layout.resolved
        assert layout.element_names == AxisPreset.vertical().element_names

    def test_build_name(self):
        """Layout name defaults to the preset name and can be overridden"""
        preset = AxisPreset.calendar()
        assert preset.build(150).name == "calendar axis"
        assert preset.build(150, name="x").name == "x"

    def test_calendar_months(self):
        """Calendar preset reproduces the month-centre positions"""
        t = AxisPreset.calendar().build(150.0).resolve().transform("months", -0.5, 12.0)
        assert t.map(0.0) == 20.0
        assert t.map(9.0) == 110.0

    def test_total_weight(self):
        """total_weight sums the preset weights"""
        assert AxisPreset.calendar().total_weight == 150.0

    def test_get_by_name(self):
        """Presets are available by short name"""
        assert set(AxisPreset.names()) == {"horizontal", "vertical", "calendar"}
        assert AxisPreset.get("vertical") == AxisPreset.vertical()

    def test_get_unknown(self):
        """Unknown preset names are configuration errors"""
        with pytest.raises(ConfigurationError, match="Unknown preset"):
            AxisPreset.get("radial")
