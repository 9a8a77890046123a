"""Tests for the configuration model."""

import os
import pytest

from themeprefs.config import (
    SettingsRecord, ThemeChoice, AccentColor, PALETTE, DEFAULT_ACCENT,
    SCALE_PRESETS, hex2rgb, rgb2hex, blend, theme_labels, display_label,
    supports_system_theme, storage_path, user_config_dir, default_scale,
    SYSTEM_THEME_LABEL
)


class TestColorUtilities:
    """Test colour helper functions."""

    def test_hex2rgb_basic(self):
        """Test hex to RGB conversion."""
        assert hex2rgb("#2196f3") == (0x21, 0x96, 0xf3)
        assert hex2rgb("FFF") == (255, 255, 255)

    def test_rgb2hex_ignores_alpha(self):
        """Test RGB(A) to hex conversion."""
        assert rgb2hex((0xf4, 0x43, 0x36, 0xff)) == "#f44336"

    def test_blend_endpoints(self):
        """Test blending at both ends."""
        red, blue = (255, 0, 0), (0, 0, 255)
        assert blend(red, blue, 0.0) == red
        assert blend(red, blue, 1.0) == blue


class TestPalette:
    """Test the fixed accent palette."""

    def test_palette_order(self):
        """Palette is ordered for display."""
        assert [c.value for c in PALETTE] == ["blue", "green", "yellow", "orange", "red", "grey"]

    def test_default_accent_is_first_entry(self):
        """Unset accent falls back to the first palette entry."""
        assert DEFAULT_ACCENT is AccentColor.BLUE

    def test_palette_values(self):
        """Each entry carries its fixed RGBA value."""
        assert AccentColor.BLUE.rgba == (0x21, 0x96, 0xf3, 0xff)
        assert AccentColor.GREY.hex == "#9e9e9e"
        assert all(c.rgba[3] == 0xff for c in PALETTE)

    def test_parse_rejects_unknown_colour(self):
        """Unknown palette names are programmer errors."""
        with pytest.raises(ValueError):
            AccentColor.parse("purple")


class TestThemeChoice:
    """Test theme names and labels."""

    def test_system_alias_normalised(self):
        """The display alias maps to the empty stored value."""
        assert ThemeChoice.parse(SYSTEM_THEME_LABEL) is ThemeChoice.SYSTEM
        assert ThemeChoice.parse("") is ThemeChoice.SYSTEM
        assert ThemeChoice.SYSTEM.value == ""

    def test_parse_known_names(self):
        """Plain theme names parse to their members."""
        assert ThemeChoice.parse("dark") is ThemeChoice.DARK
        assert ThemeChoice.parse(ThemeChoice.LIGHT) is ThemeChoice.LIGHT

    def test_parse_rejects_unknown_theme(self):
        """Unknown theme names raise."""
        with pytest.raises(ValueError):
            ThemeChoice.parse("solarized")

    def test_theme_labels_by_platform(self):
        """System default is only offered where it can be detected."""
        assert theme_labels("linux") == ["dark", "light"]
        assert theme_labels("darwin") == ["dark", "light", "system default"]
        assert theme_labels("win32")[-1] == "system default"
        assert supports_system_theme("win32")
        assert not supports_system_theme("linux")

    def test_display_label(self):
        """The selector shows the alias, or nothing where unsupported."""
        assert display_label(ThemeChoice.SYSTEM, "darwin") == "system default"
        assert display_label(ThemeChoice.SYSTEM, "linux") == ""
        assert display_label(ThemeChoice.LIGHT, "linux") == "light"


class TestSettingsRecord:
    """Test the persisted record."""

    def test_defaults(self):
        """Default record is the zero value."""
        rec = SettingsRecord()
        assert rec.theme is ThemeChoice.SYSTEM
        assert rec.primary_color is None
        assert rec.scale == 0.0

    def test_serialization(self):
        """Record serialises to exactly three fields."""
        rec = SettingsRecord(ThemeChoice.LIGHT, AccentColor.RED, 1.3)
        assert rec.to_json() == {"themeName": "light", "primaryColor": "red", "scale": 1.3}
        assert SettingsRecord().to_json() == {"themeName": "", "primaryColor": "", "scale": 0.0}

    def test_deserialization_ignores_unknown_fields(self):
        """Unknown fields are skipped and absent ones default."""
        rec = SettingsRecord.from_json({"primaryColor": "green", "fontSize": 14})
        assert rec == SettingsRecord(ThemeChoice.SYSTEM, AccentColor.GREEN, 0.0)

    def test_deserialization_accepts_integer_scale(self):
        """Whole-number scales decode as floats."""
        assert SettingsRecord.from_json({"scale": 2}).scale == 2.0

    @pytest.mark.parametrize("doc", [
        {"themeName": "system default"},
        {"themeName": 1},
        {"primaryColor": "purple"},
        {"scale": "big"},
        {"scale": True},
        {"scale": -1},
        {"scale": float("nan")},
        {"scale": float("inf")},
        {"scale": 10 ** 400},
    ])
    def test_deserialization_rejects_bad_values(self, doc):
        """Values outside the closed sets are rejected."""
        with pytest.raises(ValueError):
            SettingsRecord.from_json(doc)


class TestScalePresets:
    """Test scale preset definitions."""

    def test_presets_are_ordered_and_positive(self):
        """Presets grow from Tiny to Larger."""
        values = [v for _, v in SCALE_PRESETS]
        assert values == sorted(values)
        assert all(v > 0 for v in values)
        assert ("Normal", 1.0) in SCALE_PRESETS

    def test_default_scale_from_environment(self, monkeypatch):
        """THEMEPREFS_SCALE overrides the default scale."""
        assert default_scale() == 1.0
        monkeypatch.setenv("THEMEPREFS_SCALE", "1.5")
        assert default_scale() == 1.5
        monkeypatch.setenv("THEMEPREFS_SCALE", "nonsense")
        assert default_scale() == 1.0
        monkeypatch.setenv("THEMEPREFS_SCALE", "0")
        assert default_scale() == 1.0
        monkeypatch.setenv("THEMEPREFS_SCALE", "inf")
        assert default_scale() == 1.0


class TestStoragePath:
    """Test settings file location."""

    def test_env_override(self, monkeypatch, tmp_path):
        """THEMEPREFS_CONFIG_DIR replaces the per-user directory."""
        monkeypatch.setenv("THEMEPREFS_CONFIG_DIR", str(tmp_path))
        assert storage_path() == os.path.join(str(tmp_path), "settings.json")

    def test_default_location(self, monkeypatch):
        """Default file lives in an application directory."""
        monkeypatch.delenv("THEMEPREFS_CONFIG_DIR", raising=False)
        path = storage_path()
        assert path.endswith(os.path.join("themeprefs", "settings.json"))

    def test_user_config_dir_per_platform(self, monkeypatch):
        """Each platform has its own configuration root."""
        monkeypatch.setenv("XDG_CONFIG_HOME", "/xdg")
        monkeypatch.setenv("APPDATA", "C:\\Users\\me\\AppData\\Roaming")
        assert user_config_dir("linux") == "/xdg"
        assert user_config_dir("win32") == "C:\\Users\\me\\AppData\\Roaming"
        assert user_config_dir("darwin").endswith(os.path.join("Library", "Application Support"))


if __name__ == "__main__":
    pytest.main([__file__])
