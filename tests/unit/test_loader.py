"""
Tests for stylesheet source files.

Covers decoding of JSON, YAML and TOML sources, the ``$nested`` marker
form and replaying a source through a session.
"""

import json
from pathlib import Path

import pytest

from stylecraft import CompilerSession, NestedSelectors, SourceError
from stylecraft.loader import apply_source, convert_markers, load_source, parse_source

YAML_SOURCE = """
theme:
  - values:
      light: {text: black}
      dark: {text: white}
vars:
  - name: button
    values: {padding: 1rem}
styles:
  - body: {color: "var(--text)"}
  - selectors: [h1, h2]
    styles: {marginTop: 0}
"""


class TestParseSource:
    """Tests for parse_source."""

    def test_full_source(self):
        source = parse_source(
            {
                "theme": [{"values": {"primary": "#06c"}}],
                "vars": [{"name": "card", "values": {"gap": "1rem"}}],
                "styles": [{"a": {"color": "red"}}],
            }
        )
        assert source.theme[0].values == {"primary": "#06c"}
        assert source.vars[0].name == "card"
        assert source.styles[0].selectors is None
        assert source.styles[0].styles == {"a": {"color": "red"}}

    def test_single_mapping_sections(self):
        """Test a section may be one mapping instead of a list."""
        source = parse_source({"theme": {"primary": "#06c"}, "styles": {"a": {"color": "red"}}})
        assert source.theme[0].values == {"primary": "#06c"}
        assert source.theme[0].name == ""
        assert source.styles[0].styles == {"a": {"color": "red"}}

    def test_selector_list_entry(self):
        source = parse_source({"styles": [{"selectors": ["h1", "h2"], "styles": {"margin": 0}}]})
        assert source.styles[0].selectors == ["h1", "h2"]
        assert source.styles[0].styles == {"margin": 0}

    def test_unknown_section(self):
        with pytest.raises(SourceError, match="Unknown section"):
            parse_source({"themes": []})

    def test_non_mapping_entry(self):
        with pytest.raises(SourceError, match="must be mappings"):
            parse_source({"styles": ["a { color: red }"]})


class TestConvertMarkers:
    """Tests for $nested conversion."""

    def test_marker(self):
        tree = convert_markers({"a": {"x": {"$nested": ["&:hover"], "$styles": {"color": "red"}}}})
        marker = tree["a"]["x"]
        assert isinstance(marker, NestedSelectors)
        assert marker.selectors == ("&:hover",)
        assert marker.styles == {"color": "red"}

    def test_marker_inside_marker(self):
        tree = convert_markers(
            {"$nested": ["&.a"], "$styles": {"y": {"$nested": ["&.b"], "$styles": {"z": 1}}}}
        )
        assert isinstance(tree.styles["y"], NestedSelectors)

    def test_plain_values_unchanged(self):
        assert convert_markers({"a": {"color": "red"}}) == {"a": {"color": "red"}}


class TestLoadSource:
    """Tests for reading source files."""

    def test_yaml(self, tmp_path: Path):
        path = tmp_path / "site.yaml"
        path.write_text(YAML_SOURCE)
        source = load_source(path)
        assert len(source.theme) == 1
        assert source.vars[0].name == "button"
        assert source.styles[1].selectors == ["h1", "h2"]

    def test_json(self, tmp_path: Path):
        path = tmp_path / "site.json"
        path.write_text(json.dumps({"theme": [{"values": {"primary": "#06c"}}]}))
        assert load_source(path).theme[0].values == {"primary": "#06c"}

    def test_toml(self, tmp_path: Path):
        path = tmp_path / "site.toml"
        path.write_text('[[theme]]\nvalues = { primary = "#06c" }\n')
        assert load_source(path).theme[0].values == {"primary": "#06c"}

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        source = load_source(path)
        assert source.theme == []
        assert source.styles == []

    def test_unsupported_suffix(self, tmp_path: Path):
        path = tmp_path / "site.css"
        path.write_text("a {}")
        with pytest.raises(SourceError, match="Unsupported source type"):
            load_source(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(SourceError, match="Source not found"):
            load_source(tmp_path / "missing.yaml")

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{")
        with pytest.raises(SourceError, match="Invalid JSON"):
            load_source(path)

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("theme: [unclosed")
        with pytest.raises(SourceError, match="Invalid YAML"):
            load_source(path)

    def test_top_level_must_be_mapping(self, tmp_path: Path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(SourceError, match="must be a mapping"):
            load_source(path)


class TestApplySource:
    """Tests for replaying a source through a session."""

    def test_apply(self, tmp_path: Path):
        path = tmp_path / "site.yaml"
        path.write_text(YAML_SOURCE)
        session = CompilerSession()
        apply_source(session, load_source(path))

        assert session.store.light == {"--text": "black"}
        assert session.store.dark == {"--text": "white"}
        assert session.css() == (
            ":root {\n  --text: black;\n}\n\n"
            "@media (prefers-color-scheme: dark) {\n  :root {\n    --text: white;\n  }\n}\n\n"
            "body {\n  color: var(--text);\n}\n\n"
            "h1,h2 {\n  margin-top: 0;\n}\n"
        )
