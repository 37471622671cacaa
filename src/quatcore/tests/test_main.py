"""
===============================================================================
QUATCORE - Command Line and Configuration Test Suite
===============================================================================
Tests for load_config() and the quatcore command-line conversions.
===============================================================================
"""

import pytest

from quatcore.main import DEFAULT_CONFIG, build_parser, load_config, main


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def config_file(tmp_path):
    """Write a YAML config and return its path."""
    def _write(text):
        path = tmp_path / 'quatcore.yaml'
        path.write_text(text)
        return str(path)
    return _write


# =============================================================================
# Test: load_config
# =============================================================================

class TestLoadConfig:
    """Tests for YAML configuration loading."""

    def test_defaults_without_path(self):
        assert load_config() == DEFAULT_CONFIG
        assert load_config() is not DEFAULT_CONFIG

    def test_overrides_merge_over_defaults(self, config_file):
        config = load_config(config_file("precision: float32\nprint_digits: 4\n"))
        assert config['precision'] == 'float32'
        assert config['print_digits'] == 4
        assert config['angle_units'] == 'radians'

    def test_empty_file_gives_defaults(self, config_file):
        assert load_config(config_file("")) == DEFAULT_CONFIG

    @pytest.mark.parametrize("text", [
        "colour: blue\n",
        "precision: float16\n",
        "print_digits: 0\n",
        "log_level: LOUD\n",
        "angle_units: gradians\n",
        "- just\n- a list\n",
    ])
    def test_invalid_config_raises(self, config_file, text):
        with pytest.raises(ValueError):
            load_config(config_file(text))

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(OSError):
            load_config(str(tmp_path / 'missing.yaml'))


# =============================================================================
# Test: command line
# =============================================================================

class TestCommandLine:
    """Tests for the quatcore CLI."""

    def test_axis_angle_degrees(self, capsys):
        assert main(['--degrees', 'axis-angle', '0', '0', '1', '90']) == 0
        out = capsys.readouterr().out
        assert 'quaternion:' in out
        assert '0.70710678' in out
        assert 'matrix:' in out

    def test_matrix(self, capsys):
        assert main(['matrix', '0', '1', '0', '-1', '0', '0', '0', '0', '1']) == 0
        out = capsys.readouterr().out
        assert '0.70710678' in out
        assert 'angle: 1.5707963 radians' in out

    def test_matrix_in_degrees(self, capsys):
        assert main(['--degrees', 'matrix', '0', '1', '0', '-1', '0', '0', '0', '0', '1']) == 0
        assert 'angle: 90 degrees' in capsys.readouterr().out

    def test_rotation(self, capsys):
        assert main(['rotation', '1', '0', '0', '0', '1', '0']) == 0
        assert '0.70710678' in capsys.readouterr().out

    def test_precision_from_config(self, capsys, config_file):
        path = config_file("precision: float32\nprint_digits: 3\n")
        assert main(['--config', path, 'axis-angle', '1', '0', '0', '0.5']) == 0
        assert '0.969' in capsys.readouterr().out

    def test_bad_config_returns_error(self, tmp_path):
        assert main(['--config', str(tmp_path / 'missing.yaml'),
                     'axis-angle', '1', '0', '0', '0.5']) == 1

    def test_subcommand_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])
