"""Tests for the command-line interface."""

import json
import logging

import pytest
import yaml

from postmap.cli import main
from postmap.config import Config
from postmap.logging_config import LOG_LEVEL_ENV_VAR, setup_logging


@pytest.fixture(autouse=True)
def restore_logging(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    yield
    setup_logging()


@pytest.fixture
def envelope_file(tmp_path, envelope_data):
    path = tmp_path / "request.json"
    path.write_text(json.dumps(envelope_data))
    return path


class TestValidateCommand:
    """Test `postmap validate`."""
    
    def test_prints_json(self, envelope_file, capsys):
        assert main(["validate", str(envelope_file)]) == 0
        
        data = json.loads(capsys.readouterr().out)
        assert data["zoom"] == 11
        assert data["width"] == 640
        assert len(data["markers"]) == 2
        assert data["overlays"][0]["url_pattern"] == "https://tiles.example.com/{z}/{x}/{y}.png"
    
    def test_prints_yaml(self, envelope_file, capsys):
        assert main(["validate", str(envelope_file), "--format", "yaml"]) == 0
        
        data = yaml.safe_load(capsys.readouterr().out)
        assert data["height"] == 480
    
    def test_bounds_error(self, tmp_path, envelope_data, capsys):
        envelope_data["width"] = 5000
        path = tmp_path / "big.json"
        path.write_text(json.dumps(envelope_data))
        
        assert main(["validate", str(path)]) == 1
        assert "Error: map size exceeds allowed bounds of 1024x1024" in capsys.readouterr().err
    
    def test_max_size_override(self, tmp_path, envelope_data, capsys):
        envelope_data["width"] = 1500
        path = tmp_path / "wide.json"
        path.write_text(json.dumps(envelope_data))
        
        assert main(["validate", str(path), "--max-size", "2000x2000"]) == 0
        assert json.loads(capsys.readouterr().out)["width"] == 1500
    
    def test_config_file(self, tmp_path, envelope_file, capsys):
        config_path = tmp_path / "postmap.yaml"
        config_path.write_text("max_width: 100\nmax_height: 100\n")
        
        assert main(["validate", str(envelope_file), "--config", str(config_path)]) == 1
        assert "bounds of 100x100" in capsys.readouterr().err
    
    def test_bad_config_file(self, tmp_path, envelope_file, capsys):
        assert main(["validate", str(envelope_file), "--config", str(tmp_path / "none.yaml")]) == 1
        assert "Error loading config" in capsys.readouterr().err
    
    def test_invalid_max_size_argument(self, envelope_file):
        with pytest.raises(SystemExit):
            main(["validate", str(envelope_file), "--max-size", "huge"])
    
    def test_malformed_envelope(self, tmp_path, capsys):
        path = tmp_path / "broken.json"
        path.write_text("{")
        
        assert main(["validate", str(path)]) == 1
        assert "not valid JSON" in capsys.readouterr().err


class TestLoggingFlags:
    """Test -v/-q handling."""
    
    def test_verbose_keeps_stdout_parseable(self, envelope_file, capsys):
        assert main(["validate", "-v", str(envelope_file)]) == 0
        
        captured = capsys.readouterr()
        assert json.loads(captured.out)["zoom"] == 11
        assert "DEBUG" in captured.err
        assert "Assembled 640x480 map" in captured.err
    
    def test_warnings_go_to_stderr(self, tmp_path, envelope_data, capsys):
        envelope_data["width"] = 5000
        path = tmp_path / "big.json"
        path.write_text(json.dumps(envelope_data))
        
        assert main(["validate", str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "WARNING: Rejecting 5000x480 map" in captured.err
    
    @pytest.mark.parametrize("flags,level", [
        ([], logging.WARNING),
        (["-v"], logging.DEBUG),
        (["-q"], logging.ERROR),
        (["-v", "-q"], logging.ERROR),
    ])
    def test_levels(self, envelope_file, flags, level):
        assert main(["validate", *flags, str(envelope_file)]) == 0
        assert logging.getLogger("postmap").level == level
    
    def test_quiet_hides_warnings(self, tmp_path, envelope_data, capsys):
        envelope_data["width"] = 5000
        path = tmp_path / "big.json"
        path.write_text(json.dumps(envelope_data))
        
        assert main(["validate", "-q", str(path)]) == 1
        assert capsys.readouterr().err.strip() == (
            "Error: map size exceeds allowed bounds of 1024x1024"
        )


class TestConfigCommand:
    """Test `postmap config`."""
    
    def test_writes_default_config(self, tmp_path, capsys):
        path = tmp_path / "postmap.yaml"
        
        assert main(["config", str(path)]) == 0
        assert Config.load_from_file(path) == Config()
        assert str(path) in capsys.readouterr().out
    
    def test_unsupported_suffix(self, tmp_path, capsys):
        assert main(["config", str(tmp_path / "postmap.ini")]) == 1
        assert "Unsupported file format" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage: postmap" in capsys.readouterr().out
