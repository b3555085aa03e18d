"""Command line entry point."""

import json

from edo_ruler import main


def test_main_writes_svg(tmp_path, capsys):
    output = tmp_path / "ruler.svg"
    assert main(["--edo", "12,19", "--prime-limit", "5", "--odd-limit", "9",
                 "--output", str(output)]) == 0
    assert output.exists()
    assert "SVG saved to" in capsys.readouterr().out


def test_main_writes_png_too(tmp_path):
    svg, png = tmp_path / "ruler.svg", tmp_path / "ruler.png"
    assert main(["--output", str(svg), "--png", str(png), "--height", "400"]) == 0
    assert svg.exists() and png.exists()


def test_main_report_only(tmp_path, capsys):
    output = tmp_path / "ruler.svg"
    assert main(["--report-only", "--edo", "31", "--output", str(output)]) == 0
    assert "INTERVAL REPORT" in capsys.readouterr().out
    assert not output.exists()


def test_main_uses_config_file(tmp_path):
    output = tmp_path / "from_config.svg"
    config = tmp_path / "ruler.json"
    config.write_text(json.dumps({"edo_values": [7], "output": str(output)}))
    assert main(["--config", str(config)]) == 0
    assert output.exists()


def test_main_rejects_invalid_parameters(tmp_path, capsys):
    output = tmp_path / "ruler.svg"
    assert main(["--prime-limit", "1", "--output", str(output)]) == 2
    assert not output.exists()
    assert "Invalid parameters" in capsys.readouterr().err


def test_main_rejects_non_numeric_edo(capsys):
    assert main(["--edo", "12,x"]) == 2
    assert "Not an integer" in capsys.readouterr().err


def test_main_rejects_mistyped_config(tmp_path, capsys):
    output = tmp_path / "ruler.svg"
    config = tmp_path / "ruler.json"
    config.write_text(json.dumps({"prime_limit": "7", "output": str(output)}))
    assert main(["--config", str(config)]) == 2
    assert not output.exists()
    assert "prime_limit" in capsys.readouterr().err
