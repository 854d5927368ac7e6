import json

from click.testing import CliRunner

from transcribe_turbo import __version__
from transcribe_turbo.cli.main import cli


def test_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_run_all_formats_political(tmp_path, media_file, segments_file) -> None:
    out = tmp_path / "transcripts"
    result = CliRunner().invoke(cli, [
        "run", str(media_file),
        "--segments", str(segments_file),
        "--output", str(out),
        "--format", "all",
        "--political-mode",
    ])
    assert result.exit_code == 0, result.output
    assert sorted(p.name for p in out.iterdir()) == [
        "speech.json", "speech.srt", "speech.txt", "speech.vtt",
    ]
    assert "Transcription Complete" in result.output
    assert "healthcare" in result.output

    data = json.loads((out / "speech.json").read_text(encoding="utf-8"))
    assert data["filename"] == "speech.mp4"
    assert data["language"] == "en"
    assert data["political_analysis"]["key_themes"] == ["healthcare"]
    assert (out / "speech.srt").read_text(encoding="utf-8").startswith(
        "1\n00:00:00,000 --> 00:00:05,200\n"
    )


def test_run_default_format_is_srt(tmp_path, media_file, segments_file) -> None:
    out = tmp_path / "transcripts"
    result = CliRunner().invoke(cli, [
        "run", str(media_file), "--segments", str(segments_file), "-o", str(out),
    ])
    assert result.exit_code == 0, result.output
    assert [p.name for p in out.iterdir()] == ["speech.srt"]


def test_run_unsupported_format(tmp_path, media_file, segments_file) -> None:
    out = tmp_path / "transcripts"
    result = CliRunner().invoke(cli, [
        "run", str(media_file), "--segments", str(segments_file),
        "-o", str(out), "-f", "docx",
    ])
    assert result.exit_code == 1
    assert not out.exists()


def test_run_missing_input(tmp_path, segments_file) -> None:
    result = CliRunner().invoke(cli, [
        "run", str(tmp_path / "absent.mp4"), "--segments", str(segments_file),
    ])
    assert result.exit_code == 1


def test_init_then_run_with_config(tmp_path, media_file, segments_file) -> None:
    runner = CliRunner()
    config_path = tmp_path / "transcribe.yaml"
    result = runner.invoke(cli, [
        "init", "--input", str(media_file), "-o", str(config_path), "--format", "vtt",
    ])
    assert result.exit_code == 0, result.output
    assert config_path.exists()

    again = runner.invoke(cli, ["init", "--input", str(media_file), "-o", str(config_path)])
    assert again.exit_code == 1

    out = tmp_path / "captions"
    result = runner.invoke(cli, [
        "run", str(media_file), "--config", str(config_path),
        "--segments", str(segments_file), "-o", str(out),
    ])
    assert result.exit_code == 0, result.output
    assert [p.name for p in out.iterdir()] == ["speech.vtt"]


def test_show(tmp_path, media_file, segments_file) -> None:
    runner = CliRunner()
    out = tmp_path / "transcripts"
    runner.invoke(cli, [
        "run", str(media_file), "--segments", str(segments_file),
        "-o", str(out), "-f", "json",
    ])
    result = runner.invoke(cli, ["show", str(out / "speech.json")])
    assert result.exit_code == 0, result.output
    assert "speech.mp4" in result.output


def test_show_missing(tmp_path) -> None:
    result = CliRunner().invoke(cli, ["show", str(tmp_path / "absent.json")])
    assert result.exit_code == 1


def test_init_rejects_unsupported_format(tmp_path, media_file) -> None:
    config_path = tmp_path / "transcribe.yaml"
    result = CliRunner().invoke(cli, [
        "init", "--input", str(media_file), "-o", str(config_path), "--format", "docx",
    ])
    assert result.exit_code == 1
    assert not config_path.exists()
