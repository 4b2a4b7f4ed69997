"""Tests for the command line interface."""

import json

from designgen.main import main


def _only(tmp_path, pattern):
    matches = list(tmp_path.glob(pattern))
    assert len(matches) == 1
    return matches[0]


class TestGenerateCommand:
    def test_writes_json_and_preview(self, tmp_path, capsys):
        code = main(["generate", "--seed", "abc", "--industry", "technology",
                     "--out", str(tmp_path), "--preview", "--preview-size", "64"])
        assert code == 0
        json_path = _only(tmp_path, "modern-*.json")
        data = json.loads(json_path.read_text())
        assert data["id"] == json_path.stem
        assert data["metadata"]["generationSeed"] == "abc"
        assert (tmp_path / f"{data['id']}.png").exists()
        assert "Saved to" in capsys.readouterr().out

    def test_flags_reach_the_generator(self, tmp_path):
        main(["generate", "--seed", "flags", "--base", "minimal", "--layout-style", "grid",
              "--no-randomize-components", "--ai", "--out", str(tmp_path)])
        data = json.loads(_only(tmp_path, "minimal-*.json").read_text())
        assert data["customization"]["layout"]["style"] == "grid"
        assert data["metadata"]["aiEnhanced"] is True


class TestBatchCommand:
    def test_batch(self, tmp_path, capsys):
        code = main(["batch", "--seed", "run", "--count", "3", "--thumb-size", "40",
                     "--out", str(tmp_path)])
        assert code == 0
        assert len(list(tmp_path.glob("*.json"))) == 3
        assert (tmp_path / "batch_run.png").exists()

    def test_count_must_be_positive(self, tmp_path, capsys):
        assert main(["batch", "--count", "0", "--out", str(tmp_path)]) == 1
        assert "Error" in capsys.readouterr().out


def test_catalog_command(capsys):
    assert main(["catalog"]) == 0
    out = capsys.readouterr().out
    assert "Organisms: 50" in out
    assert "1,562,500" in out
