"""
Tests for the M3U to JSON converter script.
"""
import json
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))

from keditv.scripts.m3u_to_json import default_output_path, main


class TestM3UToJson:

    def test_default_output_path(self):
        assert default_output_path("iptv.m3u") == "iptv.json"
        assert default_output_path("/data/list.m3u") == "/data/list.json"
        assert default_output_path("playlist.txt") == "playlist.txt.json"

    def test_converts_file(self, sample_m3u_file, tmp_path):
        output = tmp_path / "out.json"

        assert main([str(sample_m3u_file), str(output)]) == 0

        records = json.loads(output.read_text(encoding="utf-8"))
        assert len(records) == 6
        assert records[0] == {
            "id": 1,
            "name": "Kanal 7",
            "language": "tur",
            "media": "Live",
            "type": "TV",
            "category": None,
            "quality": None,
            "platform": None,
            "year": None,
            "season": None,
            "episode": None,
            "logo": "http://x/logo.png",
            "url": "http://example.com/live1",
            "source": "IPTV",
        }

    def test_output_defaults_next_to_input(self, sample_m3u_file):
        assert main([str(sample_m3u_file)]) == 0
        assert sample_m3u_file.with_suffix(".json").exists()

    def test_keeps_unicode(self, tmp_path):
        playlist = tmp_path / "tr.m3u"
        playlist.write_text(
            '#EXTM3U\n#EXTINF:-1 group-title="YESILCAM" tvg-name="Şaban",X\nhttp://a\n',
            encoding="utf-8",
        )
        output = tmp_path / "tr.json"

        assert main([str(playlist), str(output)]) == 0
        text = output.read_text(encoding="utf-8")
        assert "Şaban" in text
        assert "Yeşilçam" in text

    def test_missing_input(self, tmp_path):
        assert main([str(tmp_path / "missing.m3u")]) == 1

    def test_invalid_input(self, tmp_path):
        playlist = tmp_path / "bad.m3u"
        playlist.write_text("not a playlist")
        assert main([str(playlist), str(tmp_path / "bad.json")]) == 1
        assert not (tmp_path / "bad.json").exists()

    def test_bom_does_not_drop_first_entry(self, tmp_path):
        playlist = tmp_path / "bom.m3u"
        playlist.write_text(
            '#EXTINF:-1 tvg-name="First",X\nhttp://a\n'
            '#EXTINF:-1 tvg-name="Second",X\nhttp://b\n',
            encoding="utf-8-sig",
        )
        output = tmp_path / "bom.json"

        assert main([str(playlist), str(output)]) == 0
        records = json.loads(output.read_text(encoding="utf-8"))
        assert [record["name"] for record in records] == ["First", "Second"]
