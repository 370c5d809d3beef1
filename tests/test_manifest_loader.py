"""Tests for package.json loading."""

import json

import pytest

from npm_package import (
    Manifest,
    ManifestDecodeError,
    ManifestReadError,
    load_manifest,
    read_manifest,
)
from npm_package.manifest import decode_manifest


class TestReadManifest:
    """read_manifest raises typed errors."""

    def test_decodes_known_and_extra_fields(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text(json.dumps({
            "name": "demo",
            "version": "1.0.0",
            "type": "module",
            "devDependencies": {"vitest": "^1.0.0"},
            "peerDependenciesMeta": {"react": {"optional": True}},
            "author": {"name": "Someone"},
            "sideEffects": False,
        }))

        manifest = read_manifest(path)

        assert manifest.name == "demo"
        assert manifest.version == "1.0.0"
        assert manifest.type == "module"
        assert manifest.dev_dependencies == {"vitest": "^1.0.0"}
        assert manifest.peer_dependencies_meta == {"react": {"optional": True}}
        assert manifest.author == {"name": "Someone"}
        assert manifest.main is None
        assert manifest.extra == {"sideEffects": False}

    def test_accepts_str_path(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text('{"name": "demo"}')
        assert read_manifest(str(path)).name == "demo"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ManifestReadError):
            read_manifest(tmp_path / "package.json")

    def test_directory_is_unreadable(self, tmp_path):
        with pytest.raises(ManifestReadError):
            read_manifest(tmp_path)

    def test_non_utf8(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_bytes(b'{"name": "\xff\xfe"}')
        with pytest.raises(ManifestReadError):
            read_manifest(path)

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text('{"name": "demo",')
        with pytest.raises(ManifestDecodeError) as exc_info:
            read_manifest(path)
        assert "Malformed JSON" in str(exc_info.value)

    def test_non_object_document(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text('["not", "a", "manifest"]')
        with pytest.raises(ManifestDecodeError):
            read_manifest(path)

    def test_wrong_field_type(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text('{"name": "demo", "version": 1}')
        with pytest.raises(ManifestDecodeError) as exc_info:
            read_manifest(path)
        assert "'version'" in str(exc_info.value)


class TestLoadManifest:
    """load_manifest reports every failure as None."""

    def test_success(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text('{"name": "demo", "main": "index.js"}')
        assert load_manifest(path) == Manifest(name="demo", main="index.js")

    def test_missing_file(self, tmp_path):
        assert load_manifest(tmp_path / "nope.json") is None

    def test_malformed_json_logs_warning(self, tmp_path, caplog):
        path = tmp_path / "package.json"
        path.write_text("{oops")
        with caplog.at_level("WARNING"):
            assert load_manifest(path) is None
        assert "Manifest rejected" in caplog.text


class TestManifestModel:
    """Manifest dict conversion keeps package.json key spelling."""

    def test_to_dict_round_trips_document(self):
        document = {
            "name": "demo",
            "version": "2.0.0",
            "exports": {".": "./index.js"},
            "optionalDependencies": {"fsevents": "^2.0.0"},
            "funding": "https://example.com",
        }
        assert decode_manifest(json.dumps(document)).to_dict() == document

    def test_absent_fields_are_omitted(self):
        assert Manifest(name="x").to_dict() == {"name": "x"}
