from importlib import metadata
from versionapp.version import FALLBACK_VERSION, resolve_version


def _missing(name):
    raise metadata.PackageNotFoundError(name)


def test_metadata_version_is_returned():
    assert resolve_version(lookup=lambda name: "2.3.1-beta") == "2.3.1-beta"


def test_missing_distribution_falls_back():
    assert resolve_version(lookup=_missing) == "1.0.0"
    assert FALLBACK_VERSION == "1.0.0"


def test_empty_metadata_falls_back():
    assert resolve_version(lookup=lambda name: "") == FALLBACK_VERSION
    assert resolve_version(lookup=lambda name: "   ") == FALLBACK_VERSION
    assert resolve_version(lookup=lambda name: None) == FALLBACK_VERSION


def test_lookup_receives_distribution_name():
    seen = []

    def lookup(name):
        seen.append(name)
        return "3.0.0"

    assert resolve_version("other-dist", lookup=lookup) == "3.0.0"
    assert seen == ["other-dist"]


def test_stamped_version_kept_verbatim(monkeypatch):
    monkeypatch.setattr("versionapp.__version__", "2.3.1-beta")
    assert resolve_version(lookup=lambda name: "2.3.1b0") == "2.3.1-beta"
    assert resolve_version(lookup=_missing) == "2.3.1-beta"


def test_blank_stamp_uses_metadata(monkeypatch):
    monkeypatch.setattr("versionapp.__version__", "  ")
    assert resolve_version(lookup=lambda name: "2.3.1b0") == "2.3.1b0"
