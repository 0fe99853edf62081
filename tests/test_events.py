import pytest

from core.events import CANONICAL_KEYS, label_for_key, normalize_event, normalize_text


def test_normalize_text():
    assert normalize_text("  100 M   Bröstsim ") == "100 m brostsim"
    assert normalize_text(None) == ""


@pytest.mark.parametrize(
    "raw, key",
    [
        ("100m Frisim", "frisim_100"),
        ("100 Frisim", "frisim_100"),
        ("50 meter freestyle", "frisim_50"),
        ("200 m Frisim", "frisim_200"),
        ("Rygg 100m", "rygg_100"),
        ("100m Ryggsim", "rygg_100"),
        ("100m Bröstsim", "brost_100"),
        ("100 m Breaststroke", "brost_100"),
        ("100m Fjärilsim", "fjaril_100"),
        ("100m Butterfly", "fjaril_100"),
    ],
)
def test_allow_listed_events(raw, key):
    assert normalize_event(raw) == key


@pytest.mark.parametrize(
    "raw",
    ["50 Fjärilsim", "50m Ryggsim", "200m Bröstsim", "400m Frisim", "100m Medley", "Frisim", ""],
)
def test_other_events_are_not_canonical(raw):
    assert normalize_event(raw) is None


def test_label_for_key():
    assert label_for_key("brost_100") == "100 bröst"
    assert label_for_key("unknown") == "unknown"


def test_every_canonical_key_has_a_label():
    assert all(label_for_key(k) != k for k in CANONICAL_KEYS)
