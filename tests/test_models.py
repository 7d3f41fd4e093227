"""Tests for data models."""

import dataclasses

import pytest

from bizbuzz.data import (
    BusinessIdentity,
    BusinessRecord,
    GeneratedMetrics,
    Loaded,
    Phase,
    Regenerating,
    Submitting,
    Unset,
    ViewState,
)


def _record(headline: str = "Cake & Co - Where Mumbai Meets Excellence") -> BusinessRecord:
    return BusinessRecord(
        name="Cake & Co",
        location="Mumbai",
        rating=4.5,
        reviews=120,
        headline=headline,
    )


def test_identity_defaults_empty() -> None:
    identity = BusinessIdentity()
    assert identity.name == ""
    assert identity.location == ""


def test_identity_keeps_raw_values() -> None:
    identity = BusinessIdentity(name="  Cake & Co ", location="Mumbai ")
    assert identity.name == "  Cake & Co "
    assert identity.location == "Mumbai "


def test_identity_is_frozen() -> None:
    identity = BusinessIdentity(name="a", location="b")
    with pytest.raises(dataclasses.FrozenInstanceError):
        identity.name = "changed"  # type: ignore[misc]


def test_record_from_metrics_copies_identity() -> None:
    identity = BusinessIdentity(name="Cake & Co", location="Mumbai")
    metrics = GeneratedMetrics(rating=4.2, reviews=80, headline="headline")
    record = BusinessRecord.from_metrics(identity, metrics)
    assert record.name == "Cake & Co"
    assert record.location == "Mumbai"
    assert record.rating == 4.2
    assert record.reviews == 80
    assert record.headline == "headline"
    assert record.identity == identity


def test_with_headline_replaces_only_headline() -> None:
    record = _record()
    updated = record.with_headline("New headline")
    assert updated.headline == "New headline"
    assert updated.name == record.name
    assert updated.location == record.location
    assert updated.rating == record.rating
    assert updated.reviews == record.reviews
    assert record.headline != "New headline"


# -- State variants --


def test_state_variants_carry_phase() -> None:
    record = _record()
    assert Unset().phase is Phase.UNSET
    assert Submitting(BusinessIdentity("a", "b")).phase is Phase.SUBMITTING
    assert Loaded(record).phase is Phase.LOADED
    assert Regenerating(record).phase is Phase.REGENERATING


def test_phase_cannot_be_passed_to_variant() -> None:
    with pytest.raises(TypeError):
        Loaded(_record(), phase=Phase.UNSET)  # type: ignore[call-arg]


def test_regenerating_requires_record() -> None:
    with pytest.raises(TypeError):
        Regenerating()  # type: ignore[call-arg]


def test_phase_values() -> None:
    assert [p.value for p in Phase] == ["unset", "submitting", "loaded", "regenerating"]


# -- ViewState --


def test_view_state_controls_when_unset() -> None:
    view = ViewState(phase=Phase.UNSET)
    assert view.record is None
    assert view.field_errors == {}
    assert view.can_submit
    assert not view.can_regenerate
    assert not view.can_reset
    assert not view.is_loading


def test_view_state_controls_while_submitting() -> None:
    view = ViewState(phase=Phase.SUBMITTING)
    assert view.is_loading
    assert not view.can_submit


def test_view_state_controls_when_loaded() -> None:
    view = ViewState(phase=Phase.LOADED, record=_record())
    assert view.can_regenerate
    assert view.can_reset
    assert not view.can_submit


def test_view_state_controls_while_regenerating() -> None:
    view = ViewState(phase=Phase.REGENERATING, record=_record())
    assert view.is_regenerating
    assert not view.can_regenerate
    assert not view.can_reset
