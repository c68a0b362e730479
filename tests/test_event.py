import pytest
ak = pytest.importorskip("awkward")
from ttdilep.analysis.event import EventRecord, Electron, Muon, electron_array, muon_array


def _make_branches():
    # one event; the arrays are longer than the counts, as in fixed-size ntuple buffers
    return {
        "Nel": 1,
        "elPt": [25.0, 99.0],
        "elEta": [0.1, 0.0],
        "elPhi": [0.0, 0.0],
        "elIso03": [0.05, 0.0],
        "elMissHits": [0, 0],
        "Nmu": 2,
        "muPt": [-30.0, 21.0, 99.0],
        "muEta": [-0.2, 1.1, 0.0],
        "muPhi": [1.0, -2.0, 0.0],
        "muIso03": [0.05, 0.1, 0.0],
        "muHitsValid": [14, 12, 0],
        "muHitsPixel": [3, 2, 0],
        "muDistPV0": [0.01, 0.02, 0.0],
        "muDistPVz": [0.1, 0.3, 0.0],
        "muTrackChi2NDOF": [5.0, 1.5, 0.0],
    }


def test_counts_and_candidate_views_from_dict():
    event = EventRecord(_make_branches())

    assert event.electron_count == 1
    assert event.muon_count == 2
    assert event.electron(0) == Electron(25.0, 0.1, 0.0, 0.05, 0)
    assert event.muon(1) == Muon(21.0, 1.1, -2.0, 0.1, 12, 2, 0.02, 0.3, 1.5)


def test_columnar_arrays_truncate_to_counts():
    events = ak.Array({k: [v] for k, v in _make_branches().items()})

    assert ak.to_list(electron_array(events).pt) == [[25.0]]
    assert ak.to_list(muon_array(events).hits_valid) == [[14, 12]]


def test_awkward_record_backend():
    events = ak.Array({k: [v] for k, v in _make_branches().items()})
    event = EventRecord(events[0])

    assert event.muon_count == 2
    mu = event.muon(0)
    assert mu.pt == pytest.approx(-30.0)
    assert mu.hits_pixel == 3


def test_wrap_is_idempotent():
    event = EventRecord(_make_branches())
    assert EventRecord.wrap(event) is event
    assert isinstance(EventRecord.wrap(_make_branches()), EventRecord)
