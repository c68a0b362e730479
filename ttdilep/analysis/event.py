"""
Read-only view of one event in the ttbar di-lepton ntuples.

The event itself is any mapping from branch name to per-candidate
values: a plain dict of lists, a row of an Awkward Array, etc.
"""

from collections import namedtuple

import awkward as ak


ELECTRON_COUNT = "Nel"
MUON_COUNT = "Nmu"

# field name -> ntuple branch
ELECTRON_BRANCHES = {
    "pt": "elPt",
    "eta": "elEta",
    "phi": "elPhi",
    "iso03": "elIso03",
    "miss_hits": "elMissHits",
}

MUON_BRANCHES = {
    "pt": "muPt",
    "eta": "muEta",
    "phi": "muPhi",
    "iso03": "muIso03",
    "hits_valid": "muHitsValid",
    "hits_pixel": "muHitsPixel",
    "dist_pv0": "muDistPV0",
    "dist_pvz": "muDistPVz",
    "chi2ndof": "muTrackChi2NDOF",
}

Electron = namedtuple("Electron", list(ELECTRON_BRANCHES))
Muon = namedtuple("Muon", list(MUON_BRANCHES))


class EventRecord:
    """
    Accessors for the electron and muon candidates of a single event.

    Indices are not checked against the counts; the producer of the
    event guarantees that every per-candidate branch holds at least
    ``Nel`` (``Nmu``) entries.
    """

    def __init__(self, data):
        self._data = data

    @classmethod
    def wrap(cls, event):
        if isinstance(event, cls):
            return event
        return cls(event)

    @property
    def electron_count(self):
        return int(self._data[ELECTRON_COUNT])

    @property
    def muon_count(self):
        return int(self._data[MUON_COUNT])

    def electron(self, index):
        return Electron(*(self._data[b][index] for b in ELECTRON_BRANCHES.values()))

    def muon(self, index):
        return Muon(*(self._data[b][index] for b in MUON_BRANCHES.values()))


def _zip_candidates(arrays, branches, count_branch):
    # drop buffer entries beyond the per-event count
    counts = arrays[count_branch]
    return ak.zip(
        {
            field: arrays[b][ak.local_index(arrays[b]) < counts]
            for field, b in branches.items()
        }
    )


def electron_array(arrays):
    """Electron candidates of a jagged array of events, truncated to ``Nel``."""
    return _zip_candidates(arrays, ELECTRON_BRANCHES, ELECTRON_COUNT)


def muon_array(arrays):
    """Muon candidates of a jagged array of events, truncated to ``Nmu``."""
    return _zip_candidates(arrays, MUON_BRANCHES, MUON_COUNT)
