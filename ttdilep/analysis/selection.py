"""
Lepton quality selection for the ttbar di-lepton analysis.

The predicates only use element-wise operators, so the same function
accepts a single candidate (``Electron``/``Muon`` namedtuple, returns a
bool) or a record array of candidates (returns an Awkward mask).
"""

from ttdilep.analysis.config import DEFAULT_CONFIG
from ttdilep.analysis.event import electron_array, muon_array


def select_electron(el, pt_min=20.0, eta_max=2.4, iso03_max=0.17, miss_hits_max=0):
    """
    Electron quality cuts.

    Requires |pT| >= pt_min, a central candidate (|eta| <= eta_max),
    relative isolation in a delta_R = 0.3 cone <= iso03_max and no
    missing inner hits.
    """
    return (
        (abs(el.pt) >= pt_min)
        & (abs(el.eta) <= eta_max)
        & (el.iso03 <= iso03_max)
        & (el.miss_hits <= miss_hits_max)
    )


def select_muon(
    mu,
    pt_min=20.0,
    eta_max=2.4,
    iso03_max=0.20,
    hits_valid_min=12,
    hits_pixel_min=2,
    dist_pv0_max=0.02,
    dist_pvz_max=0.5,
    chi2ndof_max=10.0,
):
    """
    Muon quality cuts.

    On top of the pT, eta and isolation requirements, the track needs
    enough tracker and pixel hits, a small transverse (dist_pv0) and
    longitudinal (dist_pvz) distance to the primary vertex, and a good
    global fit (chi2/ndof).
    """
    return (
        (abs(mu.pt) >= pt_min)
        & (abs(mu.eta) <= eta_max)
        & (mu.iso03 <= iso03_max)
        & (mu.hits_valid >= hits_valid_min)
        & (mu.hits_pixel >= hits_pixel_min)
        & (mu.dist_pv0 <= dist_pv0_max)
        & (mu.dist_pvz <= dist_pvz_max)
        & (mu.chi2ndof <= chi2ndof_max)
    )


def lepton_masks(arrays, config=None):
    """
    Per-lepton quality masks for a jagged array of events.

    ``arrays`` holds the ntuple branches (elPt, muPt, ...), one list of
    candidates per event, with the Nel and Nmu counts. Entries beyond
    the counts are dropped. Returns a dict with jagged boolean masks under
    "electron" and "muon".
    """
    cuts = (config or DEFAULT_CONFIG)["selection"]

    electrons = electron_array(arrays)
    muons = muon_array(arrays)

    return {
        "electron": select_electron(electrons, **cuts["electron"]),
        "muon": select_muon(muons, **cuts["muon"]),
    }
