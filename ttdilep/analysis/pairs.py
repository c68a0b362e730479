"""
Best di-lepton pair search.

A single pass over all opposite-sign pairs of selected leptons keeps
the pair with the largest scalar sum of transverse momenta. The same
routine serves the same-flavour channels (unordered pairs within one
collection) and the mixed channel (electron x muon cross product).
"""

import itertools
import logging
from collections import namedtuple

from ttdilep.analysis.physics import build_four_vector


logger = logging.getLogger(__name__)


# p4 is None for candidates failing the quality cuts
Candidate = namedtuple("Candidate", ["index", "signed_pt", "selected", "p4"])

SelectionResult = namedtuple("SelectionResult", ["lep_minus", "lep_plus", "sum_pt"])


def build_candidates(leptons, predicate, mass):
    """
    Evaluate the quality predicate once per lepton and build the
    four-vectors of the selected ones.

    Parameters
    ----------
    leptons : iterable
        Lepton views with at least ``pt``, ``eta`` and ``phi``; the sign
        of ``pt`` is the charge.
    predicate : callable
        Quality selection, ``predicate(lepton) -> bool``.
    mass : float
        Species mass [GeV].

    Returns
    -------
    list of Candidate
        In input order.
    """
    candidates = []
    for index, lep in enumerate(leptons):
        selected = bool(predicate(lep))
        p4 = build_four_vector(lep.pt, lep.eta, lep.phi, mass) if selected else None
        candidates.append(Candidate(index, lep.pt, selected, p4))
    return candidates


def select_best_pair(
    first,
    second=None,
    veto_z_window=False,
    mass_min=12.0,
    z_window=(76.0, 106.0),
    min_sum_pt=None,
    label="",
):
    """
    Select the opposite-sign pair with the highest pT sum.

    Parameters
    ----------
    first : list of Candidate
        Candidates of the first leg.
    second : list of Candidate or None
        Candidates of the second leg. ``None`` pairs ``first`` with
        itself as unordered (i, j), i < j combinations; otherwise the
        full ``first`` x ``second`` product is scanned.
    veto_z_window : bool
        Reject pairs with z_window[0] < m < z_window[1].
    mass_min : float
        Pairs need m > mass_min [GeV].
    z_window : pair of float
        Z mass window [GeV].
    min_sum_pt : float or None
        Lowest accepted pT sum, for chaining the search across channels.
        ``None`` accepts any qualifying pair.
    label : str
        Channel name used in log messages.

    Returns
    -------
    SelectionResult or None
        ``None`` when no pair qualifies. Pairs with equal pT sum replace
        each other, so the last one in enumeration order is returned.
    """
    if second is None:
        pairs = itertools.combinations(first, 2)
    else:
        pairs = itertools.product(first, second)

    z_low, z_high = z_window
    best = None
    best_sum_pt = min_sum_pt

    for a, b in pairs:
        if not a.signed_pt * b.signed_pt < 0:
            continue
        if not (a.selected and b.selected):
            continue

        mass = (a.p4 + b.p4).mass
        if not mass > mass_min:
            continue
        if veto_z_window and z_low < mass < z_high:
            continue

        sum_pt = a.p4.pt + b.p4.pt
        if best_sum_pt is not None and sum_pt < best_sum_pt:
            continue

        best_sum_pt = sum_pt
        lep_minus, lep_plus = (a, b) if a.signed_pt < 0 else (b, a)
        best = SelectionResult(lep_minus.p4, lep_plus.p4, sum_pt)
        logger.debug(
            "%s: pair (%d, %d) accepted, m = %.2f GeV, sum pT = %.2f GeV",
            label, a.index, b.index, mass, sum_pt,
        )

    return best
